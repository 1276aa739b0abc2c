"""Domain model entities."""

from asqview.domain.model.configuration import (
    DEFAULT_MARKER,
    DEFAULT_REF,
    ViewerConfig,
    ViewerTheme,
)
from asqview.domain.model.location import Location
from asqview.domain.model.pane import PaneContent, RowRole, Selection
from asqview.domain.model.parse_result import ParseResult

__all__ = [
    # Value objects
    "Location",
    "ParseResult",
    # Display
    "RowRole",
    "PaneContent",
    "Selection",
    # Configuration
    "DEFAULT_MARKER",
    "DEFAULT_REF",
    "ViewerConfig",
    "ViewerTheme",
]
