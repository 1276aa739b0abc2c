"""asqview domain layer.

Pure domain logic with no external dependencies.
Only imports: typing, dataclasses, enum, codecs
"""

from asqview.domain.exceptions import (
    AsqViewError,
    ContentRetrievalError,
    LocationFileError,
)
from asqview.domain.model import (
    Location,
    PaneContent,
    ParseResult,
    RowRole,
    Selection,
    ViewerConfig,
    ViewerTheme,
)
from asqview.domain.ports import ContentSourcePort

__all__ = [
    # Exceptions
    "AsqViewError",
    "ContentRetrievalError",
    "LocationFileError",
    # Value objects
    "Location",
    "ParseResult",
    "RowRole",
    "PaneContent",
    "Selection",
    # Configuration
    "ViewerConfig",
    "ViewerTheme",
    # Ports
    "ContentSourcePort",
]
