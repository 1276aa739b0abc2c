"""Application layer.

- services: location parsing, loading, span highlighting
- session: viewer state and selection handling
- renderers: headless output (console)
"""

from asqview.application.renderers import ConsoleConfig, ConsoleRenderer, render_pane_text
from asqview.application.services import (
    classify_rows,
    is_matched,
    load_annotated_stream,
    load_annotated_text,
    load_location_file,
    matched_rows,
    parse_location,
    parse_location_result,
    read_location_file,
    split_content,
)
from asqview.application.session import ViewerSession, build_pane

__all__ = [
    # Services
    "parse_location",
    "parse_location_result",
    "read_location_file",
    "load_location_file",
    "load_annotated_stream",
    "load_annotated_text",
    "split_content",
    "is_matched",
    "classify_rows",
    "matched_rows",
    # Session
    "ViewerSession",
    "build_pane",
    # Renderers
    "ConsoleConfig",
    "ConsoleRenderer",
    "render_pane_text",
]
