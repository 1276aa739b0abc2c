"""Core services: location parsing, loading and span highlighting."""

from asqview.application.services.highlighter import (
    classify_rows,
    is_matched,
    matched_rows,
    split_content,
)
from asqview.application.services.loader import (
    load_annotated_stream,
    load_annotated_text,
    load_location_file,
    read_location_file,
)
from asqview.application.services.parser import parse_location, parse_location_result

__all__ = [
    # Parser
    "parse_location",
    "parse_location_result",
    # Loader
    "read_location_file",
    "load_location_file",
    "load_annotated_stream",
    "load_annotated_text",
    # Highlighter
    "split_content",
    "is_matched",
    "classify_rows",
    "matched_rows",
]
