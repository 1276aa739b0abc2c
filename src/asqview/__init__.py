"""asqview - side-by-side viewer of match locations in committed and working copies."""

__version__ = "0.1.0"

from asqview.application.services import (
    load_annotated_stream,
    load_location_file,
    parse_location,
)
from asqview.application.session import ViewerSession
from asqview.domain.model import Location, ViewerConfig

__all__ = [
    "Location",
    "ViewerConfig",
    "ViewerSession",
    "load_annotated_stream",
    "load_location_file",
    "parse_location",
    "__version__",
]
