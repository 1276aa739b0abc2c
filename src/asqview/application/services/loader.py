"""Location loaders: flat location files and annotated match streams.

Both loaders return locations in input order. Duplicates are kept and an
empty result is valid.
"""

from __future__ import annotations

import io
import logging
from typing import TYPE_CHECKING

from asqview.application.services.parser import parse_location_result
from asqview.domain.exceptions import LocationFileError
from asqview.domain.model.configuration import DEFAULT_MARKER

if TYPE_CHECKING:
    import os
    from collections.abc import Iterable

    from asqview.domain.model.location import Location

logger = logging.getLogger(__name__)


def read_location_file(path: str | os.PathLike[str], *, encoding: str = "utf-8") -> tuple[Location, ...]:
    """Load flat location file, one `path:line:column` per line.

    Empty lines are skipped. Every other line is kept, parsed or not.

    Args:
        path: Location file
        encoding: File encoding

    Returns:
        Locations in file order.

    Raises:
        LocationFileError: File cannot be opened or decoded, or encoding is unknown.
    """
    try:
        with open(path, encoding=encoding) as f:
            return tuple(_parse_lines(f))
    except (OSError, UnicodeError, LookupError) as e:
        raise LocationFileError(path=str(path), reason=str(e)) from e


def load_location_file(path: str | os.PathLike[str], *, encoding: str = "utf-8") -> tuple[Location, ...]:
    """Load flat location file. Unreadable file yields no locations.

    Same as read_location_file() but a read failure is logged and
    an empty tuple returned.
    """
    try:
        locations = read_location_file(path, encoding=encoding)
    except LocationFileError as e:
        logger.warning("%s", e)
        return ()
    logger.info("loaded %d location(s) from %s", len(locations), path)
    return locations


def load_annotated_stream(
    stream: Iterable[str],
    *,
    marker: str = DEFAULT_MARKER,
) -> tuple[Location, ...]:
    """Rebuild locations and their spans from annotated output.

    A line starting with marker opens a new match; the rest of the line is
    its location. Following non-marker lines belong to that match and set
    its span_line_count. Lines before the first marker are ignored.
    Undecodable input ends the stream; matches read so far are kept.

    Args:
        stream: Lines of text (file object, list, stdin)
        marker: Prefix introducing a match

    Returns:
        Locations in stream order, each with its span length.
    """
    if not marker:
        raise ValueError("marker must be non-empty")

    locations: list[Location] = []
    span = 0
    ignored = 0

    try:
        for raw in stream:
            line = raw.rstrip("\r\n")
            if line.startswith(marker):
                if locations:
                    locations[-1] = locations[-1].with_span(span)
                span = 0
                result = parse_location_result(line[len(marker) :])
                if result.degraded:
                    logger.debug("degraded match location %r: %s", line, result.reason)
                locations.append(result.location)
            elif locations:
                span += 1
            else:
                ignored += 1
    except UnicodeDecodeError as e:
        logger.warning("annotated stream is not valid text, stopped reading: %s", e)

    # Last match finalized like any other, including span 0
    if locations:
        locations[-1] = locations[-1].with_span(span)

    if ignored:
        logger.debug("ignored %d line(s) before first marker", ignored)
    logger.info("loaded %d match(es) from annotated stream", len(locations))
    return tuple(locations)


def load_annotated_text(text: str, *, marker: str = DEFAULT_MARKER) -> tuple[Location, ...]:
    """load_annotated_stream() over an in-memory string."""
    return load_annotated_stream(io.StringIO(text), marker=marker)


def _parse_lines(lines: Iterable[str]) -> Iterable[Location]:
    """Parse every non-empty line."""
    for number, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        if not line:
            continue
        result = parse_location_result(line)
        if result.degraded:
            logger.debug("line %d: degraded location %r: %s", number, line, result.reason)
        yield result.location
