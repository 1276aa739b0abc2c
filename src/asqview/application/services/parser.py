"""Parser service: one `path:line:column` line to Location.

Never raises on malformed text. Fallbacks are reported through
ParseResult.reason so callers can tell clean parses from degraded ones.
"""

from __future__ import annotations

from asqview.domain.model.location import Location
from asqview.domain.model.parse_result import ParseResult

# path, line, column
_FIELD_COUNT = 3


def parse_location(raw: str) -> Location:
    """Parse location line, best effort.

    Args:
        raw: Text like "src/main.go:10:3"

    Returns:
        Location. Malformed input yields the whole text as path at 1:1.
    """
    return parse_location_result(raw).location


def parse_location_result(raw: str) -> ParseResult:
    """Parse location line and report whether defaults were used.

    Splits on ":" into at most 3 parts. Anything other than exactly 3 parts
    is treated as an opaque path. Paths containing ":" are not supported.

    Args:
        raw: Text like "src/main.go:10:3"

    Returns:
        ParseResult with location and fallback reason (None if clean).
    """
    parts = raw.split(":", _FIELD_COUNT - 1)
    if len(parts) != _FIELD_COUNT:
        return ParseResult(
            location=Location(path=raw),
            reason=f"expected path:line:column, got {len(parts)} field(s)",
        )

    path, line_text, column_text = parts
    line, line_reason = _parse_position(line_text, "line")
    column, column_reason = _parse_position(column_text, "column")

    reasons = [r for r in (line_reason, column_reason) if r is not None]
    return ParseResult(
        location=Location(path=path, line=line, column=column),
        reason="; ".join(reasons) if reasons else None,
    )


def _parse_position(text: str, field: str) -> tuple[int, str | None]:
    """Parse 1-based position. Defaults to 1 on failure."""
    try:
        value = int(text)
    except ValueError:
        return 1, f"{field} {text!r} is not an integer"
    if value <= 0:
        return 1, f"{field} must be > 0, got {value}"
    return value, None
