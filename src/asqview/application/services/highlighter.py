"""Span highlighter: which rows of a file fall inside a match.

Whole-line granularity. Column is available on Location but not used.
Pure functions, no state.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from asqview.domain.model.pane import RowRole

if TYPE_CHECKING:
    from collections.abc import Sequence

    from asqview.domain.model.location import Location


def split_content(text: str) -> tuple[str, ...]:
    """Split text into rows on "\\n". Trailing newline gives a final empty row."""
    return tuple(text.split("\n"))


def is_matched(row: int, location: Location) -> bool:
    """Check if 0-based row is inside the location's span."""
    start = location.line - 1
    return start <= row < start + location.span_line_count


def classify_rows(lines: Sequence[str], location: Location) -> tuple[RowRole, ...]:
    """Assign a RowRole to every row.

    Args:
        lines: Content rows
        location: Match location with span

    Returns:
        One role per row, same length as lines.
    """
    return tuple(
        RowRole.MATCHED if is_matched(row, location) else RowRole.DEFAULT for row in range(len(lines))
    )


def matched_rows(lines: Sequence[str], location: Location) -> tuple[int, ...]:
    """0-based indices of matched rows that exist in lines."""
    return tuple(row for row in location.row_range if 0 <= row < len(lines))
