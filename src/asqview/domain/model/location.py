"""Source code location value object."""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True, slots=True)
class Location:
    """Position of a match in a source file.

    Attributes:
        path: File path as given by the producer (relative or absolute)
        line: Line number (1-based, must be > 0)
        column: Column number (1-based, must be > 0)
        span_line_count: Lines covered by the match starting at line.
            0 = single line / unknown span.
    """

    path: str
    line: int = 1
    column: int = 1
    span_line_count: int = 0

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.path, str):
            raise TypeError(f"path must be str, got {type(self.path).__name__}")
        if self.line <= 0:
            raise ValueError(f"line must be > 0, got {self.line}")
        if self.column <= 0:
            raise ValueError(f"column must be > 0, got {self.column}")
        if self.span_line_count < 0:
            raise ValueError(f"span_line_count must be >= 0, got {self.span_line_count}")

    @property
    def first_row(self) -> int:
        """0-based row of the first matched line."""
        return self.line - 1

    @property
    def row_range(self) -> range:
        """0-based rows covered by the span (empty for span 0)."""
        return range(self.first_row, self.first_row + self.span_line_count)

    def with_span(self, span_line_count: int) -> Location:
        """Return copy with a different span length."""
        return replace(self, span_line_count=span_line_count)

    def __str__(self) -> str:
        """Format as path:line:column."""
        return f"{self.path}:{self.line}:{self.column}"
