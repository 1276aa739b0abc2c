"""Rendered pane model: content lines classified for highlighting."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from asqview.domain.model.location import Location


class RowRole(Enum):
    """Display role of one content row."""

    DEFAULT = auto()  # outside the matched span
    MATCHED = auto()  # inside [line-1, line-1+span)


@dataclass(frozen=True, slots=True)
class PaneContent:
    """One side of the viewer (committed or working copy).

    Recomputed on every selection, owns no state beyond the current display.

    Attributes:
        title: Pane caption, e.g. "HEAD:src/main.go"
        lines: Content split into rows
        roles: One RowRole per row
        error: Human-readable failure message. None = content loaded.
        scroll_row: 0-based row the pane should scroll to
    """

    title: str
    lines: tuple[str, ...]
    roles: tuple[RowRole, ...]
    error: str | None = None
    scroll_row: int = 0

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if len(self.lines) != len(self.roles):
            raise ValueError(
                f"lines and roles must have same length, got {len(self.lines)} and {len(self.roles)}"
            )
        if self.scroll_row < 0:
            raise ValueError(f"scroll_row must be >= 0, got {self.scroll_row}")

    @property
    def failed(self) -> bool:
        """True if content could not be retrieved."""
        return self.error is not None

    @property
    def matched_count(self) -> int:
        """Number of highlighted rows."""
        return sum(1 for role in self.roles if role is RowRole.MATCHED)


@dataclass(frozen=True, slots=True)
class Selection:
    """Result of selecting one location in the viewer.

    Attributes:
        index: Position in the session's location list
        location: Selected location
        committed: Content from the version-control snapshot
        working: Content from the working tree
    """

    index: int
    location: Location
    committed: PaneContent
    working: PaneContent

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.index < 0:
            raise ValueError(f"index must be >= 0, got {self.index}")
