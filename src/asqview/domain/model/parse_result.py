"""Outcome of parsing one location line."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from asqview.domain.model.location import Location


@dataclass(frozen=True, slots=True)
class ParseResult:
    """Parsed location plus the reason it fell back to defaults, if any.

    A clean parse has reason=None. A degraded parse still carries a usable
    Location (best effort), so callers never need to handle a missing value.

    Attributes:
        location: Best-effort location
        reason: Why defaults were used. None = clean parse.
    """

    location: Location
    reason: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.location is None:
            raise TypeError("location must not be None")
        if self.reason is not None and not self.reason:
            raise ValueError("reason must be non-empty string or None")

    @property
    def degraded(self) -> bool:
        """True if any field fell back to its default."""
        return self.reason is not None
