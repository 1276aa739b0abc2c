"""Viewer configuration DTOs.

Immutable configuration objects with FAIL-FIRST validation.
Built by the CLI from command line flags; every field has a default.
"""

from __future__ import annotations

import codecs
from dataclasses import dataclass, field

DEFAULT_MARKER = "//asq_match "
DEFAULT_REF = "HEAD"


@dataclass(frozen=True, slots=True)
class ViewerTheme:
    """Colour scheme: green text on black, matched rows in blue.

    Values are any colour string understood by rich/textual.

    Attributes:
        background: Pane and list background
        foreground: Default text colour
        disabled: Text colour for disabled widgets
        matched: Text colour for rows inside the matched span
        separator: Split divider colour
    """

    background: str = "#000000"
    foreground: str = "#00ff00"
    disabled: str = "#008000"
    matched: str = "#0000ff"
    separator: str = "#808080"

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        for name in ("background", "foreground", "disabled", "matched", "separator"):
            if not getattr(self, name):
                raise ValueError(f"{name} must be non-empty colour string")


@dataclass(frozen=True, slots=True)
class ViewerConfig:
    """Top-level viewer configuration.

    Attributes:
        marker: Prefix introducing a match in the annotated stream
        ref: Version-control snapshot for the committed pane
        git: Git executable
        encoding: Encoding for location files and file contents
        list_ratio: Height share of the location list (0 < x < 1)
        pane_ratio: Width share of the committed pane (0 < x < 1)
        theme: Colour scheme
    """

    marker: str = DEFAULT_MARKER
    ref: str = DEFAULT_REF
    git: str = "git"
    encoding: str = "utf-8"
    list_ratio: float = 0.3
    pane_ratio: float = 0.5
    theme: ViewerTheme = field(default_factory=ViewerTheme)

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.marker:
            raise ValueError("marker must be non-empty")
        if not self.ref:
            raise ValueError("ref must be non-empty")
        if not self.git:
            raise ValueError("git must be non-empty")
        if not self.encoding:
            raise ValueError("encoding must be non-empty")
        try:
            codecs.lookup(self.encoding)
        except LookupError as e:
            raise ValueError(f"unknown encoding: {self.encoding}") from e
        if not 0 < self.list_ratio < 1:
            raise ValueError(f"list_ratio must be in (0, 1), got {self.list_ratio}")
        if not 0 < self.pane_ratio < 1:
            raise ValueError(f"pane_ratio must be in (0, 1), got {self.pane_ratio}")
