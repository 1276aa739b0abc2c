"""Renderer protocol: contract for headless renderers."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from asqview.domain.model.location import Location
    from asqview.domain.model.pane import Selection


class RendererProtocol(Protocol):
    """Protocol for location list and selection renderers.

    Output is str, not print(). Caller decides destination.
    """

    def render_list(self, locations: tuple[Location, ...]) -> str:
        """Format the location list."""
        ...

    def render_selection(self, selection: Selection) -> str:
        """Format both panes of a selection."""
        ...
