"""Viewer session: the loaded locations and the current selection.

Owned by the top-level controller (TUI app or console runner) and passed
to the code that renders and handles selection. No caching: every select()
re-reads both contents.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from asqview.application.services.highlighter import classify_rows, split_content
from asqview.domain.exceptions import ContentRetrievalError
from asqview.domain.model.pane import PaneContent, RowRole, Selection

if TYPE_CHECKING:
    from collections.abc import Iterable

    from asqview.domain.model.location import Location
    from asqview.domain.ports.content_source import ContentSourcePort

logger = logging.getLogger(__name__)


class ViewerSession:
    """State of one viewing session.

    Locations are replaced as a whole on reload and never mutated.
    """

    def __init__(
        self,
        committed_source: ContentSourcePort,
        working_source: ContentSourcePort,
        locations: Iterable[Location] = (),
    ) -> None:
        """Initialize session.

        Args:
            committed_source: Source of the version-control snapshot content
            working_source: Source of the working tree content
            locations: Initially loaded locations
        """
        if committed_source is None:
            raise TypeError("committed_source must not be None")
        if working_source is None:
            raise TypeError("working_source must not be None")

        self._committed_source = committed_source
        self._working_source = working_source
        self._locations: tuple[Location, ...] = tuple(locations)
        self._selected_index: int | None = None

    @property
    def locations(self) -> tuple[Location, ...]:
        """Loaded locations in load order."""
        return self._locations

    @property
    def selected_index(self) -> int | None:
        """Index of the current selection. None = nothing selected."""
        return self._selected_index

    @property
    def selected(self) -> Location | None:
        """Currently selected location."""
        if self._selected_index is None:
            return None
        return self._locations[self._selected_index]

    def __len__(self) -> int:
        return len(self._locations)

    def replace_locations(self, locations: Iterable[Location]) -> None:
        """Swap in a new load result. Clears the selection."""
        self._locations = tuple(locations)
        self._selected_index = None

    def select(self, index: int) -> Selection | None:
        """Select location and compute both panes.

        Args:
            index: Position in locations

        Returns:
            Selection, or None if index is out of range (state unchanged).
        """
        if not 0 <= index < len(self._locations):
            logger.debug("ignoring selection %d of %d location(s)", index, len(self._locations))
            return None

        self._selected_index = index
        location = self._locations[index]
        return Selection(
            index=index,
            location=location,
            committed=build_pane(self._committed_source, location),
            working=build_pane(self._working_source, location),
        )

    def reselect(self) -> Selection | None:
        """Recompute the current selection from fresh content."""
        if self._selected_index is None:
            return None
        return self.select(self._selected_index)


def build_pane(source: ContentSourcePort, location: Location) -> PaneContent:
    """Read content for location and classify its rows.

    A failed read becomes the pane content: the error text is shown in place
    of the source, one row per message line, nothing highlighted.
    """
    title = source.title(location.path)
    try:
        text = source.read(location.path)
    except ContentRetrievalError as e:
        logger.warning("%s", e)
        message = f"{source.error_prefix}: {e.reason}"
        lines = split_content(message)
        return PaneContent(
            title=title,
            lines=lines,
            roles=tuple(RowRole.DEFAULT for _ in lines),
            error=message,
        )

    lines = split_content(text)
    return PaneContent(
        title=title,
        lines=lines,
        roles=classify_rows(lines, location),
        scroll_row=min(location.first_row, max(len(lines) - 1, 0)),
    )
