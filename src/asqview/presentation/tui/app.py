"""Textual viewer: location list on top, committed and working copies below.

All work runs synchronously in event handlers. Selecting an entry re-reads
both contents through the session and scrolls both panes to the match.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from rich.markup import escape
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, ScrollableContainer, Vertical
from textual.widgets import Footer, Header, Label, ListItem, ListView, Static

from asqview.application.renderers.console import render_pane_text
from asqview.domain.model.configuration import ViewerConfig

if TYPE_CHECKING:
    from asqview.application.session import ViewerSession
    from asqview.domain.model.location import Location
    from asqview.domain.model.pane import PaneContent, Selection

logger = logging.getLogger(__name__)

PLACEHOLDER = "Select a location from the list."
EMPTY_PLACEHOLDER = "No locations loaded."


class LocationItem(ListItem):
    """List entry labelled path:line:column."""

    def __init__(self, location: Location, location_index: int) -> None:
        super().__init__(Label(str(location), markup=False))
        self.location = location
        self.location_index = location_index


class AsqViewerApp(App[None]):
    """Side-by-side viewer of committed and working copies of match locations."""

    TITLE = "ASQ GUI"

    CSS = """
    Screen { layout: vertical; }
    #locations { height: 30%; }
    #panes { height: 1fr; }
    .pane { height: 1fr; }
    .pane-title { height: 1; text-style: bold; }
    .code-scroll { height: 1fr; overflow: auto auto; }
    .code { width: auto; }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("r", "reload", "Reload"),
    ]

    def __init__(self, session: ViewerSession, config: ViewerConfig | None = None) -> None:
        """Initialize app.

        Args:
            session: Loaded locations and content sources
            config: Viewer configuration. Uses defaults if None.
        """
        super().__init__()
        if session is None:
            raise TypeError("session must not be None")
        self.session = session
        self.config = config or ViewerConfig()
        self.current_selection: Selection | None = None

    def compose(self) -> ComposeResult:
        yield Header()
        yield ListView(
            *(LocationItem(location, index) for index, location in enumerate(self.session.locations)),
            id="locations",
        )
        with Horizontal(id="panes"):
            for name in ("committed", "working"):
                with Vertical(id=f"{name}-pane", classes="pane"):
                    yield Static("", id=f"{name}-title", classes="pane-title")
                    with ScrollableContainer(id=f"{name}-scroll", classes="code-scroll"):
                        yield Static(self._placeholder_text(), id=name, classes="code")
        yield Footer()

    def on_mount(self) -> None:
        self._style_layout()
        self.query_one("#locations", ListView).focus()
        if len(self.session):
            self.show_location(0)

    def on_list_view_highlighted(self, event: ListView.Highlighted) -> None:
        if isinstance(event.item, LocationItem):
            self.show_location(event.item.location_index)

    def on_list_view_selected(self, event: ListView.Selected) -> None:
        if isinstance(event.item, LocationItem):
            self.show_location(event.item.location_index)

    def action_reload(self) -> None:
        """Re-read both contents of the current selection."""
        selection = self.session.reselect()
        if selection is not None:
            self._show_selection(selection)

    def show_location(self, index: int) -> Selection | None:
        """Select location by index and render both panes.

        Args:
            index: Position in the session's locations

        Returns:
            Selection shown, None if index is out of range.
        """
        selection = self.session.select(index)
        if selection is None:
            return None
        self._show_selection(selection)
        return selection

    def _show_selection(self, selection: Selection) -> None:
        """Render selection into both panes and scroll to the match."""
        self.current_selection = selection
        self.sub_title = str(selection.location)
        self._fill_pane("committed", selection.committed)
        self._fill_pane("working", selection.working)
        logger.debug("showing %s", selection.location)

    def _fill_pane(self, name: str, pane: PaneContent) -> None:
        self.query_one(f"#{name}-title", Static).update(escape(pane.title))
        self.query_one(f"#{name}", Static).update(render_pane_text(pane, self.config.theme))
        scroll = self.query_one(f"#{name}-scroll", ScrollableContainer)
        self.call_after_refresh(scroll.scroll_to, x=0, y=pane.scroll_row, animate=False)

    def _placeholder_text(self) -> str:
        return PLACEHOLDER if len(self.session) else EMPTY_PLACEHOLDER

    def _style_layout(self) -> None:
        """Colours and split ratios from config."""
        theme = self.config.theme
        self.screen.styles.background = theme.background
        self.screen.styles.color = theme.foreground

        locations = self.query_one("#locations", ListView)
        locations.styles.height = f"{round(self.config.list_ratio * 100)}%"
        locations.styles.background = theme.background
        locations.styles.border_bottom = ("solid", theme.separator)

        committed = self.query_one("#committed-pane", Vertical)
        committed.styles.width = f"{round(self.config.pane_ratio * 100)}%"
        committed.styles.border_right = ("solid", theme.separator)
        self.query_one("#working-pane", Vertical).styles.width = "1fr"

        for scroll in self.query(".code-scroll"):
            scroll.styles.background = theme.background
        for title in self.query(".pane-title"):
            title.styles.color = theme.disabled
