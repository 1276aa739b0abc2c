"""Console renderer: locations and selections -> rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass, field
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.style import Style
from rich.table import Table
from rich.text import Text

from asqview.domain.model.configuration import ViewerTheme
from asqview.domain.model.pane import RowRole

if TYPE_CHECKING:
    from asqview.domain.model.location import Location
    from asqview.domain.model.pane import PaneContent, Selection


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console renderer.

    Attributes:
        width: Console width in cells.
        show_line_numbers: Prefix pane rows with 1-based line numbers.
        color: Emit ANSI colour codes.
        theme: Colours for default and matched rows.
    """

    width: int = 120
    show_line_numbers: bool = False
    color: bool = True
    theme: ViewerTheme = field(default_factory=ViewerTheme)

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.width <= 0:
            raise ValueError(f"width must be > 0, got {self.width}")


def render_pane_text(pane: PaneContent, theme: ViewerTheme, *, line_numbers: bool = False) -> Text:
    """Build styled text for one pane.

    Every row gets the foreground colour, rows inside the span the matched
    colour. Error panes are rendered in the foreground colour only.
    """
    default_style = Style(color=theme.foreground, bgcolor=theme.background)
    matched_style = Style(color=theme.matched, bgcolor=theme.background)
    number_width = len(str(len(pane.lines)))

    text = Text(no_wrap=True, end="")
    for row, (line, role) in enumerate(zip(pane.lines, pane.roles, strict=True)):
        if row:
            text.append("\n")
        if line_numbers:
            text.append(f"{row + 1:>{number_width}} ", style=Style(color=theme.disabled))
        text.append(line, style=matched_style if role is RowRole.MATCHED else default_style)
    return text


class ConsoleRenderer:
    """Console renderer: outputs rich formatted text.

    Output is str, not print(). Caller decides destination.
    """

    def __init__(self, config: ConsoleConfig | None = None) -> None:
        """Initialize renderer.

        Args:
            config: Renderer configuration. Uses defaults if None.
        """
        self._config = config or ConsoleConfig()

    def render_list(self, locations: tuple[Location, ...]) -> str:
        """Format locations as a numbered table.

        Args:
            locations: Locations to list.

        Returns:
            Formatted string.
        """
        output, console = self._console()

        console.rule("[bold]LOCATIONS[/bold]")
        if not locations:
            console.print("[dim]No locations loaded.[/dim]")
            return output.getvalue()

        table = Table(show_header=True, header_style="bold", box=None)
        table.add_column("#", style="dim", justify="right")
        table.add_column("Location", style="cyan")
        table.add_column("Span", justify="right")

        for index, location in enumerate(locations):
            table.add_row(str(index), escape(str(location)), str(location.span_line_count))

        console.print(table)
        console.print(f"[bold]Total:[/bold] {len(locations)}")
        return output.getvalue()

    def render_selection(self, selection: Selection) -> str:
        """Format committed and working panes of a selection.

        Args:
            selection: Selection computed by the session.

        Returns:
            Formatted string, committed pane first.
        """
        output, console = self._console()

        console.rule(f"[bold]{escape(str(selection.location))}[/bold]")
        for pane in (selection.committed, selection.working):
            self._render_pane(console, pane)

        return output.getvalue()

    def _render_pane(self, console: Console, pane: PaneContent) -> None:
        """Render one pane with caption."""
        theme = self._config.theme
        status = "[bold red]ERROR[/bold red]" if pane.failed else f"matched rows: {pane.matched_count}"
        console.print()
        console.print(f"[bold]{escape(pane.title)}[/bold] ({status})")
        console.print(render_pane_text(pane, theme, line_numbers=self._config.show_line_numbers))

    def _console(self) -> tuple[StringIO, Console]:
        """Fresh string-backed console."""
        output = StringIO()
        console = Console(
            file=output,
            force_terminal=self._config.color,
            no_color=not self._config.color,
            width=self._config.width,
        )
        return output, console
