"""Presentation layer: command line and terminal UI.

The TUI package imports textual; import it explicitly when needed.
"""

from asqview.presentation.cli import build_parser, main, run

__all__ = ["build_parser", "main", "run"]
