"""Headless renderers for locations and selections."""

from asqview.application.renderers.console import ConsoleConfig, ConsoleRenderer, render_pane_text
from asqview.application.renderers.protocol import RendererProtocol

__all__ = [
    "ConsoleConfig",
    "ConsoleRenderer",
    "RendererProtocol",
    "render_pane_text",
]
