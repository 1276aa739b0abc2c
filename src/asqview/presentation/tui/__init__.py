"""Terminal UI built on textual."""

from asqview.presentation.tui.app import AsqViewerApp, LocationItem

__all__ = ["AsqViewerApp", "LocationItem"]
