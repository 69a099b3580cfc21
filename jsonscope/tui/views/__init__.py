"""Screens of the TUI application."""

from jsonscope.tui.views.compare_screen import CompareScreen
from jsonscope.tui.views.viewer_screen import ViewerScreen

__all__ = [
    "CompareScreen",
    "ViewerScreen",
]
