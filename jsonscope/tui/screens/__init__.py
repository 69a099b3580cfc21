"""Modal screens for the TUI application."""

from jsonscope.tui.screens.open_file import OpenFileModal

__all__ = [
    "OpenFileModal",
]
