"""Mixins for the TUI application."""

from jsonscope.tui.mixins.dual_pane import DualPaneMixin

__all__ = [
    "DualPaneMixin",
]
