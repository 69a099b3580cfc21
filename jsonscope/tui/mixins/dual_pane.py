"""
Dual Pane Mixin for left/right panel switching functionality.

Provides consistent panel switching behavior across dual-pane screens:
- action_switch_panel(): Toggle between left and right panels
- _update_panel_styles(): Update active/inactive CSS classes on panels
- _focus_active_widget(): Abstract method subclasses must implement

Usage:
    class MyDualPaneScreen(DualPaneMixin, Screen):
        BINDINGS = DualPaneMixin.DUAL_PANE_BINDINGS + [...]

        def _focus_active_widget(self) -> None:
            # Focus the appropriate widget in the active panel
            ...
"""

from __future__ import annotations

from textual.binding import Binding
from textual.css.query import NoMatches


class DualPaneMixin:
    """Mixin for screens with left/right panel switching.

    Manages panel state and switching for screens that display two panels
    side-by-side. Subclasses must implement _focus_active_widget() to
    define how focus moves within the active panel.

    Function keys are used so that the bindings keep working while a
    TextArea inside a panel has focus.

    Class Attributes:
        DUAL_PANE_BINDINGS: Bindings shared by all dual-pane screens.
    """

    DUAL_PANE_BINDINGS = [
        Binding("f10", "switch_panel", "Switch Panel", show=True),
        Binding("escape", "go_back", "Back", show=True),
        Binding("ctrl+q", "quit", "Quit", show=False, priority=True),
    ]

    _active_panel: str = "left"
    """Currently active panel identifier ('left' or 'right')."""

    @property
    def is_left_active(self) -> bool:
        return self._active_panel == "left"

    @property
    def is_right_active(self) -> bool:
        return self._active_panel == "right"

    def action_switch_panel(self) -> None:
        """Toggle between left and right panels.

        Updates panel styles and transfers focus to the newly active panel.
        """
        self._active_panel = "right" if self._active_panel == "left" else "left"
        self._update_panel_styles()
        self._focus_active_widget()

    def action_go_back(self) -> None:
        """Leave the screen. Subclasses may override."""
        self.app.pop_screen()

    def action_quit(self) -> None:
        """Exit the application."""
        self.app.exit()

    def _update_panel_styles(self) -> None:
        """Update active/inactive CSS classes on #left-panel and #right-panel.

        Missing panels are ignored.
        """
        try:
            left = self.query_one("#left-panel")
            right = self.query_one("#right-panel")
        except NoMatches:
            return

        for panel, is_active in [(left, self.is_left_active), (right, self.is_right_active)]:
            panel.set_class(is_active, "active")
            panel.set_class(not is_active, "inactive")

    def _focus_active_widget(self) -> None:
        """Focus the appropriate widget in the active panel.

        Subclasses must implement this method to define how focus
        is transferred when switching panels.
        """
        raise NotImplementedError(
            f"{self.__class__.__name__} must implement _focus_active_widget()"
        )
