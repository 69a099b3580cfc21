"""
Compare Screen for side-by-side comparison of two documents.

Two editors sit above a dual-column diff. Both documents are parsed,
normalized (object keys sorted) and pretty-printed, and the printed texts
are diffed line by line. Removed lines are shown on the left, added lines
on the right, each column with its own line numbers.
"""

from __future__ import annotations

import logging

from textual import events
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import Screen
from textual.widgets import Footer, Header, Static, TextArea

from jsonscope.config import ViewerConfig
from jsonscope.core import ComparisonResult, summarize
from jsonscope.parsers import detect_dialect
from jsonscope.tui.documents import ParseOutcome, compare_sources, load_source_file
from jsonscope.tui.mixins import DualPaneMixin
from jsonscope.tui.screens import OpenFileModal
from jsonscope.tui.views.viewer_screen import next_dialect
from jsonscope.tui.widgets import DiffView, SourceOverlay

logger = logging.getLogger(__name__)

PLACEHOLDER_TEXT = "Ready to compare\n\nEnter a document on each side to see the differences."
NO_DIFFERENCES_TEXT = "✅ No differences"


def describe_result(result: ComparisonResult) -> str:
    """Return the status line for a comparison.

    Examples:
        >>> describe_result(ComparisonResult(error="cycle detected"))
        'Comparison failed: cycle detected'
    """
    if result.error is not None:
        return f"Comparison failed: {result.error}"
    if not result.runs:
        return ""
    if result.identical:
        return NO_DIFFERENCES_TEXT
    counts = summarize(result.columns)
    return (
        f"-{counts['removed']} removed  "
        f"+{counts['added']} added  "
        f"{counts['unchanged']} unchanged"
    )


class CompareScreen(DualPaneMixin, Screen[str]):
    """Side-by-side comparison of two documents.

    Dismisses with the right editor's text so the viewer can restore it
    the next time the comparison is opened.
    """

    CSS = """
    CompareScreen {
        layout: vertical;
    }

    #editor-container {
        height: 2fr;
    }

    #left-panel, #right-panel {
        width: 50%;
        padding: 0 1;
    }

    #left-panel.active, #right-panel.active {
        border: solid $secondary;
    }

    #left-panel.inactive, #right-panel.inactive {
        border: solid $primary-darken-2;
    }

    #left-source, #right-source {
        height: 1fr;
    }

    #left-overlay, #right-overlay {
        max-height: 40%;
        overflow-y: auto;
    }

    #diff-status {
        height: 1;
        padding: 0 1;
        background: $boost;
        text-style: bold;
    }

    #diff-placeholder {
        height: 3fr;
        content-align: center middle;
        text-align: center;
        color: $text-muted;
    }

    #diff-view {
        height: 3fr;
    }
    """

    BINDINGS = DualPaneMixin.DUAL_PANE_BINDINGS + [
        Binding("f2", "switch_dialect", "Dialect"),
        Binding("f7", "open_file", "Open"),
        Binding("f8", "clear_active", "Clear"),
        Binding("f9", "go_back", "Viewer"),
        Binding("f12", "clear_both", "Clear Both"),
    ]

    def __init__(
        self,
        config: ViewerConfig,
        left_text: str = "",
        right_text: str = "",
        search: str = "",
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        """Initialize the CompareScreen.

        Args:
            config: Settings shared with the viewer screen.
            left_text: Text placed in the left editor.
            right_text: Text placed in the right editor.
            search: Search term highlighted in both source overlays.
            name: Optional name for the screen.
            id: Optional ID for the screen.
            classes: Optional CSS classes for the screen.
        """
        super().__init__(name=name, id=id, classes=classes)
        self.config = config
        self._left_text = left_text
        self._right_text = right_text
        self._search = search
        self._result = ComparisonResult()

    @property
    def result(self) -> ComparisonResult:
        """The most recent comparison result."""
        return self._result

    def compose(self) -> ComposeResult:
        """Compose the editors above the diff view."""
        yield Header()
        with Horizontal(id="editor-container"):
            with Vertical(id="left-panel", classes="active"):
                yield Static("Left", classes="panel-header")
                yield TextArea(self._left_text, id="left-source", show_line_numbers=True)
                yield SourceOverlay(id="left-overlay")
            with Vertical(id="right-panel", classes="inactive"):
                yield Static("Right", classes="panel-header")
                yield TextArea(self._right_text, id="right-source", show_line_numbers=True)
                yield SourceOverlay(id="right-overlay")
        yield Static("", id="diff-status")
        yield Static(PLACEHOLDER_TEXT, id="diff-placeholder")
        yield DiffView(id="diff-view")
        yield Footer()

    def on_mount(self) -> None:
        """Compare the initial texts and focus the left editor."""
        self.title = "jsonscope - compare"
        self._update_subtitle()
        self.recompare()
        self._update_panel_styles()
        self._focus_active_widget()

    def _update_subtitle(self) -> None:
        self.sub_title = f"{self.config.dialect.upper()} | active: {self._active_panel}"

    def _source(self, side: str) -> TextArea:
        return self.query_one(f"#{side}-source", TextArea)

    def recompare(self) -> None:
        """Parse both editors and refresh the overlays and the diff."""
        left_text = self._source("left").text
        right_text = self._source("right").text
        left, right, result = compare_sources(left_text, right_text, self.config.dialect, self.config.indent)
        self._result = result

        self._show_overlay("left", left_text, left)
        self._show_overlay("right", right_text, right)

        has_data = bool(result.runs)
        self.query_one("#diff-placeholder", Static).display = not has_data
        diff_view = self.query_one("#diff-view", DiffView)
        diff_view.display = has_data
        diff_view.show_columns(result.columns)

        status = describe_result(result)
        status_widget = self.query_one("#diff-status", Static)
        status_widget.update(status)
        status_widget.display = bool(status)

    def _show_overlay(self, side: str, text: str, outcome: ParseOutcome) -> None:
        overlay = self.query_one(f"#{side}-overlay", SourceOverlay)
        overlay.show_source(text, self._search, outcome.location, outcome.error)

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        """Re-compare on every edit of either side."""
        if event.text_area.id in ("left-source", "right-source"):
            self.recompare()

    def on_descendant_focus(self, event: events.DescendantFocus) -> None:
        """Make the panel holding the focused editor the active one."""
        widget_id = event.widget.id
        if widget_id in ("left-source", "right-source"):
            side = widget_id.split("-", 1)[0]
            if side != self._active_panel:
                self._active_panel = side
                self._update_panel_styles()
                self._update_subtitle()

    def _focus_active_widget(self) -> None:
        """Focus the editor in the active panel."""
        self._source(self._active_panel).focus()
        self._update_subtitle()

    def action_switch_dialect(self) -> None:
        """Switch both editors between JSON and TOML."""
        self.config.dialect = next_dialect(self.config.dialect)
        self._update_subtitle()
        self.recompare()
        self.notify(f"Dialect: {self.config.dialect.upper()}")

    def action_open_file(self) -> None:
        """Prompt for a file and load it into the active side."""
        side = self._active_panel
        self.app.push_screen(
            OpenFileModal(title=f"Open File ({side})"),
            callback=lambda path: self._on_open_file_dismissed(side, path),
        )

    def _on_open_file_dismissed(self, side: str, path: str | None) -> None:
        if path:
            self.load_path(side, path)

    def load_path(self, side: str, path: str) -> bool:
        """Load a file into one side.

        Args:
            side: "left" or "right".
            path: Path of the file to load.

        Returns:
            True if the file was read, False if it could not be read.
        """
        try:
            text = load_source_file(path)
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Cannot read %s: %s", path, e)
            self.notify(f"Cannot read {path}: {e}", severity="error")
            return False

        self.config.dialect = detect_dialect(path)
        self._update_subtitle()
        self._source(side).load_text(text)
        self.recompare()
        return True

    def action_clear_active(self) -> None:
        """Clear the editor in the active panel."""
        self._source(self._active_panel).load_text("")
        self.recompare()

    def action_clear_both(self) -> None:
        """Clear both editors."""
        self._source("left").load_text("")
        self._source("right").load_text("")
        self.recompare()

    def action_go_back(self) -> None:
        """Return to the viewer, handing back the right editor's text."""
        self.dismiss(self._source("right").text)
