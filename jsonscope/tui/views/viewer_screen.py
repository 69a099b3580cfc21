"""
Viewer Screen for parsing a single document.

The left panel holds the source editor, the search input and the source
overlay (search matches and the parse error position). The right panel
shows the parsed document as a collapsible tree, or an empty state when
there is nothing to show. Every edit re-parses the source; when the new
text is invalid the tree keeps showing the last valid document.
"""

from __future__ import annotations

import logging
import os
from typing import Any

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import Screen
from textual.widgets import Footer, Header, Input, Static, TextArea

from jsonscope.config import ViewerConfig
from jsonscope.parsers import detect_dialect
from jsonscope.tui.documents import (
    ParseOutcome,
    format_output,
    load_source_file,
    parse_source,
)
from jsonscope.tui.screens import OpenFileModal
from jsonscope.tui.widgets import DocumentTree, SourceOverlay

logger = logging.getLogger(__name__)

# Order in which the dialect binding cycles
DIALECT_ORDER = ("json", "toml")

EMPTY_STATE_TEXT = "Ready to parse\n\nPaste or type a document in the editor, or press F7 to open a file."


def next_dialect(dialect: str) -> str:
    """Return the dialect after ``dialect`` in the cycle order."""
    try:
        index = DIALECT_ORDER.index(dialect)
    except ValueError:
        return DIALECT_ORDER[0]
    return DIALECT_ORDER[(index + 1) % len(DIALECT_ORDER)]


class ViewerScreen(Screen):
    """Single document view: source editor on the left, tree on the right."""

    CSS = """
    ViewerScreen {
        layout: vertical;
    }

    #viewer-container {
        height: 1fr;
    }

    #input-panel {
        width: 50%;
    }

    #tree-panel {
        width: 50%;
    }

    #search {
        margin: 0 1;
    }

    #source {
        height: 1fr;
    }

    #source-overlay {
        max-height: 40%;
        overflow-y: auto;
    }

    #empty-state {
        height: 1fr;
        content-align: center middle;
        text-align: center;
        color: $text-muted;
    }
    """

    BINDINGS = [
        Binding("f2", "switch_dialect", "Dialect"),
        Binding("f3", "toggle_json_strings", "JSON Strings"),
        Binding("f4", "reset_tree", "Reset Tree"),
        Binding("f5", "format_source", "Format"),
        Binding("f6", "copy_output", "Copy"),
        Binding("f7", "open_file", "Open"),
        Binding("f8", "clear_source", "Clear"),
        Binding("f9", "compare", "Compare"),
    ]

    def __init__(
        self,
        config: ViewerConfig,
        initial_text: str = "",
        source_name: str | None = None,
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        """Initialize the ViewerScreen.

        Args:
            config: Settings shared with the compare screen.
            initial_text: Text placed in the editor on start.
            source_name: Name of the file the text came from, for the title.
            name: Optional name for the screen.
            id: Optional ID for the screen.
            classes: Optional CSS classes for the screen.
        """
        super().__init__(name=name, id=id, classes=classes)
        self.config = config
        self._initial_text = initial_text
        self._source_name = source_name
        self._outcome = ParseOutcome()
        self._document: Any = None
        self._compare_right_text = ""
        self._loaded_source: tuple[str, str, bool] | None = None

    @property
    def document(self) -> Any:
        """The last successfully parsed document."""
        return self._document

    @property
    def outcome(self) -> ParseOutcome:
        """The outcome of the most recent parse."""
        return self._outcome

    @property
    def search_term(self) -> str:
        return self.query_one("#search", Input).value

    def compose(self) -> ComposeResult:
        """Compose the screen layout with the editor and tree panels."""
        yield Header()
        with Horizontal(id="viewer-container"):
            with Vertical(id="input-panel"):
                yield Static("", id="source-header", classes="panel-header")
                yield Input(placeholder="Search keys and values", id="search")
                yield TextArea(self._initial_text, id="source", show_line_numbers=True)
                yield SourceOverlay(id="source-overlay")
            with Vertical(id="tree-panel"):
                yield Static("Parsed Tree", classes="panel-header")
                yield Static(EMPTY_STATE_TEXT, id="empty-state")
                yield DocumentTree(self.config.collapsed_depth, id="document-tree")
        yield Footer()

    def on_mount(self) -> None:
        """Parse the initial text and focus the editor."""
        self._update_titles()
        self.reparse()
        self.query_one("#source", TextArea).focus()

    def _update_titles(self) -> None:
        dialect = self.config.dialect.upper()
        self.title = f"jsonscope - {os.path.basename(self._source_name)}" if self._source_name else "jsonscope"
        strings = "on" if self.config.parse_json_strings else "off"
        self.sub_title = f"{dialect} | parse JSON strings: {strings}"
        self.query_one("#source-header", Static).update(f"Source ({dialect})")

    def reparse(self) -> None:
        """Parse the editor text and refresh the tree and the overlay."""
        text = self.query_one("#source", TextArea).text
        outcome = parse_source(text, self.config.dialect, self.config.parse_json_strings)
        self._outcome = outcome

        if outcome.ok:
            # Open/closed nodes survive only a re-parse of the same text and settings
            source = (text, self.config.dialect, self.config.parse_json_strings)
            if source != self._loaded_source:
                self.query_one("#document-tree", DocumentTree).load_document(outcome.value)
                self._loaded_source = source
            self._document = outcome.value

        self._refresh_document_view()
        self._refresh_overlay()

    def _refresh_document_view(self) -> None:
        has_document = self._document is not None
        self.query_one("#empty-state", Static).display = not has_document
        self.query_one("#document-tree", DocumentTree).display = has_document

    def _refresh_overlay(self) -> None:
        overlay = self.query_one("#source-overlay", SourceOverlay)
        overlay.show_source(
            self.query_one("#source", TextArea).text,
            self.search_term,
            self._outcome.location,
            self._outcome.error,
        )

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        """Re-parse on every edit of the source."""
        if event.text_area.id == "source":
            self.reparse()

    def on_input_changed(self, event: Input.Changed) -> None:
        """Apply the search term to the tree and the overlay."""
        if event.input.id != "search":
            return
        self.query_one("#document-tree", DocumentTree).set_search_term(event.value)
        self._refresh_overlay()

    def load_path(self, path: str) -> bool:
        """Load a file into the editor, switching dialect by its extension.

        Args:
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
        self._source_name = path
        self._update_titles()
        self.query_one("#source", TextArea).load_text(text)
        self.reparse()
        return True

    def action_switch_dialect(self) -> None:
        """Switch the editor between JSON and TOML."""
        self.config.dialect = next_dialect(self.config.dialect)
        self._update_titles()
        self.reparse()
        self.notify(f"Dialect: {self.config.dialect.upper()}")

    def action_toggle_json_strings(self) -> None:
        """Toggle expanding JSON text embedded in string values."""
        self.config.parse_json_strings = not self.config.parse_json_strings
        self._update_titles()
        self.reparse()
        status = "enabled" if self.config.parse_json_strings else "disabled"
        self.notify(f"Parse JSON strings {status}")

    def action_reset_tree(self) -> None:
        """Recompute every tree node from the collapse depth and search term."""
        self.query_one("#document-tree", DocumentTree).reset_states()

    def action_format_source(self) -> None:
        """Replace the source with its formatted output (JSON only)."""
        if self.config.dialect != "json":
            self.notify("Formatting is only available for JSON", severity="warning")
            return

        source = self.query_one("#source", TextArea)
        # Embedded JSON strings stay strings in the formatted source
        outcome = parse_source(source.text, self.config.dialect)
        if not outcome.has_document:
            self.notify("Nothing to format", severity="warning")
            return

        formatted = format_output(outcome.value, self.config.indent)
        if formatted:
            source.load_text(formatted)
            self.reparse()

    def action_copy_output(self) -> None:
        """Copy the formatted document to the clipboard."""
        formatted = format_output(self._document, self.config.indent)
        if not formatted:
            self.notify("Nothing to copy", severity="warning")
            return
        self.app.copy_to_clipboard(formatted)
        self.notify("Copied formatted output")

    def action_open_file(self) -> None:
        """Prompt for a file and load it into the editor."""
        self.app.push_screen(OpenFileModal(), callback=self._on_open_file_dismissed)

    def _on_open_file_dismissed(self, path: str | None) -> None:
        if path:
            self.load_path(path)

    def action_clear_source(self) -> None:
        """Clear the editor."""
        self._source_name = None
        self._update_titles()
        self.query_one("#source", TextArea).load_text("")
        self.reparse()

    def action_compare(self) -> None:
        """Open the compare screen with the editor text on the left."""
        self.open_compare(self.query_one("#source", TextArea).text, self._compare_right_text)

    def open_compare(self, left_text: str, right_text: str) -> None:
        """Push the compare screen.

        Args:
            left_text: Text for the left editor.
            right_text: Text for the right editor.
        """
        from jsonscope.tui.views.compare_screen import CompareScreen

        self._compare_right_text = right_text
        search = self.query_one("#search", Input).value if self.is_mounted else ""
        self.app.push_screen(
            CompareScreen(self.config, left_text, right_text, search=search),
            callback=self._on_compare_dismissed,
        )

    def _on_compare_dismissed(self, right_text: str | None) -> None:
        if right_text is not None:
            self._compare_right_text = right_text
        self._update_titles()
        self.reparse()
