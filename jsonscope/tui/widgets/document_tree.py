"""
Document Tree widget for displaying a parsed document as a collapsible tree.

The widget is a thin view over a TreeModel: every line of the model becomes
one option, and selecting an object or array line (Enter or click) toggles
that node in the model and re-renders. Keys and values that contain the
search term are highlighted.
"""

from __future__ import annotations

from typing import Any

from rich.text import Text
from textual.message import Message
from textual.widgets import OptionList
from textual.widgets.option_list import Option

from jsonscope.core import (
    DEFAULT_COLLAPSED_DEPTH,
    LineKind,
    TreeLine,
    TreeModel,
    highlight_text,
)
from jsonscope.core.tree_model import NodePath, count_summary


# Indentation per nesting level, in cells
INDENT_WIDTH = 2

VALUE_STYLES: dict[str, str] = {
    "str": "green",
    "number": "cyan",
    "bool": "magenta",
    "null": "dim italic",
}


def _value_style(value: Any) -> str:
    if value is None:
        return VALUE_STYLES["null"]
    if isinstance(value, bool):
        return VALUE_STYLES["bool"]
    if isinstance(value, (int, float)):
        return VALUE_STYLES["number"]
    return VALUE_STYLES["str"]


class DocumentTree(OptionList):
    """Collapsible tree view of a parsed document.

    Attributes:
        model: The TreeModel holding the document and node states.
    """

    DEFAULT_CSS = """
    DocumentTree {
        height: 1fr;
        border: none;
        padding: 0 1;
    }
    """

    class NodeToggled(Message):
        """Posted when the user opens or closes a node.

        Attributes:
            path: Path of the node from the root.
            open: Whether the node is now open.
        """

        def __init__(self, path: NodePath, open: bool) -> None:
            self.path = path
            self.open = open
            super().__init__()

    def __init__(
        self,
        collapsed_depth: int = DEFAULT_COLLAPSED_DEPTH,
        *,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        """Initialize the document tree.

        Args:
            collapsed_depth: Containers at this depth and deeper start closed.
            id: The widget ID.
            classes: CSS classes for the widget.
        """
        super().__init__(id=id, classes=classes)
        self.model = TreeModel(collapsed_depth=collapsed_depth)
        self._tree_lines: list[TreeLine] = []

    @property
    def tree_lines(self) -> list[TreeLine]:
        """The lines currently shown."""
        return list(self._tree_lines)

    def load_document(self, value: Any) -> None:
        """Show a new document; node states start over from their defaults."""
        self.model.set_value(value)
        self.rebuild_options()

    def set_search_term(self, term: str) -> None:
        """Update highlighting; already rendered nodes keep their state."""
        self.model.set_search_term(term)
        self.rebuild_options()

    def reset_states(self) -> None:
        """Recompute every node's default state from depth and search term."""
        self.model.reset()
        self.rebuild_options()

    def rebuild_options(self) -> None:
        """Re-render the model into options, keeping the cursor position."""
        highlighted = self.highlighted
        self._tree_lines = self.model.lines()
        self.clear_options()
        self.add_options([Option(self._render_line(line)) for line in self._tree_lines])
        if highlighted is not None and self._tree_lines:
            self.highlighted = min(highlighted, len(self._tree_lines) - 1)

    def _render_line(self, line: TreeLine) -> Text:
        term = self.model.search_term
        text = Text(" " * (INDENT_WIDTH * line.indent))

        if line.kind is LineKind.OPEN:
            text.append("▾ ", style="dim")
        elif line.kind is LineKind.COLLAPSED:
            text.append("▸ ", style="dim")
        else:
            text.append("  ")

        if line.label is not None:
            text.append_text(highlight_text(line.label, term))
            text.append(": ", style="dim")

        if line.kind is LineKind.COLLAPSED:
            text.append(line.text[0], style="bold")
            text.append(count_summary(line.value), style="dim italic")
            text.append(line.text[-1], style="bold")
        elif line.kind in (LineKind.OPEN, LineKind.CLOSE):
            text.append(line.text, style="bold")
        elif line.kind is LineKind.TRUNCATED:
            text.append(line.text, style="dim")
        elif line.value is None:
            # null is never search-highlighted
            text.append(line.text, style=_value_style(None))
        else:
            style = _value_style(line.value)
            quoted = isinstance(line.value, str)
            value_text = highlight_text(line.text[1:-1] if quoted else line.text, term)
            value_text.style = style
            if quoted:
                text.append('"', style=style)
            text.append_text(value_text)
            if quoted:
                text.append('"', style=style)
        return text

    def toggle_line(self, index: int) -> bool | None:
        """Toggle the node shown on a line.

        Args:
            index: Index of the line in the current rendering.

        Returns:
            The node's new state, or None if the line is not toggleable.
        """
        if not 0 <= index < len(self._tree_lines):
            return None
        line = self._tree_lines[index]
        if not line.is_toggleable:
            return None

        is_open = self.model.toggle(line.path)
        self.rebuild_options()
        self.highlighted = index
        self.post_message(self.NodeToggled(line.path, is_open))
        return is_open

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        """Toggle object and array nodes when they are selected."""
        event.stop()
        self.toggle_line(event.option_index)
