"""
Diff View widget for the side-by-side comparison of two documents.

Each side is a DiffColumn that shows its ColumnLines with a right-aligned
line number gutter. Removed lines (left) and added lines (right) are drawn
on a red or green background.
"""

from __future__ import annotations

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.widgets import Static

from jsonscope.core import AlignedColumns, ColumnLine


# Minimum width of the line number gutter, in cells
MIN_GUTTER_WIDTH = 3

CHANGE_STYLES: dict[str, str] = {
    "left": "red on #3b1219",
    "right": "green on #12301c",
}


class DiffColumn(Static):
    """One column of the diff view."""

    DEFAULT_CSS = """
    DiffColumn {
        width: 100%;
        height: auto;
    }
    """

    def __init__(self, side: str, *, id: str | None = None, classes: str | None = None) -> None:
        """Initialize the column.

        Args:
            side: Either "left" (removed lines) or "right" (added lines).
            id: The widget ID.
            classes: CSS classes for the widget.
        """
        super().__init__("", id=id, classes=classes)
        self.side = side
        self._column_lines: list[ColumnLine] = []

    @property
    def column_lines(self) -> list[ColumnLine]:
        return list(self._column_lines)

    def show_lines(self, lines: list[ColumnLine]) -> None:
        """Render a column of numbered lines."""
        self._column_lines = list(lines)
        self.update(self.build_text(self._column_lines, self.side))

    @staticmethod
    def build_text(lines: list[ColumnLine], side: str) -> Text:
        """Build the Rich text for a column: gutter, then the line content."""
        width = max(MIN_GUTTER_WIDTH, len(str(lines[-1].line_number)) if lines else 0)
        change_style = CHANGE_STYLES.get(side, "")
        text = Text(no_wrap=False)
        for index, line in enumerate(lines):
            if index:
                text.append("\n")
            text.append(f"{line.line_number:>{width}} │ ", style="dim")
            text.append(line.text, style=change_style if line.changed else "")
        return text


class DiffView(Horizontal):
    """The two columns of a comparison, side by side."""

    DEFAULT_CSS = """
    DiffView {
        height: 1fr;
    }

    DiffView > Vertical {
        width: 50%;
    }

    DiffView .diff-column-header {
        height: 1;
        background: $boost;
        text-style: bold;
        padding: 0 1;
    }

    DiffView VerticalScroll {
        height: 1fr;
        padding: 0 1;
    }
    """

    def __init__(
        self,
        left_label: str = "Left",
        right_label: str = "Right",
        *,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        super().__init__(id=id, classes=classes)
        self._left_label = left_label
        self._right_label = right_label

    def compose(self) -> ComposeResult:
        """Compose the left and right columns."""
        with Vertical(id="diff-left"):
            yield Static(self._left_label, id="diff-left-header", classes="diff-column-header")
            with VerticalScroll():
                yield DiffColumn("left", id="diff-left-column")
        with Vertical(id="diff-right"):
            yield Static(self._right_label, id="diff-right-header", classes="diff-column-header")
            with VerticalScroll():
                yield DiffColumn("right", id="diff-right-column")

    def set_labels(self, left_label: str, right_label: str) -> None:
        self._left_label = left_label
        self._right_label = right_label
        self.query_one("#diff-left-header", Static).update(left_label)
        self.query_one("#diff-right-header", Static).update(right_label)

    def show_columns(self, columns: AlignedColumns) -> None:
        """Display a pair of aligned columns."""
        self.query_one("#diff-left-column", DiffColumn).show_lines(columns.left)
        self.query_one("#diff-right-column", DiffColumn).show_lines(columns.right)
