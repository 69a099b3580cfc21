"""TUI widgets for the document viewer."""

from jsonscope.tui.widgets.diff_view import DiffColumn, DiffView
from jsonscope.tui.widgets.document_tree import DocumentTree
from jsonscope.tui.widgets.source_overlay import SourceOverlay, error_indicator

__all__ = [
    # Tree view
    "DocumentTree",
    # Diff view
    "DiffView",
    "DiffColumn",
    # Source overlay
    "SourceOverlay",
    "error_indicator",
]
