"""
Presentation core for parsed documents.

This package turns parsed values and line diffs into what the terminal UI
shows: a dual-column diff, a collapsible tree and highlighted source text.

Usage:
    from jsonscope.core import compare_values, TreeModel, render

    result = compare_values({"x": 1, "y": 2}, {"x": 1, "y": 3})
    for line in result.columns.left:
        print(line.line_number, line.text, line.changed)
"""

from jsonscope.core.column_aligner import (
    AlignedColumns,
    ColumnLine,
    ComparisonResult,
    DiffKind,
    DiffRun,
    align,
    compare_values,
    diff_texts,
    summarize,
)
from jsonscope.core.highlight import (
    ERROR,
    SEARCH,
    ErrorLocation,
    HighlightSpan,
    Segment,
    composite,
    error_offset,
    escape_markup,
    find_search_spans,
    flatten_spans,
    highlight_text,
    render,
    to_markup,
    to_rich_text,
)
from jsonscope.core.normalizer import (
    DEFAULT_INDENT,
    DiffComparisonFailure,
    normalize,
    stringify,
)
from jsonscope.core.tree_model import (
    DEFAULT_COLLAPSED_DEPTH,
    MAX_TREE_DEPTH,
    LineKind,
    TreeLine,
    TreeModel,
    TreeNode,
    format_primitive,
    has_search_match,
    primitive_text,
)

__all__ = [
    # Normalizer
    "normalize",
    "stringify",
    "DiffComparisonFailure",
    "DEFAULT_INDENT",
    # Column aligner
    "DiffKind",
    "DiffRun",
    "ColumnLine",
    "AlignedColumns",
    "ComparisonResult",
    "align",
    "diff_texts",
    "compare_values",
    "summarize",
    # Tree model
    "TreeModel",
    "TreeNode",
    "TreeLine",
    "LineKind",
    "has_search_match",
    "primitive_text",
    "format_primitive",
    "MAX_TREE_DEPTH",
    "DEFAULT_COLLAPSED_DEPTH",
    # Highlight compositor
    "ErrorLocation",
    "HighlightSpan",
    "Segment",
    "SEARCH",
    "ERROR",
    "escape_markup",
    "find_search_spans",
    "error_offset",
    "flatten_spans",
    "composite",
    "render",
    "to_markup",
    "to_rich_text",
    "highlight_text",
]
