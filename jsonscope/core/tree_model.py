"""
Collapsible tree model for parsed documents.

The model renders a parsed value as a flat list of lines (TreeLine) and owns
the open/closed state of every container node that has been rendered. The
state lives in an arena keyed by the node's path from the root, so it can be
inspected and toggled without touching the document itself.

Rendering:
    - Objects:  `{` ... `}` (open) or `{N keys}` (closed)
    - Arrays:   `[` ... `]` (open) or `[N items]` (closed)
    - Leaves:   `label: value`, or `value` alone at the document root

A container's initial state is computed once, when it is first rendered:
it starts open if it is shallower than the collapse depth or if its subtree
contains a match for the active search term. After that only toggle() changes
it. Closing a node forgets the state of everything below it.
"""

from __future__ import annotations

import datetime
import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterator


# Maximum depth for recursive tree operations to prevent stack overflow
MAX_TREE_DEPTH = 100

# Containers at this depth and deeper start collapsed
DEFAULT_COLLAPSED_DEPTH = 2

NodePath = tuple[str, ...]


class LineKind(Enum):
    """The kind of a rendered tree line."""

    OPEN = "open"
    CLOSE = "close"
    COLLAPSED = "collapsed"
    LEAF = "leaf"
    TRUNCATED = "truncated"


@dataclass
class TreeNode:
    """Open/closed state of one rendered container node."""

    path: NodePath
    label: str | None
    value: Any
    depth: int
    open: bool


@dataclass(frozen=True)
class TreeLine:
    """One rendered line of the tree.

    Attributes:
        path: Path of the node this line belongs to.
        indent: Nesting level used for indentation.
        kind: Whether this line opens, closes or summarizes a container, or
            shows a primitive leaf.
        label: Object key or array index; None at the root and on close lines.
        text: The bracket, the collapsed summary or the formatted leaf value.
        value: The value of the node.
    """

    path: NodePath
    indent: int
    kind: LineKind
    label: str | None
    text: str
    value: Any = None

    @property
    def is_toggleable(self) -> bool:
        return self.kind in (LineKind.OPEN, LineKind.COLLAPSED)


def is_container(value: Any) -> bool:
    return isinstance(value, (dict, list))


def primitive_text(value: Any) -> str:
    """Return the string form of a primitive, as used for search matching.

    Examples:
        >>> primitive_text(None), primitive_text(True), primitive_text(2.0)
        ('null', 'true', '2')
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            return str(int(value))
        return repr(value)
    if isinstance(value, (datetime.datetime, datetime.date, datetime.time)):
        return value.isoformat()
    return str(value)


def format_primitive(value: Any) -> str:
    """Return the display form of a primitive leaf.

    Strings are quoted with line breaks and tabs shown escaped so that every
    leaf stays on one line.
    """
    if isinstance(value, str):
        display = value.replace("\n", "\\n").replace("\r", "\\r").replace("\t", "\\t")
        return f'"{display}"'
    return primitive_text(value)


def count_summary(value: list[Any] | dict[str, Any]) -> str:
    count = len(value)
    if isinstance(value, list):
        return f"{count} item" if count == 1 else f"{count} items"
    return f"{count} key" if count == 1 else f"{count} keys"


def iter_children(value: list[Any] | dict[str, Any]) -> Iterator[tuple[str, Any]]:
    """Yield (label, child) pairs: array indices as strings, object keys in order."""
    if isinstance(value, list):
        for index, item in enumerate(value):
            yield str(index), item
    else:
        for key, item in value.items():
            yield str(key), item


def has_search_match(value: Any, term: str | None) -> bool:
    """Check whether a subtree contains the search term anywhere.

    Object keys, array indices (as strings) and primitive values are matched
    case-insensitively. The walk stops at the first match.

    Args:
        value: The root of the subtree.
        term: The search term, matched as typed; a blank term never matches.

    Returns:
        True if any key, index or primitive in the subtree contains the term.
    """
    if not term or not term.strip():
        return False
    return _subtree_matches(value, term.lower(), depth=0)


def _subtree_matches(value: Any, needle: str, depth: int) -> bool:
    if depth >= MAX_TREE_DEPTH:
        return False
    if is_container(value):
        return any(
            needle in label.lower() or _subtree_matches(child, needle, depth + 1)
            for label, child in iter_children(value)
        )
    return needle in primitive_text(value).lower()


class TreeModel:
    """Render state for one parsed document in the collapsible tree view.

    Attributes:
        value: The document being shown.
        collapsed_depth: Depth at which containers start collapsed.
        search_term: Search term used for the auto-expand test.
    """

    def __init__(
        self,
        value: Any = None,
        collapsed_depth: int = DEFAULT_COLLAPSED_DEPTH,
        search_term: str = "",
    ) -> None:
        self._value = value
        self._collapsed_depth = collapsed_depth
        self._search_term = search_term
        self._nodes: dict[NodePath, TreeNode] = {}

    @property
    def value(self) -> Any:
        return self._value

    @property
    def collapsed_depth(self) -> int:
        return self._collapsed_depth

    @property
    def search_term(self) -> str:
        return self._search_term

    @property
    def nodes(self) -> dict[NodePath, TreeNode]:
        """Snapshot of the node states created so far, keyed by path."""
        return dict(self._nodes)

    def set_value(self, value: Any) -> None:
        """Replace the document; every node state is discarded."""
        self._value = value
        self._nodes.clear()

    def set_search_term(self, term: str) -> None:
        """Set the search term used for nodes created from now on."""
        self._search_term = term

    def set_collapsed_depth(self, depth: int) -> None:
        """Set the collapse depth used for nodes created from now on."""
        self._collapsed_depth = depth

    def reset(self) -> None:
        """Forget every node state so defaults are recomputed on next render."""
        self._nodes.clear()

    def is_open(self, path: NodePath) -> bool | None:
        """Return the state of a rendered container, or None if it has none."""
        node = self._nodes.get(path)
        return node.open if node is not None else None

    def toggle(self, path: NodePath) -> bool:
        """Flip a rendered container between open and closed.

        Args:
            path: Path of a container that has been rendered.

        Returns:
            The new state (True for open).

        Raises:
            KeyError: If no container state exists at ``path``.
        """
        node = self._nodes[path]
        node.open = not node.open
        if not node.open:
            self._forget_descendants(path)
        return node.open

    def _forget_descendants(self, path: NodePath) -> None:
        size = len(path)
        stale = [key for key in self._nodes if len(key) > size and key[:size] == path]
        for key in stale:
            del self._nodes[key]

    def _node_for(self, path: NodePath, label: str | None, value: Any, depth: int) -> TreeNode:
        node = self._nodes.get(path)
        if node is None:
            is_open = depth < self._collapsed_depth or has_search_match(value, self._search_term)
            node = TreeNode(path=path, label=label, value=value, depth=depth, open=is_open)
            self._nodes[path] = node
        return node

    def lines(self) -> list[TreeLine]:
        """Render the document as a list of lines, creating node states as needed."""
        lines: list[TreeLine] = []
        self._render(lines, (), None, self._value, depth=0)
        return lines

    def _render(
        self,
        lines: list[TreeLine],
        path: NodePath,
        label: str | None,
        value: Any,
        depth: int,
    ) -> None:
        if depth >= MAX_TREE_DEPTH:
            lines.append(
                TreeLine(path, depth, LineKind.TRUNCATED, None, f"... (depth limit {MAX_TREE_DEPTH} reached)")
            )
            return

        if not is_container(value):
            lines.append(TreeLine(path, depth, LineKind.LEAF, label, format_primitive(value), value))
            return

        node = self._node_for(path, label, value, depth)
        opening, closing = ("[", "]") if isinstance(value, list) else ("{", "}")

        if not node.open:
            summary = f"{opening}{count_summary(value)}{closing}"
            lines.append(TreeLine(path, depth, LineKind.COLLAPSED, label, summary, value))
            return

        lines.append(TreeLine(path, depth, LineKind.OPEN, label, opening, value))
        for child_label, child in iter_children(value):
            self._render(lines, path + (child_label,), child_label, child, depth + 1)
        lines.append(TreeLine(path, depth, LineKind.CLOSE, None, closing, value))
