"""
Normalization and serialization of parsed documents.

The diff view compares documents by their serialized text. To make that
comparison independent of key order, both sides are first normalized
(object keys sorted recursively) and then pretty-printed with a fixed
indentation.

Normalization is comparison-only: the tree view always shows a document in
its own key order.
"""

from __future__ import annotations

import datetime
import json
from typing import Any


# Indentation used for both the diff input and the formatted output
DEFAULT_INDENT = 2


class DiffComparisonFailure(ValueError):
    """Raised when a parsed value cannot be serialized for comparison."""


def normalize(value: Any) -> Any:
    """Return a copy of a parsed value with every object's keys sorted.

    Arrays keep their order and primitives are returned unchanged. Keys are
    sorted by ordinal string comparison, so the result does not depend on the
    order in which the parser produced them.

    Args:
        value: A parsed document (None, bool, number, string, list or dict).

    Returns:
        The normalized value.

    Examples:
        >>> normalize({"b": 1, "a": [{"d": 2, "c": 3}]})
        {'a': [{'c': 3, 'd': 2}], 'b': 1}
    """
    if isinstance(value, dict):
        return {key: normalize(value[key]) for key in sorted(value)}
    if isinstance(value, list):
        return [normalize(item) for item in value]
    return value


def _json_default(value: Any) -> Any:
    """Serialize the date/time leaves that TOML documents contain."""
    if isinstance(value, (datetime.datetime, datetime.date, datetime.time)):
        return value.isoformat()
    raise TypeError(f"Object of type {type(value).__name__} is not serializable")


def stringify(value: Any, indent: int = DEFAULT_INDENT) -> str:
    """Pretty-print a parsed value deterministically.

    The output matches the layout of ``JSON.stringify(value, null, indent)``:
    one member per line, ``": "`` between key and value, non-ASCII text kept
    as-is. An absent document (None) serializes to the empty string so that
    it contributes no lines to a diff.

    Args:
        value: The parsed value to serialize.
        indent: Number of spaces per nesting level.

    Returns:
        The serialized text (no trailing newline).

    Raises:
        DiffComparisonFailure: If the value contains a cycle or a leaf that
            has no serialized form.
    """
    if value is None:
        return ""
    try:
        return json.dumps(value, indent=indent, ensure_ascii=False, default=_json_default)
    except (TypeError, ValueError, RecursionError) as e:
        raise DiffComparisonFailure(f"Cannot serialize document: {e}") from e
