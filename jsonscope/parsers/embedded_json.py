"""
Expansion of JSON documents embedded in string values.

API payloads often carry JSON serialized inside a string field (tool call
arguments, message bodies). With "parse JSON strings" enabled, such strings
are replaced by the document they contain so the tree can show their
structure.
"""

from __future__ import annotations

from typing import Any

from jsonscope.core.tree_model import MAX_TREE_DEPTH
from jsonscope.parsers.base import ParseError
from jsonscope.parsers.json5_parser import Json5Parser


def looks_like_json(text: str) -> bool:
    """Check whether a string is bracketed like a JSON object or array."""
    trimmed = text.strip()
    return (trimmed.startswith("{") and trimmed.endswith("}")) or (
        trimmed.startswith("[") and trimmed.endswith("]")
    )


def expand_embedded_json(value: Any, depth: int = 0) -> Any:
    """Replace JSON-looking strings with their parsed content, recursively.

    Strings that look like JSON but do not parse are kept unchanged. Parsed
    content is expanded in turn, so doubly-encoded payloads are unwrapped.

    Args:
        value: A parsed document.
        depth: Current recursion depth (used to prevent stack overflow).

    Returns:
        A new document with embedded JSON expanded.

    Examples:
        >>> expand_embedded_json({"args": '{"city": "London"}'})
        {'args': {'city': 'London'}}
    """
    if depth >= MAX_TREE_DEPTH:
        return value

    if isinstance(value, str):
        if not looks_like_json(value):
            return value
        try:
            parsed = Json5Parser().parse_text(value)
        except ParseError:
            return value
        return expand_embedded_json(parsed, depth + 1)

    if isinstance(value, list):
        return [expand_embedded_json(item, depth + 1) for item in value]

    if isinstance(value, dict):
        return {key: expand_embedded_json(item, depth + 1) for key, item in value.items()}

    return value
