"""
JSON / JSON5 dialect parser.

Accepts strict JSON as well as JSON5 (comments, trailing commas, unquoted
keys, single-quoted strings). Python-style `False` and `None` literals, as
found in text copied from Python reprs, are rewritten to their JSON spelling
before parsing.
"""

from __future__ import annotations

import re
from typing import Any

import json5

from jsonscope.parsers.base import DocumentParser, ParseError


# Rewrites keep the text length, so parser positions stay valid for the source
_PYTHON_LITERALS = (
    (re.compile(r"\bFalse\b"), "false"),
    (re.compile(r"\bNone\b"), "null"),
)


def preprocess(text: str) -> str:
    """Rewrite Python `False`/`None` literals to `false`/`null`."""
    for pattern, replacement in _PYTHON_LITERALS:
        text = pattern.sub(replacement, text)
    return text


class Json5Parser(DocumentParser):
    """Parser for the JSON dialect (JSON and JSON5)."""

    @property
    def format_name(self) -> str:
        """Return the dialect name."""
        return "json"

    @property
    def supported_extensions(self) -> list[str]:
        """Return supported file extensions."""
        return [".json", ".json5"]

    def parse_text(self, text: str) -> Any:
        """Parse JSON or JSON5 text.

        Args:
            text: The source text.

        Returns:
            The parsed document.

        Raises:
            ParseError: If the text is not valid JSON5.

        Examples:
            >>> Json5Parser().parse_text("{a: 1, b: [False, None,],}")
            {'a': 1, 'b': [False, None]}
        """
        try:
            return json5.loads(preprocess(text))
        except (ValueError, RecursionError) as e:
            raise ParseError(str(e)) from e
