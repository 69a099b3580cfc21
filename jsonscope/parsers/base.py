"""
Abstract base class for document parsers.

This module defines the DocumentParser interface that every dialect parser
implements, the ParseError they raise, and the extraction of a line/column
position from a parser's error message.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import Any

from jsonscope.core.highlight import ErrorLocation


# Position wordings used by the supported parsers, most specific first:
#   tomllib / json:  "... (at line 3, column 5)", "... line 1 column 2 (char 1)"
#   json5:           "<string>:2 Unexpected "x" at column 3"
#   generic:         "... at 2:3"
_LOCATION_PATTERNS = (
    re.compile(r"\bline\s+(\d+),?\s+col(?:umn)?\s+(\d+)", re.IGNORECASE),
    re.compile(r":(\d+)\b[^\n]*?\bcolumn\s+(\d+)", re.IGNORECASE),
    re.compile(r"\bat\s+(\d+):(\d+)", re.IGNORECASE),
    re.compile(r"(\d+):(\d+)"),
)


def location_from_message(message: str) -> ErrorLocation | None:
    """Extract a 1-based line/column position from a parser error message.

    Args:
        message: The human-readable error message.

    Returns:
        The position, or None if the message does not contain one.

    Examples:
        >>> location_from_message("Invalid value (at line 3, column 5)")
        ErrorLocation(line=3, column=5)
        >>> location_from_message("unexpected end of input") is None
        True
    """
    for pattern in _LOCATION_PATTERNS:
        match = pattern.search(message)
        if match:
            line, column = int(match.group(1)), int(match.group(2))
            if line >= 1 and column >= 1:
                return ErrorLocation(line=line, column=column)
    return None


class ParseError(ValueError):
    """Raised when source text is not valid in the parser's dialect.

    Attributes:
        message: The parser's human-readable message.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    @property
    def location(self) -> ErrorLocation | None:
        """Position of the error, when the message carries one."""
        return location_from_message(self.message)


class DocumentParser(ABC):
    """Abstract base class for parsing source text into a document.

    All dialect parsers (JSON/JSON5, TOML) inherit from this class and
    implement parse_text().
    """

    @property
    @abstractmethod
    def format_name(self) -> str:
        """Return the dialect name (e.g., 'json', 'toml')."""
        pass

    @property
    @abstractmethod
    def supported_extensions(self) -> list[str]:
        """Return supported file extensions (e.g., ['.toml'])."""
        pass

    @abstractmethod
    def parse_text(self, text: str) -> Any:
        """Parse non-blank source text.

        Args:
            text: The source text.

        Returns:
            The parsed document: None, bool, number, string, list or dict.

        Raises:
            ParseError: If the text is malformed.
        """
        pass

    def parse(self, text: str) -> Any:
        """Parse source text; blank text yields None (no document).

        Raises:
            ParseError: If the text is malformed.
        """
        if not text.strip():
            return None
        return self.parse_text(text)
