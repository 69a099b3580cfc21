"""
Document utilities for the viewer and compare screens.

This module sits between the screens and the parsers/core. Every function
here absorbs collaborator failures and turns them into a "no data" or
"no highlight" state, so a bad edit never takes the session down:

    - parse_source(): ParseError -> ParseOutcome with value None + message
    - format_output(): serialization failure -> ""
    - compare_sources(): serialization failure -> empty ComparisonResult

Reading a user-selected file (load_source_file) is the only I/O; its
errors are left to the caller, which reports them to the user.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from jsonscope.core import (
    DEFAULT_INDENT,
    ComparisonResult,
    DiffComparisonFailure,
    ErrorLocation,
    compare_values,
    stringify,
)
from jsonscope.parsers import ParseError, expand_embedded_json, get_parser

logger = logging.getLogger(__name__)


@dataclass
class ParseOutcome:
    """Result of parsing one editor's text.

    Attributes:
        value: The parsed document, or None when the text is blank or invalid.
        error: The parser's message when the text is invalid.
        location: Position of the error, when the message carries one.
    """

    value: Any = None
    error: str | None = None
    location: ErrorLocation | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def has_document(self) -> bool:
        return self.error is None and self.value is not None


def parse_source(text: str, dialect: str = "json", parse_json_strings: bool = False) -> ParseOutcome:
    """Parse editor text without raising.

    Args:
        text: The source text.
        dialect: Dialect name ('json' or 'toml').
        parse_json_strings: Expand JSON embedded in string values (JSON only).

    Returns:
        A ParseOutcome holding either the document or the error.

    Examples:
        >>> parse_source('{"a": 1}').value
        {'a': 1}
        >>> parse_source('{"a": }').location
        ErrorLocation(line=1, column=7)
    """
    parser = get_parser(dialect)
    try:
        value = parser.parse(text)
    except ParseError as e:
        logger.debug("%s parse failed: %s", dialect, e.message)
        location = e.location
        if location is None:
            logger.debug("No position in parse error message: %s", e.message)
        return ParseOutcome(error=e.message, location=location)

    if value is not None and parse_json_strings and dialect == "json":
        value = expand_embedded_json(value)
    return ParseOutcome(value=value)


def load_source_file(path: str | Path) -> str:
    """Read a source file as UTF-8 text.

    Raises:
        FileNotFoundError: If the file does not exist.
        OSError: If the file cannot be read.
        UnicodeDecodeError: If the file is not UTF-8 text.
    """
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def format_output(value: Any, indent: int = DEFAULT_INDENT) -> str:
    """Pretty-print a document for copying or for replacing the source.

    Returns:
        The formatted text, or "" when there is no document or it cannot be
        serialized.
    """
    try:
        return stringify(value, indent)
    except DiffComparisonFailure as e:
        logger.warning("Cannot format document: %s", e)
        return ""


def compare_sources(
    left_text: str,
    right_text: str,
    dialect: str = "json",
    indent: int = DEFAULT_INDENT,
) -> tuple[ParseOutcome, ParseOutcome, ComparisonResult]:
    """Parse both editors and compare their documents.

    A side that fails to parse is compared as an absent document.

    Returns:
        The left outcome, the right outcome and the comparison result.
    """
    left = parse_source(left_text, dialect)
    right = parse_source(right_text, dialect)
    return left, right, compare_values(left.value, right.value, indent)
