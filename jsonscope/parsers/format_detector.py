"""
Dialect detection utilities for source files.

This module maps file names to dialects and dialects to parsers.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from jsonscope.parsers.base import DocumentParser


# Mapping of file extensions to dialect names
EXTENSION_MAP: dict[str, str] = {
    ".json": "json",
    ".json5": "json",
    ".toml": "toml",
}

# Supported dialect names
SUPPORTED_DIALECTS = frozenset(["json", "toml"])


def detect_dialect(filename: str) -> str:
    """Detect the dialect of a source file from its extension or content.

    Args:
        filename: Path to the file.

    Returns:
        Dialect name: "json" or "toml".

    Examples:
        >>> detect_dialect("settings.json5")
        'json'
        >>> detect_dialect("pyproject.toml")
        'toml'
    """
    extension = Path(filename).suffix.lower()

    if extension in EXTENSION_MAP:
        return EXTENSION_MAP[extension]

    # Content sniffing for unknown extensions: JSON documents open with a bracket
    path = Path(filename)
    if path.is_file():
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            head = f.read(4096).lstrip()
        if head.startswith(("{", "[")):
            return "json"
        return "toml"

    return "json"


def get_parser(dialect: str) -> DocumentParser:
    """Get the parser for a dialect name.

    Args:
        dialect: Dialect name ('json' or 'toml').

    Returns:
        A DocumentParser instance.

    Raises:
        ValueError: If the dialect is not supported.
    """
    from jsonscope.parsers.json5_parser import Json5Parser
    from jsonscope.parsers.toml_parser import TomlParser

    parsers: dict[str, type[DocumentParser]] = {
        "json": Json5Parser,
        "toml": TomlParser,
    }

    if dialect not in parsers:
        raise ValueError(
            f"Unsupported dialect: {dialect}. "
            f"Supported dialects: {', '.join(sorted(SUPPORTED_DIALECTS))}"
        )

    return parsers[dialect]()


def get_parser_for_file(filename: str) -> DocumentParser:
    """Get the parser for a file, detecting its dialect first."""
    return get_parser(detect_dialect(filename))
