"""TOML dialect parser."""

from __future__ import annotations

import tomllib
from typing import Any

from jsonscope.parsers.base import DocumentParser, ParseError


class TomlParser(DocumentParser):
    """Parser for the TOML dialect.

    Date and time values are kept as datetime objects; they are shown and
    serialized in ISO format.
    """

    @property
    def format_name(self) -> str:
        """Return the dialect name."""
        return "toml"

    @property
    def supported_extensions(self) -> list[str]:
        """Return supported file extensions."""
        return [".toml"]

    def parse_text(self, text: str) -> Any:
        """Parse TOML text into a dict.

        Raises:
            ParseError: If the text is not valid TOML.
        """
        try:
            return tomllib.loads(text)
        except tomllib.TOMLDecodeError as e:
            raise ParseError(str(e)) from e
