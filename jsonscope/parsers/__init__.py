"""
Parsers for the supported source dialects.

This module provides a unified interface for turning source text into a
parsed document, for JSON/JSON5 and TOML.

Usage:
    from jsonscope.parsers import get_parser, ParseError

    parser = get_parser("toml")
    try:
        document = parser.parse(text)
    except ParseError as e:
        print(e.message, e.location)
"""

from jsonscope.parsers.base import DocumentParser, ParseError, location_from_message
from jsonscope.parsers.embedded_json import expand_embedded_json, looks_like_json
from jsonscope.parsers.format_detector import (
    EXTENSION_MAP,
    SUPPORTED_DIALECTS,
    detect_dialect,
    get_parser,
    get_parser_for_file,
)
from jsonscope.parsers.json5_parser import Json5Parser, preprocess
from jsonscope.parsers.toml_parser import TomlParser

__all__ = [
    # Base class
    "DocumentParser",
    "ParseError",
    "location_from_message",
    # Dialect detection
    "detect_dialect",
    "get_parser",
    "get_parser_for_file",
    "EXTENSION_MAP",
    "SUPPORTED_DIALECTS",
    # Parsers
    "Json5Parser",
    "TomlParser",
    "preprocess",
    # Embedded JSON
    "expand_embedded_json",
    "looks_like_json",
]
