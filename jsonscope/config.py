"""Viewer configuration: defaults, overridable from the command line."""

from __future__ import annotations

from dataclasses import dataclass

from jsonscope.core.normalizer import DEFAULT_INDENT
from jsonscope.core.tree_model import DEFAULT_COLLAPSED_DEPTH


@dataclass
class ViewerConfig:
    """Settings shared by the viewer and compare screens.

    Attributes:
        dialect: Dialect of the editors ('json' or 'toml').
        collapsed_depth: Tree containers at this depth and deeper start closed.
        indent: Indentation of formatted output and of the diff input.
        parse_json_strings: Expand JSON embedded in string values.
        log_level: Level name for the logging handler.
    """

    dialect: str = "json"
    collapsed_depth: int = DEFAULT_COLLAPSED_DEPTH
    indent: int = DEFAULT_INDENT
    parse_json_strings: bool = False
    log_level: str = "WARNING"
