"""
jsonscope: a terminal viewer and comparer for JSON, JSON5 and TOML.

Usage:
    jsonscope config.json
    jsonscope left.toml --compare right.toml

Components:
    - jsonscope.core: normalizer, diff column aligner, tree model, highlighting
    - jsonscope.parsers: JSON/JSON5 and TOML parsers with error positions
    - jsonscope.tui: the Textual application
"""

__version__ = "0.1.0"
