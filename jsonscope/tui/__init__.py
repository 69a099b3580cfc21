"""
jsonscope terminal UI.

A Textual-based terminal UI for parsing JSON/JSON5 and TOML text into a
collapsible tree and comparing two documents side by side.

Usage:
    python -m jsonscope.tui.app config.toml
    python -m jsonscope.tui.app before.json --compare after.json

Components:
    - JsonScopeApp: Main application class
    - ViewerScreen: Source editor, search and document tree
    - CompareScreen: Two editors above a line-numbered diff
    - DocumentTree: Collapsible tree widget over a TreeModel
    - SourceOverlay: Source text with search and error highlights
"""
