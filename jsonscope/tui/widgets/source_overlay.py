"""
Source Overlay widget showing the raw editor text with highlights.

The overlay repeats the editor's text with search matches and the parse
error character highlighted, followed by a one-line error indicator. It is
only displayed while a search term or a parse error is active.
"""

from __future__ import annotations

from rich.text import Text
from textual.widgets import Static

from jsonscope.core import ErrorLocation, composite, to_rich_text


def error_indicator(message: str | None, location: ErrorLocation | None) -> str:
    """Describe a parse error for the line under the overlay.

    Examples:
        >>> error_indicator("bad", ErrorLocation(2, 5))
        'Parse error at line 2, column 5'
        >>> error_indicator("Unexpected end of input", None)
        'Parse error: Unexpected end of input'
    """
    if location is not None:
        return f"Parse error at line {location.line}, column {location.column}"
    if message:
        return f"Parse error: {message}"
    return ""


class SourceOverlay(Static):
    """Highlighted copy of an editor's source text."""

    DEFAULT_CSS = """
    SourceOverlay {
        height: auto;
        padding: 0 1;
        border-top: dashed $primary;
    }
    """

    def __init__(self, *, id: str | None = None, classes: str | None = None) -> None:
        super().__init__("", id=id, classes=classes)
        self.display = False

    def show_source(
        self,
        text: str,
        search: str = "",
        location: ErrorLocation | None = None,
        message: str | None = None,
    ) -> None:
        """Render the source with highlights, or hide when nothing applies.

        Args:
            text: The raw editor text.
            search: The active search term.
            location: The parse error position, if the message carried one.
            message: The parse error message, if the text failed to parse.
        """
        active = bool(search.strip()) or location is not None or bool(message)
        self.display = active
        if not active:
            self.update("")
            return

        content: Text = to_rich_text(composite(text, search, location))
        indicator = error_indicator(message, location)
        if indicator:
            content.append("\n\n")
            content.append(indicator, style="bold red")
        self.update(content)
