"""
Highlight compositing for raw source text and tree labels.

Two independent annotation sources are overlaid on a piece of text:

    - search: every case-insensitive, literal occurrence of the search term
    - error: the single character at a parser-reported line/column

The result is a flat list of segments that never nest. Where the error
character falls inside a search match, the error wins at that character and
the text on either side of it is searched again on its own, so a straddling
match is split (or lost) at the error boundary.

Segments can be emitted as escaped markup (render) or as a Rich Text for the
terminal (to_rich_text).
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from rich.text import Text


SEARCH = "search"
ERROR = "error"

# Higher priority wins where spans overlap
TAG_PRIORITY: dict[str, int] = {
    SEARCH: 1,
    ERROR: 2,
}

# Glyph shown in place of the error character when the error is at end of text
ERROR_PLACEHOLDER = "\u00a0"

DEFAULT_STYLES: dict[str, str] = {
    SEARCH: "bold black on green",
    ERROR: "bold white on red underline",
}

_MARKUP_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#39;"),
)

_LINE_BREAK = re.compile(r"\r?\n")


@dataclass(frozen=True)
class ErrorLocation:
    """A 1-based line/column position reported by a parser."""

    line: int
    column: int


@dataclass(frozen=True)
class HighlightSpan:
    """A half-open character range [start, end) carrying a highlight tag."""

    start: int
    end: int
    tag: str

    @property
    def priority(self) -> int:
        return TAG_PRIORITY.get(self.tag, 0)


@dataclass(frozen=True)
class Segment:
    """A piece of composited output: plain text (tag None) or tagged text."""

    text: str
    tag: str | None = None
    placeholder: bool = False


def escape_markup(text: str) -> str:
    """Escape the characters that are meaningful to the markup surface."""
    for raw, escaped in _MARKUP_ESCAPES:
        text = text.replace(raw, escaped)
    return text


def find_search_spans(text: str, term: str | None, offset: int = 0) -> list[HighlightSpan]:
    """Find every occurrence of a search term.

    The term is trimmed and matched literally and case-insensitively. Matches
    are found left to right and never overlap.

    Args:
        text: The text to scan.
        term: The search term; a blank term finds nothing.
        offset: Added to every span position (for scanning a slice).

    Returns:
        The search spans in text order.
    """
    needle = (term or "").strip()
    if not needle:
        return []
    pattern = re.compile(re.escape(needle), re.IGNORECASE)
    return [
        HighlightSpan(match.start() + offset, match.end() + offset, SEARCH)
        for match in pattern.finditer(text)
    ]


def error_offset(text: str, location: ErrorLocation) -> int:
    """Convert a 1-based line/column into a character offset in ``text``.

    Lines are split on LF or CRLF and every preceding line counts its length
    plus one. Out-of-range positions are clamped instead of rejected.

    Args:
        text: The raw, unescaped source text the location refers to.
        location: The parser-reported position.

    Returns:
        An offset in [0, len(text)].

    Examples:
        >>> error_offset("abc\\ndef", ErrorLocation(line=2, column=2))
        5
    """
    lines = _LINE_BREAK.split(text)
    line = max(1, min(location.line, len(lines)))
    column = max(1, location.column)
    offset = sum(len(lines[i]) + 1 for i in range(line - 1)) + (column - 1)
    return max(0, min(offset, len(text)))


def flatten_spans(length: int, spans: list[HighlightSpan]) -> list[tuple[int, int, str | None]]:
    """Merge candidate spans into a flat partition of [0, length).

    Where spans overlap, the one with the higher priority wins and the other
    is split around it. Gaps are filled with untagged ranges. Adjacent spans
    stay separate even when they carry the same tag.

    Args:
        length: Length of the text the spans refer to.
        spans: Candidate spans, in any order.

    Returns:
        Ordered, non-overlapping (start, end, tag) ranges covering the text.
    """
    owner = [-1] * length
    ranked = sorted(range(len(spans)), key=lambda i: spans[i].priority)
    for index in ranked:
        span = spans[index]
        for pos in range(max(0, span.start), min(length, span.end)):
            owner[pos] = index

    ranges: list[tuple[int, int, str | None]] = []
    start = 0
    for pos in range(1, length + 1):
        if pos == length or owner[pos] != owner[start]:
            tag = spans[owner[start]].tag if owner[start] >= 0 else None
            ranges.append((start, pos, tag))
            start = pos
    return ranges


def _to_segments(text: str, spans: list[HighlightSpan]) -> list[Segment]:
    return [Segment(text[start:end], tag) for start, end, tag in flatten_spans(len(text), spans)]


def composite(
    text: str,
    search: str | None = "",
    error: ErrorLocation | None = None,
) -> list[Segment]:
    """Overlay search matches and a parse error position on raw text.

    Args:
        text: The raw source text.
        search: The search term (blank disables the search overlay).
        error: The parse error position, if any.

    Returns:
        Segments that concatenate back to ``text`` (plus a single placeholder
        segment when the error sits at the end of the text).
    """
    if error is None:
        return _to_segments(text, find_search_spans(text, search))

    start = error_offset(text, error)
    at_end = start >= len(text)
    end = start if at_end else start + 1

    spans = find_search_spans(text[:start], search)
    spans.extend(find_search_spans(text[end:], search, offset=end))
    if not at_end:
        spans.append(HighlightSpan(start, end, ERROR))

    segments = _to_segments(text, spans)
    if at_end:
        segments.append(Segment(ERROR_PLACEHOLDER, ERROR, placeholder=True))
    return segments


def to_markup(segments: list[Segment]) -> str:
    """Emit segments as escaped markup with one span per tagged segment."""
    parts: list[str] = []
    for segment in segments:
        body = "&nbsp;" if segment.placeholder else escape_markup(segment.text)
        if segment.tag is None:
            parts.append(body)
        else:
            parts.append(f'<span class="{segment.tag}">{body}</span>')
    return "".join(parts)


def render(
    text: str,
    search: str | None = "",
    error: ErrorLocation | None = None,
) -> str:
    """Escape ``text`` and overlay the search and error highlights as markup.

    Examples:
        >>> render("foobar", "oo")
        'f<span class="search">oo</span>bar'
        >>> render("a<b", error=ErrorLocation(1, 2))
        'a<span class="error">&lt;</span>b'
    """
    return to_markup(composite(text, search, error))


def to_rich_text(segments: list[Segment], styles: dict[str, str] | None = None) -> Text:
    """Build a Rich Text from segments, styling each tagged segment."""
    styles = DEFAULT_STYLES if styles is None else styles
    text = Text()
    for segment in segments:
        style = styles.get(segment.tag, "") if segment.tag else ""
        text.append(segment.text, style=style)
    return text


def highlight_text(text: str, search: str | None = "", styles: dict[str, str] | None = None) -> Text:
    """Search-highlight a short label or value for the terminal."""
    return to_rich_text(composite(text, search), styles)
