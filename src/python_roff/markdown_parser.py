"""
Inline markdown for man page prose.

Man pages are mostly written as short runs of prose with a few commands and
placeholders mixed in, which is exactly what inline markdown is good at. This
module turns such text into inline spans for Document.text():

- *italic* or _italic_ -> Italic (placeholders, metavariables)
- **bold** or __bold__ -> Bold (commands, options)
- ***both*** -> BoldItalic
- `code` -> Bold (literal text the reader is expected to type)
- a hard line break (two trailing spaces or a backslash) -> LineBreak

Only the inline grammar is used. Text that would start a list, heading or
quote in a markdown document ("1. Build it", "- see below", "# NAME") is kept
as written. Newlines, blank lines included, collapse to a single space, and
links keep only their text.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any

from .models import Bold, BoldItalic, InlineSpan, Italic, LineBreak, Plain

if TYPE_CHECKING:
    from mistune import InlineParser

Token = dict[str, Any]


@dataclass
class TextSegment:
    """A run of text with font flags, as collected from the token stream.

    Attributes:
        text: The text content (empty for line breaks)
        bold: Whether the run is inside strong emphasis or code
        italic: Whether the run is inside emphasis
        is_linebreak: Whether this segment is a hard line break
    """

    text: str
    bold: bool = False
    italic: bool = False
    is_linebreak: bool = False

    def copy_with_text(self, new_text: str) -> TextSegment:
        """Create a copy with different text but same formatting."""
        return replace(self, text=new_text)

    def to_span(self) -> InlineSpan:
        """Flatten the formatting flags into a single inline span."""
        if self.is_linebreak:
            return LineBreak()
        if self.bold and self.italic:
            return BoldItalic(self.text)
        if self.bold:
            return Bold(self.text)
        if self.italic:
            return Italic(self.text)
        return Plain(self.text)


class SegmentRenderer:
    """Turns mistune inline tokens into TextSegment objects.

    Emphasis may nest arbitrarily, so the active fonts are tracked as nesting
    depths.
    """

    def __init__(self) -> None:
        self._segments: list[TextSegment] = []
        self._bold = 0
        self._italic = 0
        self._handlers: dict[str, Callable[[Token], None]] = {
            "text": self._text,
            "emphasis": self._emphasis,
            "strong": self._strong,
            "codespan": self._codespan,
            "inline_html": self._text,
            "softbreak": self._softbreak,
            "linebreak": self._linebreak,
        }

    def render(self, tokens: list[Token]) -> list[TextSegment]:
        """Render a token list, with same-style neighbours merged."""
        self._segments = []
        self._bold = 0
        self._italic = 0
        self._render_children(tokens)
        return _merge_segments(self._segments)

    def _render_children(self, tokens: list[Token]) -> None:
        for token in tokens:
            handler = self._handlers.get(token["type"])
            if handler is not None:
                handler(token)
            elif "children" in token:
                # Links and images: keep the text, drop the target
                self._render_children(token["children"])

    @contextmanager
    def _font(self, bold: bool = False, italic: bool = False) -> Iterator[None]:
        self._bold += bold
        self._italic += italic
        try:
            yield
        finally:
            self._bold -= bold
            self._italic -= italic

    def _add(self, text: str) -> None:
        if text:
            self._segments.append(
                TextSegment(text=text, bold=self._bold > 0, italic=self._italic > 0)
            )

    def _text(self, token: Token) -> None:
        self._add(token.get("raw", ""))

    def _emphasis(self, token: Token) -> None:
        with self._font(italic=True):
            self._render_children(token.get("children", []))

    def _strong(self, token: Token) -> None:
        with self._font(bold=True):
            self._render_children(token.get("children", []))

    def _codespan(self, token: Token) -> None:
        with self._font(bold=True):
            self._add(token.get("raw", ""))

    def _softbreak(self, token: Token) -> None:
        self._add(" ")

    def _linebreak(self, token: Token) -> None:
        self._segments.append(TextSegment(text="", is_linebreak=True))


def _merge_segments(segments: list[TextSegment]) -> list[TextSegment]:
    """Merge adjacent segments with identical formatting.

    Empty text segments are dropped. Line breaks are kept as they are and
    never merged with their neighbours.
    """
    merged: list[TextSegment] = []
    for segment in segments:
        if not segment.text and not segment.is_linebreak:
            continue
        if merged and _same_style(merged[-1], segment):
            merged[-1] = merged[-1].copy_with_text(merged[-1].text + segment.text)
        else:
            merged.append(segment)
    return merged


def _same_style(a: TextSegment, b: TextSegment) -> bool:
    if a.is_linebreak or b.is_linebreak:
        return False
    return (a.bold, a.italic) == (b.bold, b.italic)


@dataclass
class MarkdownParser:
    """Parses inline markdown into spans.

    One parser can be reused for any number of parses, but not from several
    threads at once; parse_markdown() creates a fresh one per call.
    """

    _inline: InlineParser = field(init=False, repr=False)
    _renderer: SegmentRenderer = field(init=False, repr=False)

    def __post_init__(self) -> None:
        import mistune

        self._inline = mistune.InlineParser()
        self._renderer = SegmentRenderer()

    def parse_segments(self, text: str) -> list[TextSegment]:
        """Parse markdown text into formatted segments.

        Leading and trailing whitespace, which markdown would strip, is kept
        on the first and last segment. Whitespace-only input comes back as a
        single plain segment.
        """
        if not text:
            return []
        if not text.strip():
            return [TextSegment(text=text)]

        tokens = self._inline(text.strip(), {"ref_links": {}})
        segments = self._renderer.render(tokens)
        if not segments:
            return [TextSegment(text=text)]

        # A newline in the surrounding whitespace is a soft break: one space
        leading = text[: len(text) - len(text.lstrip())].replace("\n", " ")
        trailing = text[len(text.rstrip()) :].replace("\n", " ")
        if leading and not segments[0].is_linebreak:
            segments[0] = segments[0].copy_with_text(leading + segments[0].text)
        if trailing and not segments[-1].is_linebreak:
            segments[-1] = segments[-1].copy_with_text(segments[-1].text + trailing)
        return segments

    def parse(self, text: str) -> list[InlineSpan]:
        """Parse markdown text into inline spans ready for Document.text()."""
        return [segment.to_span() for segment in self.parse_segments(text)]


def parse_markdown(text: str) -> list[InlineSpan]:
    """Parse inline markdown into spans with a fresh parser.

    Example:
        >>> parse_markdown("Pass **--help** for *usage*")
        [Plain(text='Pass '), Bold(text='--help'), Plain(text=' for '), Italic(text='usage')]
    """
    return MarkdownParser().parse(text)
