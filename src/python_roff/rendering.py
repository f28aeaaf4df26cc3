"""
Rendering of documents to ROFF source text.

The renderer walks a document once, in order, and writes control lines and
escaped text into a buffer. It performs no I/O and cannot fail for a document
that was built through the model classes: every validation happens when the
elements are created.

Usage:
    from python_roff import Document, Bold, Plain
    from python_roff.rendering import render

    doc = Document().title("FOO", "1").text([Bold("foo"), Plain(" does things")])
    print(render(doc))

Set ``handle_apostrophes=True`` to map ``'`` and ``` ` ``` to their glyphs.
This prepends a short preamble that defines the ``Aq`` string, which is what
man pages meant for groff and other formatters usually want.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import cast

from .constants import (
    APOSTROPHE_PREAMBLE,
    COMMENT_PREFIX,
    CONTROL_CHAR,
    FONT_BOLD,
    FONT_BOLD_ITALIC,
    FONT_ITALIC,
    FONT_MONO,
    FONT_MONO_BOLD,
    FONT_MONO_ITALIC,
    FONT_ROMAN,
    REQUEST_BREAK,
    RESTORE_FONT,
    TABLE_BLOCK_END,
    TABLE_BLOCK_START,
    TABLE_END,
    TABLE_START,
    TABLE_TAB,
    ZERO_WIDTH,
)
from .escape import escape_argument, escape_cell, escape_text, fold_newlines
from .models import (
    Bold,
    BoldItalic,
    Comment,
    ControlLine,
    Element,
    InlineSpan,
    Italic,
    LineBreak,
    Mono,
    MonoBold,
    MonoItalic,
    Plain,
    Roman,
    Table,
    Text,
)

logger = logging.getLogger(__name__)

# Font escape that switches on each styled span; Plain has none
FONT_ESCAPES: dict[type, str] = {
    Bold: FONT_BOLD,
    Italic: FONT_ITALIC,
    BoldItalic: FONT_BOLD_ITALIC,
    Roman: FONT_ROMAN,
    Mono: FONT_MONO,
    MonoBold: FONT_MONO_BOLD,
    MonoItalic: FONT_MONO_ITALIC,
}


class _Output:
    """Output buffer that tracks whether the next character starts a line."""

    def __init__(self) -> None:
        self._parts: list[str] = []
        self.at_line_start = True
        self.lines = 0

    def write(self, chunk: str) -> None:
        if not chunk:
            return
        self._parts.append(chunk)
        self.lines += chunk.count("\n")
        self.at_line_start = chunk.endswith("\n")

    def end_line(self) -> None:
        """Terminate the current line unless it is already terminated."""
        if not self.at_line_start:
            self.write("\n")

    def getvalue(self) -> str:
        return "".join(self._parts)


class RoffRenderer:
    """Renders documents to ROFF source text.

    The renderer holds only configuration, so one instance can render any
    number of documents, from any number of threads.

    Args:
        handle_apostrophes: Emit the ``Aq`` preamble and replace apostrophes
            and grave accents with glyph escapes (default: False)

    Example:
        >>> RoffRenderer().render(Document().control("TH", ["FOO", "1"]))
        '.TH FOO 1\\n'
    """

    def __init__(self, handle_apostrophes: bool = False) -> None:
        self.handle_apostrophes = handle_apostrophes

    def render(self, elements: Iterable[Element]) -> str:
        """Render a document (or any sequence of elements) to a string.

        Args:
            elements: A Document or an iterable of elements

        Returns:
            ROFF source text; empty for an empty document without preamble
        """
        out = _Output()
        if self.handle_apostrophes:
            out.write(APOSTROPHE_PREAMBLE)

        count = 0
        for element in elements:
            self._render_element(element, out)
            count += 1

        logger.debug("Rendered %d element(s) into %d line(s)", count, out.lines)
        return out.getvalue()

    def _render_element(self, element: Element, out: _Output) -> None:
        """Dispatch one element to its renderer."""
        if isinstance(element, ControlLine):
            self._render_control(element, out)
        elif isinstance(element, Text):
            self._render_text(element, out)
        elif isinstance(element, Comment):
            self._render_comment(element, out)
        elif isinstance(element, Table):
            self._render_table(element, out)
        else:
            raise TypeError(f"Cannot render element of type {type(element).__name__}")

    def _render_control(self, element: ControlLine, out: _Output) -> None:
        """Render ``.NAME arg...`` on its own line."""
        line = CONTROL_CHAR + element.macro_name
        for argument in element.arguments:
            line += " " + escape_argument(argument, apostrophes=self.handle_apostrophes)
        out.end_line()
        out.write(line + "\n")

    def _render_text(self, element: Text, out: _Output) -> None:
        """Render spans, bracketing each styled span with its font escape."""
        for span in element.spans:
            self._render_span(span, out)
        out.end_line()

    def _render_span(self, span: InlineSpan, out: _Output) -> None:
        if isinstance(span, LineBreak):
            out.end_line()
            out.write(CONTROL_CHAR + REQUEST_BREAK + "\n")
            return

        if type(span) is not Plain and type(span) not in FONT_ESCAPES:
            raise TypeError(f"Cannot render span of type {type(span).__name__}")
        if not span.text:
            return

        body = escape_text(
            span.text, at_line_start=out.at_line_start, apostrophes=self.handle_apostrophes
        )
        font = FONT_ESCAPES.get(type(span))
        if font is None:
            out.write(body)
        else:
            out.write(font + body + RESTORE_FONT)

    def _render_comment(self, element: Comment, out: _Output) -> None:
        text = escape_text(fold_newlines(element.text), apostrophes=self.handle_apostrophes)
        out.end_line()
        out.write(COMMENT_PREFIX + text + "\n")

    def _render_table(self, element: Table, out: _Output) -> None:
        """Render a tbl(1) table with every cell in a ``T{``/``T}`` text block."""
        alignments = cast("tuple[str, ...]", element.alignments)

        options = f"tab({TABLE_TAB});"
        if element.boxed:
            options = "allbox " + options

        formats: list[str] = []
        if element.header is not None:
            formats.append(" ".join(alignment + "b" for alignment in alignments))
        formats.append(" ".join(alignments) + ".")

        out.end_line()
        out.write(CONTROL_CHAR + TABLE_START + "\n")
        out.write(options + "\n")
        for line in formats:
            out.write(line + "\n")

        rows = list(element.rows)
        if element.header is not None:
            rows.insert(0, element.header)
        for row in rows:
            out.write(TABLE_TAB.join(self._table_cell(cell) for cell in row) + "\n")

        out.write(CONTROL_CHAR + TABLE_END + "\n")

    def _table_cell(self, cell: str) -> str:
        if not cell:
            return ZERO_WIDTH
        body = escape_cell(cell, apostrophes=self.handle_apostrophes)
        return f"{TABLE_BLOCK_START}\n{body}\n{TABLE_BLOCK_END}"


def render(elements: Iterable[Element], handle_apostrophes: bool = False) -> str:
    """Render a document to ROFF source text.

    Args:
        elements: A Document or an iterable of elements
        handle_apostrophes: See RoffRenderer

    Returns:
        ROFF source text

    Example:
        >>> from python_roff import Document, Bold, Plain
        >>> render(Document().text([Bold("Warning"), Plain(": do not panic")]))
        '\\\\fBWarning\\\\fP: do not panic\\n'
    """
    return RoffRenderer(handle_apostrophes=handle_apostrophes).render(elements)
