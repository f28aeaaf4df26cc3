"""
Append-only ROFF document builder.

A Document is an ordered list of elements. It grows only through the builder
methods below; elements already appended are immutable and cannot be removed,
so a built document can be shared read-only and rendered any number of times
with identical results.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Sequence

from .constants import (
    MACRO_INDENT_END,
    MACRO_INDENT_START,
    MACRO_INDENTED_PARAGRAPH,
    MACRO_PARAGRAPH,
    MACRO_SECTION,
    MACRO_SUBSECTION,
    MACRO_TAGGED_PARAGRAPH,
    MACRO_TITLE,
    REQUEST_BREAK,
    REQUEST_SPACE,
)
from .markdown_parser import parse_markdown
from .models import (
    ELEMENT_TYPES,
    Comment,
    ControlLine,
    Element,
    InlineSpan,
    Table,
    Text,
)
from .rendering import RoffRenderer

logger = logging.getLogger(__name__)


class Document:
    """An ordered, append-only sequence of ROFF elements.

    All builder methods return the document so calls can be chained.

    Example:
        >>> from python_roff import Document, Bold, Plain
        >>> doc = Document()
        >>> doc.control("TH", ["FOO", "1"]).heading("NAME")
        >>> doc.text([Bold("foo"), Plain(" - do a foo thing")])
        >>> print(doc.render())
        .TH FOO 1
        .SH NAME
        \\fBfoo\\fP \\- do a foo thing
    """

    def __init__(self) -> None:
        self._elements: list[Element] = []

    # ------------------------------------------------------------------
    # Read-only access
    # ------------------------------------------------------------------

    @property
    def elements(self) -> tuple[Element, ...]:
        """Snapshot of the appended elements, in order."""
        return tuple(self._elements)

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[Element]:
        return iter(tuple(self._elements))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Document):
            return NotImplemented
        return self._elements == other._elements

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Document(elements={len(self._elements)})"

    # ------------------------------------------------------------------
    # Core builder API
    # ------------------------------------------------------------------

    def append(self, element: Element) -> Document:
        """Append a prebuilt element.

        Args:
            element: A ControlLine, Text, Comment or Table

        Returns:
            Self for chaining

        Raises:
            TypeError: If ``element`` is not a document element
        """
        if not isinstance(element, ELEMENT_TYPES):
            raise TypeError(f"Expected a document element, got {type(element).__name__}")
        self._elements.append(element)
        return self

    def control(self, macro_name: str, arguments: Iterable[object] = ()) -> Document:
        """Append a control line (request or macro call).

        Args:
            macro_name: Name without the leading '.', e.g. "SH"
            arguments: Raw argument values; converted with str() and escaped
                at render time

        Returns:
            Self for chaining

        Raises:
            InvalidMacroNameError: If ``macro_name`` is empty or contains
                anything other than ASCII letters and digits

        Example:
            >>> Document().control("B", ["has space", "plain"]).render()
            '.B "has space" plain\\n'
        """
        if isinstance(arguments, str):
            arguments = (arguments,)
        return self.append(ControlLine(macro_name, tuple(str(arg) for arg in arguments)))

    def text(self, spans: Iterable[InlineSpan | str]) -> Document:
        """Append a line of prose.

        Args:
            spans: Inline spans; a bare string is treated as Plain

        Returns:
            Self for chaining
        """
        if isinstance(spans, str):
            spans = (spans,)
        return self.append(Text(tuple(spans)))  # type: ignore[arg-type]

    def comment(self, text: str) -> Document:
        """Append a source comment that the formatter ignores."""
        return self.append(Comment(text))

    def table(
        self,
        rows: Sequence[Sequence[object]],
        header: Sequence[object] | None = None,
        alignments: Sequence[str] | None = None,
        boxed: bool = True,
    ) -> Document:
        """Append a tbl(1) table.

        Args:
            rows: Body rows, each a sequence of cell values
            header: Optional header row, rendered bold
            alignments: Per-column "l", "c" or "r" (default: all "l")
            boxed: Draw a box around every cell (default: True)

        Returns:
            Self for chaining

        Raises:
            TableShapeError: If the table is empty or rows are ragged

        Example:
            >>> doc.table([["-v", "verbose"], ["-q", "quiet"]], header=["Flag", "Meaning"])
        """
        return self.append(
            Table(
                rows=tuple(tuple(str(cell) for cell in row) for row in rows),
                header=tuple(str(cell) for cell in header) if header is not None else None,
                alignments=tuple(alignments) if alignments is not None else None,
                boxed=boxed,
            )
        )

    def markdown(self, text: str) -> Document:
        """Append a line of prose written in inline markdown.

        ``**bold**``, ``*italic*``, ``***both***`` and hard line breaks are
        supported. See python_roff.markdown_parser.

        Args:
            text: Markdown-formatted text

        Returns:
            Self for chaining
        """
        return self.text(parse_markdown(text))

    def extend(self, other: Iterable[Element]) -> Document:
        """Append every element of another document, in order."""
        for element in other:
            self.append(element)
        return self

    # ------------------------------------------------------------------
    # man(7) macro sugar
    # ------------------------------------------------------------------

    def title(self, name: str, section: str, *extra: str) -> Document:
        """Append the ``.TH`` page header.

        Args:
            name: Page title, conventionally upper case
            section: Manual section, e.g. "1"
            *extra: Up to three of date, source and manual name; further
                values are dropped
        """
        if len(extra) > 3:
            logger.debug("Dropping %d extra .TH field(s)", len(extra) - 3)
        return self.control(MACRO_TITLE, [name, section, *extra[:3]])

    def heading(self, title: str) -> Document:
        """Append a section heading (``.SH``)."""
        return self.control(MACRO_SECTION, [title])

    def subheading(self, title: str) -> Document:
        """Append a subsection heading (``.SS``)."""
        return self.control(MACRO_SUBSECTION, [title])

    def paragraph(self) -> Document:
        """Append a paragraph break (``.PP``)."""
        return self.control(MACRO_PARAGRAPH)

    def indent(self, width: str | None = None) -> Document:
        """Start a relative indent (``.RS``)."""
        return self.control(MACRO_INDENT_START, _optional(width))

    def outdent(self) -> Document:
        """End the innermost relative indent (``.RE``)."""
        return self.control(MACRO_INDENT_END)

    def tagged(self, width: str | None = None) -> Document:
        """Start a tagged paragraph (``.TP``); the next text line is the tag."""
        return self.control(MACRO_TAGGED_PARAGRAPH, _optional(width))

    def indented(self, tag: str | None = None, width: str | None = None) -> Document:
        """Start an indented paragraph (``.IP``) with an optional tag."""
        if tag is None and width is None:
            return self.control(MACRO_INDENTED_PARAGRAPH)
        return self.control(MACRO_INDENTED_PARAGRAPH, [tag or "", *_optional(width)])

    def line_break(self) -> Document:
        """Append a line break request (``.br``)."""
        return self.control(REQUEST_BREAK)

    def space(self, lines: int | None = None) -> Document:
        """Append vertical space (``.sp``)."""
        return self.control(REQUEST_SPACE, _optional(lines))

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(self, handle_apostrophes: bool = False) -> str:
        """Render the document to ROFF source text.

        Args:
            handle_apostrophes: Emit the Aq preamble and glyph escapes for
                apostrophes (default: False)

        Returns:
            ROFF source text
        """
        return RoffRenderer(handle_apostrophes=handle_apostrophes).render(self)


def _optional(value: object | None) -> tuple[str, ...]:
    return () if value is None else (str(value),)
