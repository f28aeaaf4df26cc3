"""
High-level builder for man(7) pages.

This module provides a small API for writing manual pages without touching
macros directly. It is a thin layer over Document: every method appends
ordinary control lines and text, so the result can still be extended through
``Manpage.raw``.

Example:
    >>> from python_roff.manpage import Manpage, Section, Style
    >>>
    >>> page = Manpage("CORRUPT", Section.GENERAL)
    >>> page.section("NAME").paragraph("corrupt - modify files by randomly changing bits")
    >>> page.section("SYNOPSIS").paragraph([
    ...     (Style.ARGUMENT, "corrupt"),
    ...     (Style.NORMAL, " ["),
    ...     (Style.ARGUMENT, "-n"),
    ...     (Style.NORMAL, " "),
    ...     (Style.METAVAR, "BITS"),
    ...     (Style.NORMAL, "]"),
    ... ])
    >>> page.section("OPTIONS").definition(
    ...     [(Style.ARGUMENT, "-n"), (Style.NORMAL, "="), (Style.METAVAR, "BITS")],
    ...     "Set the number of bits to modify",
    ... )
    >>> page.save("corrupt.1")
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from enum import Enum
from pathlib import Path

from .document import Document
from .errors import ValidationError
from .markdown_parser import parse_markdown
from .models import (
    Bold,
    BoldItalic,
    InlineSpan,
    Italic,
    Mono,
    MonoBold,
    Plain,
    coerce_span,
)
from .output import write_updated

logger = logging.getLogger(__name__)


class Section(Enum):
    """Standard manual sections.

    Attributes:
        GENERAL: General commands
        SYSTEM_CALL: System calls
        LIBRARY_FUNCTION: Library functions such as the C standard library
        SPECIAL_FILE: Special files (usually devices in /dev) and drivers
        FILE_FORMAT: File formats and conventions
        GAME: Games and screensavers
        MISC: Miscellaneous
        SYSADMIN: System administration commands and daemons
    """

    GENERAL = "1"
    SYSTEM_CALL = "2"
    LIBRARY_FUNCTION = "3"
    SPECIAL_FILE = "4"
    FILE_FORMAT = "5"
    GAME = "6"
    MISC = "7"
    SYSADMIN = "8"


def section_number(section: Section | str | int) -> str:
    """Resolve a section to the string used in the ``.TH`` header.

    Custom sections must start with a digit 1-8 and may carry a suffix
    naming a subsection, e.g. "3p" or "1ssl".

    Raises:
        ValidationError: If a custom section does not start with 1-8
    """
    if isinstance(section, Section):
        return section.value

    value = str(section)
    if not value or value[0] not in "12345678":
        raise ValidationError(
            f"Invalid manual section {value!r}",
            errors=["a section must start with a digit from 1 to 8"],
        )
    return value


class Style(Enum):
    """Semantic text style.

    Unlike the span types, which say how text looks, a style says what the
    text is; the mapping to fonts follows man page conventions.

    Attributes:
        NORMAL: Plain text with no decorations
        ARGUMENT: Command names, switches and anything typed literally (bold)
        METAVAR: Placeholders the reader replaces with their own input (italic)
        HIGHLIGHT: Extra highlighted text (bold italic)
        MONO: Code and file contents (constant width)
        LITERAL: Literal code the reader types (bold constant width)
    """

    NORMAL = "normal"
    ARGUMENT = "argument"
    METAVAR = "metavar"
    HIGHLIGHT = "highlight"
    MONO = "mono"
    LITERAL = "literal"

    def span(self, text: str) -> InlineSpan:
        """Wrap ``text`` in the span type for this style."""
        return _STYLE_SPANS[self](text)


_STYLE_SPANS = {
    Style.NORMAL: Plain,
    Style.ARGUMENT: Bold,
    Style.METAVAR: Italic,
    Style.HIGHLIGHT: BoldItalic,
    Style.MONO: Mono,
    Style.LITERAL: MonoBold,
}

SpanInput = str | InlineSpan | tuple[Style, str]


def to_spans(content: SpanInput | Iterable[SpanInput]) -> list[InlineSpan]:
    """Normalize the accepted text inputs into a list of spans.

    Accepts a single string, a single span, a ``(Style, text)`` pair, or an
    iterable mixing any of those.
    """
    if isinstance(content, str) or _is_styled(content) or not isinstance(content, Iterable):
        content = [content]  # type: ignore[list-item]

    spans: list[InlineSpan] = []
    for item in content:  # type: ignore[union-attr]
        if _is_styled(item):
            style, text = item  # type: ignore[misc]
            spans.append(style.span(text))
        else:
            spans.append(coerce_span(item))  # type: ignore[arg-type]
    return spans


def _is_styled(item: object) -> bool:
    return isinstance(item, tuple) and len(item) == 2 and isinstance(item[0], Style)


class Manpage:
    """A man page under construction.

    Args:
        title: Page title, conventionally the program name in upper case
        section: Manual section (default: general commands)
        date: Free-form date the page was last updated
        source: Project or suite the program belongs to
        manual: Title of the manual the page is part of

    Raises:
        ValidationError: If ``section`` is not a valid manual section
    """

    def __init__(
        self,
        title: str,
        section: Section | str | int = Section.GENERAL,
        date: str | None = None,
        source: str | None = None,
        manual: str | None = None,
    ) -> None:
        self.title = title
        self.section_number = section_number(section)

        # .TH fields are positional: fill gaps before the last given field
        extra = [date, source, manual]
        while extra and extra[-1] is None:
            extra.pop()

        self._document = Document()
        self._document.title(title, self.section_number, *(value or "" for value in extra))

    @property
    def raw(self) -> Document:
        """Access the underlying Document for anything not covered here."""
        return self._document

    def section(self, title: str) -> Manpage:
        """Start a new section (``.SH``)."""
        self._document.heading(title)
        return self

    def subsection(self, title: str) -> Manpage:
        """Start a new subsection (``.SS``)."""
        self._document.subheading(title)
        return self

    def paragraph(self, content: SpanInput | Iterable[SpanInput]) -> Manpage:
        """Add a paragraph of text.

        Args:
            content: Text, spans or ``(Style, text)`` pairs

        Returns:
            Self for chaining
        """
        self._document.text(to_spans(content)).paragraph()
        return self

    def markdown(self, text: str) -> Manpage:
        """Add a paragraph written in inline markdown."""
        self._document.text(parse_markdown(text)).paragraph()
        return self

    def label(self, content: SpanInput | Iterable[SpanInput], width: str | None = None) -> Manpage:
        """Add an indented label (``.TP``).

        The label is the tag of a tagged paragraph; the next paragraph becomes
        its indented body.

        Args:
            content: Label text, spans or ``(Style, text)`` pairs
            width: Optional indentation, e.g. "8n"

        Returns:
            Self for chaining
        """
        self._document.tagged(width).text(to_spans(content))
        return self

    def definition(
        self,
        term: SpanInput | Iterable[SpanInput],
        description: SpanInput | Iterable[SpanInput],
        width: str | None = None,
    ) -> Manpage:
        """Add a definition list entry: a label followed by its description."""
        return self.label(term, width=width).paragraph(description)

    def indent(self, width: str | None = None) -> Manpage:
        """Increase indentation until the matching outdent (``.RS``)."""
        self._document.indent(width)
        return self

    def outdent(self) -> Manpage:
        """Return to the previous indentation (``.RE``)."""
        self._document.outdent()
        return self

    def table(
        self,
        rows: Sequence[Sequence[object]],
        header: Sequence[object] | None = None,
        alignments: Sequence[str] | None = None,
        boxed: bool = True,
    ) -> Manpage:
        """Add a table; see Document.table."""
        self._document.table(rows, header=header, alignments=alignments, boxed=boxed)
        return self

    def comment(self, text: str) -> Manpage:
        """Add a source comment."""
        self._document.comment(text)
        return self

    def render(self, handle_apostrophes: bool = True) -> str:
        """Render the page to ROFF source text.

        Args:
            handle_apostrophes: Map apostrophes to the Aq glyph (default: True)

        Returns:
            ROFF source text
        """
        return self._document.render(handle_apostrophes=handle_apostrophes)

    def save(self, path: str | Path, handle_apostrophes: bool = True) -> bool:
        """Render the page and write it to ``path`` if it changed.

        Returns:
            True if the file was written, False if it was already up to date
        """
        changed = write_updated(path, self.render(handle_apostrophes=handle_apostrophes))
        logger.debug("Saved %s(%s) to %s (changed=%s)", self.title, self.section_number, path, changed)
        return changed
