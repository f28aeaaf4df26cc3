"""
Inline span types: runs of text sharing one font.

Spans hold raw caller text. Escaping happens only when the document is
rendered, so the same span renders identically every time and can be
compared structurally.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Plain:
    """Text in the current (roman) font."""

    text: str


@dataclass(frozen=True)
class Bold:
    """Bold text, used for literal input such as command names and options."""

    text: str


@dataclass(frozen=True)
class Italic:
    """Italic text, used for placeholders and metavariables."""

    text: str


@dataclass(frozen=True)
class BoldItalic:
    """Text that is both bold and italic.

    Styles never nest, so overlapping bold and italic runs are flattened into
    this span before they reach the renderer.
    """

    text: str


@dataclass(frozen=True)
class Roman:
    """Text explicitly set in the roman font, whatever font is current."""

    text: str


@dataclass(frozen=True)
class Mono:
    """Constant width text, for code and file contents.

    Terminals have a single width, so the constant width fonts look like
    their proportional counterparts there.
    """

    text: str


@dataclass(frozen=True)
class MonoBold:
    """Bold constant width text."""

    text: str


@dataclass(frozen=True)
class MonoItalic:
    """Italic constant width text."""

    text: str


@dataclass(frozen=True)
class LineBreak:
    """An explicit line break (the ``.br`` request)."""


InlineSpan = Union[
    Plain, Roman, Bold, Italic, BoldItalic, Mono, MonoBold, MonoItalic, LineBreak
]

SPAN_TYPES: tuple[type, ...] = (
    Plain,
    Roman,
    Bold,
    Italic,
    BoldItalic,
    Mono,
    MonoBold,
    MonoItalic,
    LineBreak,
)


def coerce_span(item: InlineSpan | str) -> InlineSpan:
    """Return ``item`` as a span, treating a bare string as ``Plain``.

    Raises:
        TypeError: If ``item`` is neither a span nor a string
    """
    if isinstance(item, str):
        return Plain(item)
    if isinstance(item, SPAN_TYPES):
        return item
    raise TypeError(f"Expected an inline span or str, got {type(item).__name__}")
