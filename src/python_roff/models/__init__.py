"""
Document model classes for python_roff.

Elements are the top-level nodes of a document; inline spans make up the
content of a Text element.
"""

from python_roff.models.elements import (
    ELEMENT_TYPES,
    Comment,
    ControlLine,
    Element,
    Table,
    Text,
    validate_macro_name,
)
from python_roff.models.spans import (
    SPAN_TYPES,
    Bold,
    BoldItalic,
    InlineSpan,
    Italic,
    LineBreak,
    Mono,
    MonoBold,
    MonoItalic,
    Plain,
    Roman,
    coerce_span,
)

__all__ = [
    "ELEMENT_TYPES",
    "SPAN_TYPES",
    "Bold",
    "BoldItalic",
    "Comment",
    "ControlLine",
    "Element",
    "InlineSpan",
    "Italic",
    "LineBreak",
    "Mono",
    "MonoBold",
    "MonoItalic",
    "Plain",
    "Roman",
    "Table",
    "Text",
    "coerce_span",
    "validate_macro_name",
]
