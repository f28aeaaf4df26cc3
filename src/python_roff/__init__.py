"""
python_roff - Build UNIX man pages in Python and render them to ROFF.

This package provides a small document model for the ROFF markup language
(control lines, styled text, comments and tables) and a renderer that escapes
every piece of caller text, so arbitrary strings can never break the output
grammar.

Example:
    >>> from python_roff import Document, Bold, Plain
    >>> doc = Document().title("FOO", "1").heading("NAME")
    >>> doc.text([Bold("foo"), Plain(" - do a foo thing")])
    >>> print(doc.render())
    .TH FOO 1
    .SH NAME
    \\fBfoo\\fP \\- do a foo thing
"""

__version__ = "0.2.1"
__all__ = [
    "Document",
    "Manpage",
    "Section",
    "Style",
    "Plain",
    "Bold",
    "Italic",
    "BoldItalic",
    "Roman",
    "Mono",
    "MonoBold",
    "MonoItalic",
    "LineBreak",
    "InlineSpan",
    "ControlLine",
    "Text",
    "Comment",
    "Table",
    "Element",
    "RoffRenderer",
    "render",
    "parse_markdown",
    "load_page",
    "load_page_data",
    "write_updated",
    "RoffError",
    "InvalidMacroNameError",
    "TableShapeError",
    "ValidationError",
]

# Import document class
from .document import Document
from .errors import InvalidMacroNameError, RoffError, TableShapeError, ValidationError

# Import high-level man page builder
from .manpage import Manpage, Section, Style

# Import markdown support
from .markdown_parser import parse_markdown

# Import model classes
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

# Import output helpers
from .output import write_updated

# Import page file loading
from .page_file import load_page, load_page_data

# Import rendering
from .rendering import RoffRenderer, render
