"""
Escaping of caller-supplied text for ROFF output.

Every string that reaches the output stream passes through this module, so
the rules here are what guarantees caller text can never alter document
structure:

- a backslash becomes ``\\\\`` (literal backslash)
- ``-`` becomes ``\\-`` (minus sign, so options like ``--help`` survive)
- a tab becomes ``\\t``
- a line starting with ``.``, ``'`` or a space is prefixed with ``\\&``

The leading-character rule applies wherever text can land at the start of a
line, including control line arguments and table cells.
"""

from __future__ import annotations

from .constants import (
    APOSTROPHE,
    BACKSLASH,
    CONTROL_CHAR,
    GRAVE,
    MINUS,
    NO_BREAK_CONTROL_CHAR,
    TAB,
    TABLE_BLOCK_END,
    ZERO_WIDTH,
)

# Characters that change meaning when they begin an input line
LINE_START_CHARS = frozenset({CONTROL_CHAR, NO_BREAK_CONTROL_CHAR, " "})

_SUBSTITUTIONS = {
    "\\": BACKSLASH,
    "-": MINUS,
    "\t": TAB,
}

_APOSTROPHE_SUBSTITUTIONS = {
    **_SUBSTITUTIONS,
    "'": APOSTROPHE,
    "`": GRAVE,
}


def escape_text(text: str, at_line_start: bool = False, apostrophes: bool = False) -> str:
    """Escape text for use on a ROFF text line.

    Newlines are kept; every line that follows one is treated as a fresh
    line and gets the leading-character protection.

    Args:
        text: Raw caller text
        at_line_start: Whether the first character lands in column one
        apostrophes: Replace ``'`` and ``` ` ``` with glyph escapes

    Returns:
        Escaped text

    Example:
        >>> escape_text(".hidden --flag", at_line_start=True)
        '\\\\&.hidden \\\\-\\\\-flag'
    """
    table = _APOSTROPHE_SUBSTITUTIONS if apostrophes else _SUBSTITUTIONS
    parts: list[str] = []
    line_start = at_line_start
    for char in text:
        if line_start and char in LINE_START_CHARS:
            parts.append(ZERO_WIDTH)
        parts.append(table.get(char, char))
        line_start = char == "\n"
    return "".join(parts)


def fold_newlines(text: str) -> str:
    """Replace line breaks with single spaces.

    Used for content that must stay on one source line (control line
    arguments, comments, table cells).
    """
    return text.replace("\r\n", " ").replace("\r", " ").replace("\n", " ")


def needs_quotes(argument: str) -> bool:
    """Check whether a macro argument must be wrapped in double quotes."""
    return not argument or '"' in argument or any(char.isspace() for char in argument)


def escape_argument(argument: str, apostrophes: bool = False) -> str:
    """Escape a single control line argument.

    Arguments that are empty or contain whitespace or double quotes are
    quoted, with embedded quotes doubled, so a quoted-argument parser
    recovers the original string.

    Args:
        argument: Raw argument value
        apostrophes: Replace ``'`` and ``` ` ``` with glyph escapes

    Returns:
        The argument as it should appear after the macro name

    Example:
        >>> escape_argument("has space")
        '"has space"'
        >>> escape_argument('a"b')
        '"a""b"'
    """
    folded = fold_newlines(argument)
    escaped = escape_text(folded, at_line_start=True, apostrophes=apostrophes)
    if needs_quotes(folded):
        return '"' + escaped.replace('"', '""') + '"'
    return escaped


def escape_cell(cell: str, apostrophes: bool = False) -> str:
    """Escape the content of a table text block.

    The cell is folded onto one line. A line starting with ``T}`` would close
    the text block early, so it is protected like a control character.
    """
    escaped = escape_text(fold_newlines(cell), at_line_start=True, apostrophes=apostrophes)
    if escaped.startswith(TABLE_BLOCK_END):
        return ZERO_WIDTH + escaped
    return escaped

