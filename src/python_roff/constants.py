"""
Centralized constants for ROFF escape sequences, macro names and other magic values.

Import from here rather than spelling escape sequences inline so the renderer,
the escaper and the high-level builders agree on the exact bytes they emit.
"""

import re

# =============================================================================
# Control lines
# =============================================================================

# Character that introduces a control line (request or macro call)
CONTROL_CHAR = "."

# Alternate control character; suppresses the break a request would cause
NO_BREAK_CONTROL_CHAR = "'"

# Macro names: ASCII letters and digits, at least one character
MACRO_NAME_PATTERN = re.compile(r"[A-Za-z0-9]+")

# Comment request, followed by a space and the comment text
COMMENT_PREFIX = '.\\" '


# =============================================================================
# Inline escapes
# =============================================================================

# Zero-width character; stops a leading '.' or "'" from starting a control line
ZERO_WIDTH = "\\&"

# Literal backslash
BACKSLASH = "\\\\"

# Minus sign glyph; a bare '-' is rendered as a hyphen
MINUS = "\\-"

# Non-interpreted horizontal tab
TAB = "\\t"

# Apostrophe and grave accent glyphs, used when apostrophes are handled
APOSTROPHE = "\\*(Aq"
GRAVE = "\\(ga"

# Return to the previously selected font
RESTORE_FONT = "\\fP"

# Font escapes
FONT_BOLD = "\\fB"
FONT_ITALIC = "\\fI"
FONT_BOLD_ITALIC = "\\f(BI"
FONT_ROMAN = "\\fR"
FONT_MONO = "\\f(CR"
FONT_MONO_BOLD = "\\f(CB"
FONT_MONO_ITALIC = "\\f(CI"

# Defines the Aq string as a real apostrophe on groff and a plain quote elsewhere
APOSTROPHE_PREAMBLE = ".ie \\n(.g .ds Aq \\(aq\n.el .ds Aq '\n"


# =============================================================================
# Macro names (man(7))
# =============================================================================

MACRO_TITLE = "TH"
MACRO_SECTION = "SH"
MACRO_SUBSECTION = "SS"
MACRO_PARAGRAPH = "PP"
MACRO_TAGGED_PARAGRAPH = "TP"
MACRO_INDENTED_PARAGRAPH = "IP"
MACRO_INDENT_START = "RS"
MACRO_INDENT_END = "RE"

# Requests
REQUEST_BREAK = "br"
REQUEST_SPACE = "sp"


# =============================================================================
# Tables (tbl(1))
# =============================================================================

TABLE_START = "TS"
TABLE_END = "TE"

# Column separator declared in the table options; cells are wrapped in text
# blocks so the separator never appears inside caller text at a line boundary
TABLE_TAB = "@"
TABLE_BLOCK_START = "T{"
TABLE_BLOCK_END = "T}"

TABLE_ALIGNMENTS = ("l", "c", "r")
