"""
Custom exception classes for python_roff package.

All errors are raised while a document is being built, as close as possible
to the call that introduced the problem. Rendering a document never raises.
"""


class RoffError(Exception):
    """Base exception for all python_roff errors."""

    pass


class InvalidMacroNameError(RoffError):
    """Raised when a control line is given a malformed macro name.

    Macro names must be non-empty and contain only ASCII letters and digits.
    The leading '.' is added by the renderer and must not be passed in.

    Attributes:
        macro_name: The rejected macro name
    """

    def __init__(self, macro_name: str) -> None:
        self.macro_name = macro_name
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format an error message explaining the naming rule."""
        if not self.macro_name:
            return "Macro name must not be empty"

        msg = f"Invalid macro name {self.macro_name!r}: only ASCII letters and digits are allowed"
        if self.macro_name.startswith((".", "'")):
            msg += f"\n\nHint: drop the leading control character, use {self.macro_name[1:]!r}"
        return msg


class TableShapeError(RoffError):
    """Raised when table rows, header and alignments do not line up.

    Attributes:
        reason: Explanation of the shape problem
        row: Zero-based index of the offending row (None if not row specific)
    """

    def __init__(self, reason: str, row: int | None = None) -> None:
        self.reason = reason
        self.row = row
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format an error message pointing at the offending row."""
        if self.row is None:
            return f"Invalid table: {self.reason}"
        return f"Invalid table row {self.row}: {self.reason}"


class ValidationError(RoffError):
    """Raised when a page description or manpage header is invalid.

    This can occur when:
    - A page file is not a mapping or lacks a required key
    - A content block has an unknown type or the wrong shape
    - A custom manual section does not start with a digit 1-8

    Attributes:
        errors: List of specific validation error messages (optional)
    """

    def __init__(self, message: str, errors: list[str] | None = None) -> None:
        self.errors = errors or []
        super().__init__(self._format_message(message))

    def _format_message(self, message: str) -> str:
        """Append the individual problems to the summary message."""
        if not self.errors:
            return message
        msg = message + "\n"
        for error in self.errors:
            msg += f"  • {error}\n"
        return msg
