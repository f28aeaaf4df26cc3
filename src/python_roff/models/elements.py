"""
Top-level document elements.

Each element is a frozen dataclass validated on construction, so a document
that was built successfully always renders. The set of element types is
closed; the renderer handles every one of them explicitly.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Union

from ..constants import MACRO_NAME_PATTERN, TABLE_ALIGNMENTS
from ..errors import InvalidMacroNameError, TableShapeError
from .spans import InlineSpan, coerce_span


def validate_macro_name(macro_name: str) -> str:
    """Check that ``macro_name`` is usable as a ROFF macro name.

    Args:
        macro_name: Name without the leading control character, e.g. "SH"

    Returns:
        The macro name, unchanged

    Raises:
        InvalidMacroNameError: If the name is empty or not letters/digits only
    """
    if not isinstance(macro_name, str) or not MACRO_NAME_PATTERN.fullmatch(macro_name):
        raise InvalidMacroNameError(str(macro_name) if macro_name is not None else "")
    return macro_name


@dataclass(frozen=True)
class ControlLine:
    """A request or macro call such as ``.SH NAME``.

    Attributes:
        macro_name: Macro name without the leading '.'
        arguments: Raw argument strings, escaped and quoted at render time;
            a bare string is a single argument
    """

    macro_name: str
    arguments: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        validate_macro_name(self.macro_name)
        arguments = (self.arguments,) if isinstance(self.arguments, str) else self.arguments
        object.__setattr__(self, "arguments", tuple(str(arg) for arg in arguments))


@dataclass(frozen=True)
class Text:
    """A line of prose made of styled spans.

    Attributes:
        spans: Inline spans in output order; a bare string is one Plain span
    """

    spans: tuple[InlineSpan, ...] = ()

    def __post_init__(self) -> None:
        spans = (self.spans,) if isinstance(self.spans, str) else self.spans
        object.__setattr__(self, "spans", tuple(coerce_span(span) for span in spans))


@dataclass(frozen=True)
class Comment:
    """A ROFF source comment; ignored by the formatter.

    Attributes:
        text: Comment text, folded onto a single line at render time
    """

    text: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "text", str(self.text))


@dataclass(frozen=True)
class Table:
    """A table rendered with the tbl(1) preprocessor.

    Attributes:
        rows: Body rows; every row has the same number of cells
        header: Optional header row, rendered in bold
        alignments: Per-column alignment, each one of "l", "c" or "r"
        boxed: Draw a box around every cell
    """

    rows: tuple[tuple[str, ...], ...]
    header: tuple[str, ...] | None = None
    alignments: tuple[str, ...] | None = None
    boxed: bool = True
    columns: int = field(init=False, compare=False)

    def __post_init__(self) -> None:
        rows = tuple(tuple(str(cell) for cell in row) for row in self.rows)
        header = tuple(str(cell) for cell in self.header) if self.header is not None else None

        if not rows:
            raise TableShapeError("a table needs at least one body row")

        columns = len(header) if header is not None else len(rows[0])
        if columns == 0:
            raise TableShapeError("a table needs at least one column")

        for index, row in enumerate(rows):
            if len(row) != columns:
                raise TableShapeError(f"expected {columns} cells, got {len(row)}", row=index)

        if self.alignments is None:
            alignments = ("l",) * columns
        else:
            alignments = tuple(self.alignments)
            if len(alignments) != columns:
                raise TableShapeError(f"expected {columns} alignments, got {len(alignments)}")
            unknown = [a for a in alignments if a not in TABLE_ALIGNMENTS]
            if unknown:
                raise TableShapeError(
                    f"unknown alignment {unknown[0]!r}, use one of {', '.join(TABLE_ALIGNMENTS)}"
                )

        object.__setattr__(self, "rows", rows)
        object.__setattr__(self, "header", header)
        object.__setattr__(self, "alignments", alignments)
        object.__setattr__(self, "columns", columns)

    @classmethod
    def from_records(
        cls,
        items: Iterable[dict[str, object] | object],
        columns: Sequence[str],
        header: Sequence[str] | None = None,
        **kwargs: object,
    ) -> Table:
        """Create a table from a list of dicts or objects.

        Args:
            items: Dicts, dataclasses or any objects with the named attributes
            columns: Keys/attribute names to extract, in column order
            header: Display header (default: generated from column names)
            **kwargs: Passed through to the constructor (alignments, boxed)

        Returns:
            New Table

        Example:
            >>> Table.from_records([{"name": "-v", "help": "verbose"}], ["name", "help"])
        """
        if header is None:
            header = [column.replace("_", " ").title() for column in columns]

        rows: list[tuple[str, ...]] = []
        for item in items:
            if isinstance(item, dict):
                rows.append(tuple(str(item.get(column, "")) for column in columns))
            else:
                rows.append(tuple(str(getattr(item, column, "")) for column in columns))

        return cls(rows=tuple(rows), header=tuple(header), **kwargs)  # type: ignore[arg-type]


Element = Union[ControlLine, Text, Comment, Table]

ELEMENT_TYPES: tuple[type, ...] = (ControlLine, Text, Comment, Table)
