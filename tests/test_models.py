"""Tests for the document element and span model classes."""

from dataclasses import FrozenInstanceError, dataclass

import pytest

from python_roff import (
    Bold,
    BoldItalic,
    Comment,
    ControlLine,
    InvalidMacroNameError,
    Italic,
    LineBreak,
    Plain,
    RoffError,
    Table,
    TableShapeError,
    Text,
)
from python_roff.models import coerce_span, validate_macro_name


class TestSpans:
    """Tests for inline span types."""

    def test_spans_compare_structurally(self):
        assert Bold("x") == Bold("x")
        assert Bold("x") != Italic("x")
        assert LineBreak() == LineBreak()

    def test_spans_are_frozen(self):
        span = Plain("x")
        with pytest.raises(FrozenInstanceError):
            span.text = "y"  # type: ignore[misc]

    def test_coerce_string_to_plain(self):
        assert coerce_span("text") == Plain("text")

    def test_coerce_span_passthrough(self):
        span = BoldItalic("x")
        assert coerce_span(span) is span

    @pytest.mark.parametrize("item", [42, None, b"bytes", ["list"]])
    def test_coerce_rejects_other_types(self, item):
        with pytest.raises(TypeError, match="Expected an inline span"):
            coerce_span(item)


class TestControlLine:
    """Tests for ControlLine validation."""

    @pytest.mark.parametrize("name", ["TH", "SH", "B", "br", "IP", "x2"])
    def test_valid_names(self, name):
        assert ControlLine(name).macro_name == name

    @pytest.mark.parametrize("name", ["", ".SH", "S H", "SH\n", "\\fB", "Ä", "a-b"])
    def test_invalid_names(self, name):
        with pytest.raises(InvalidMacroNameError):
            ControlLine(name)

    def test_invalid_name_is_roff_error(self):
        with pytest.raises(RoffError):
            validate_macro_name("")

    def test_empty_name_message(self):
        with pytest.raises(InvalidMacroNameError, match="must not be empty"):
            ControlLine("")

    def test_leading_dot_hint(self):
        """Passing the control character by mistake suggests the fix."""
        with pytest.raises(InvalidMacroNameError) as exc_info:
            ControlLine(".SH")
        assert exc_info.value.macro_name == ".SH"
        assert "'SH'" in str(exc_info.value)

    def test_arguments_stored_as_tuple_of_strings(self):
        line = ControlLine("sp", [2])  # type: ignore[arg-type]
        assert line.arguments == ("2",)

    def test_arguments_default_empty(self):
        assert ControlLine("PP").arguments == ()

    def test_bare_string_is_one_argument(self):
        """A single string is one argument, not a sequence of characters."""
        assert ControlLine("SH", "NAME").arguments == ("NAME",)  # type: ignore[arg-type]
        assert ControlLine("B", "has space").arguments == ("has space",)  # type: ignore[arg-type]


class TestText:
    """Tests for Text elements."""

    def test_strings_become_plain(self):
        text = Text(("a", Bold("b")))  # type: ignore[arg-type]
        assert text.spans == (Plain("a"), Bold("b"))

    def test_bare_string_is_one_span(self):
        assert Text("abc").spans == (Plain("abc"),)  # type: ignore[arg-type]

    def test_empty_text_allowed(self):
        assert Text().spans == ()

    def test_rejects_non_span(self):
        with pytest.raises(TypeError):
            Text((Plain("a"), 3))  # type: ignore[arg-type]


class TestComment:
    """Tests for Comment elements."""

    def test_text_stored(self):
        assert Comment("note").text == "note"


class TestTable:
    """Tests for Table shape validation."""

    def test_basic_table(self):
        table = Table(rows=(("a", "b"), ("c", "d")))
        assert table.columns == 2
        assert table.alignments == ("l", "l")
        assert table.header is None
        assert table.boxed is True

    def test_cells_converted_to_strings(self):
        table = Table(rows=[[1, 2]], header=["x", "y"])  # type: ignore[arg-type]
        assert table.rows == (("1", "2"),)
        assert table.header == ("x", "y")

    def test_empty_table_rejected(self):
        with pytest.raises(TableShapeError, match="at least one body row"):
            Table(rows=())

    def test_zero_columns_rejected(self):
        with pytest.raises(TableShapeError, match="at least one column"):
            Table(rows=((),))

    def test_ragged_rows_rejected(self):
        """The offending row index is reported."""
        with pytest.raises(TableShapeError) as exc_info:
            Table(rows=(("a", "b"), ("c",)))
        assert exc_info.value.row == 1
        assert "Invalid table row 1" in str(exc_info.value)

    def test_header_width_mismatch_rejected(self):
        with pytest.raises(TableShapeError) as exc_info:
            Table(rows=(("a", "b"),), header=("only",))
        assert exc_info.value.row == 0

    def test_custom_alignments(self):
        table = Table(rows=(("a", "b", "c"),), alignments=("l", "c", "r"))
        assert table.alignments == ("l", "c", "r")

    def test_wrong_alignment_count_rejected(self):
        with pytest.raises(TableShapeError, match="expected 2 alignments"):
            Table(rows=(("a", "b"),), alignments=("l",))

    def test_unknown_alignment_rejected(self):
        with pytest.raises(TableShapeError, match="unknown alignment 'x'"):
            Table(rows=(("a",),), alignments=("x",))

    def test_equality_ignores_derived_columns(self):
        assert Table(rows=(("a",),)) == Table(rows=[["a"]])  # type: ignore[arg-type]


class TestTableFromRecords:
    """Tests for Table.from_records()."""

    def test_from_dicts(self):
        table = Table.from_records(
            [{"flag": "-v", "help": "verbose"}, {"flag": "-q"}],
            columns=["flag", "help"],
        )
        assert table.header == ("Flag", "Help")
        assert table.rows == (("-v", "verbose"), ("-q", ""))

    def test_from_objects(self):
        @dataclass
        class Option:
            long_name: str
            default: int

        table = Table.from_records(
            [Option("--bits", 1)], columns=["long_name", "default"], boxed=False
        )
        assert table.header == ("Long Name", "Default")
        assert table.rows == (("--bits", "1"),)
        assert table.boxed is False

    def test_explicit_header(self):
        table = Table.from_records([{"a": 1}], columns=["a"], header=["Value"])
        assert table.header == ("Value",)

    def test_no_records_rejected(self):
        with pytest.raises(TableShapeError):
            Table.from_records([], columns=["a"])
