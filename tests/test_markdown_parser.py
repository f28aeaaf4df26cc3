"""
Tests for the markdown parser module.

Tests parsing of markdown syntax into inline spans.
"""

from python_roff import Bold, BoldItalic, Italic, LineBreak, Plain
from python_roff.markdown_parser import (
    MarkdownParser,
    TextSegment,
    _merge_segments,
    parse_markdown,
)


class TestTextSegment:
    """Tests for TextSegment dataclass."""

    def test_plain_segment(self):
        """Test creating a plain text segment."""
        seg = TextSegment(text="hello")
        assert seg.text == "hello"
        assert seg.bold is False
        assert seg.italic is False
        assert seg.is_linebreak is False

    def test_formatted_segment(self):
        """Test creating a formatted segment."""
        seg = TextSegment(text="hello", bold=True)
        assert seg.bold is True
        assert seg.to_span() == Bold("hello")

    def test_copy_with_text(self):
        """Test copying segment with new text."""
        seg = TextSegment(text="hello", bold=True, italic=True)
        copy = seg.copy_with_text("world")
        assert copy.text == "world"
        assert copy.bold is True
        assert copy.italic is True

    def test_copy_preserves_linebreak(self):
        """Test that copy_with_text preserves is_linebreak flag."""
        seg = TextSegment(text="", is_linebreak=True)
        assert seg.copy_with_text("x").is_linebreak is True

    def test_to_span(self):
        """Test flattening formatting flags into spans."""
        assert TextSegment("a").to_span() == Plain("a")
        assert TextSegment("a", bold=True).to_span() == Bold("a")
        assert TextSegment("a", italic=True).to_span() == Italic("a")
        assert TextSegment("a", bold=True, italic=True).to_span() == BoldItalic("a")
        assert TextSegment("", is_linebreak=True).to_span() == LineBreak()


class TestMarkdownParserBasic:
    """Tests for basic markdown parsing."""

    def test_plain_text(self):
        """Test parsing plain text without formatting."""
        assert parse_markdown("Hello world") == [Plain("Hello world")]

    def test_empty_string(self):
        """Test parsing empty string."""
        assert parse_markdown("") == []

    def test_bold_text(self):
        """Test parsing **bold** text."""
        spans = parse_markdown("This is **bold** text")
        assert spans == [Plain("This is "), Bold("bold"), Plain(" text")]

    def test_bold_underscore(self):
        """Test parsing __bold__ text."""
        assert parse_markdown("__bold__") == [Bold("bold")]

    def test_italic_text(self):
        """Test parsing *italic* text."""
        spans = parse_markdown("This is *italic* text")
        assert spans == [Plain("This is "), Italic("italic"), Plain(" text")]

    def test_italic_underscore(self):
        """Test parsing _italic_ text."""
        assert parse_markdown("_italic_") == [Italic("italic")]

    def test_code_span_is_bold(self):
        """Test that `code` renders as literal (bold) text."""
        spans = parse_markdown("Run `make install` now")
        assert spans == [Plain("Run "), Bold("make install"), Plain(" now")]

    def test_option_in_bold(self):
        """Test that hyphens survive inside formatting."""
        spans = parse_markdown("Pass **--help** for *usage*")
        assert spans == [Plain("Pass "), Bold("--help"), Plain(" for "), Italic("usage")]


class TestMarkdownParserNested:
    """Tests for nested markdown formatting."""

    def test_bold_italic(self):
        """Test parsing ***bold italic*** text."""
        spans = parse_markdown("This is ***bold italic*** text")
        assert BoldItalic("bold italic") in spans

    def test_bold_with_italic_inside(self):
        """Test parsing **bold with *italic* inside** text."""
        spans = parse_markdown("**bold with *italic* inside**")
        assert spans == [Bold("bold with "), BoldItalic("italic"), Bold(" inside")]

    def test_code_inside_italic(self):
        """Test that code inside italic becomes bold italic."""
        spans = parse_markdown("*see `man`*")
        assert spans == [Italic("see "), BoldItalic("man")]


class TestMarkdownParserEscaping:
    """Tests for escaped markdown characters."""

    def test_escaped_asterisk(self):
        """Test that \\* produces literal asterisk."""
        spans = parse_markdown(r"This is \*not italic\*")
        assert spans == [Plain("This is *not italic*")]

    def test_escaped_underscore(self):
        """Test that \\_ produces literal underscore."""
        spans = parse_markdown(r"This is \_not italic\_")
        assert spans == [Plain("This is _not italic_")]

    def test_placeholder_kept_as_text(self):
        """Test that <FILE> style placeholders are not dropped as HTML."""
        spans = parse_markdown("Read <FILE> now")
        assert "".join(span.text for span in spans) == "Read <FILE> now"


class TestMarkdownParserEdgeCases:
    """Tests for edge cases in markdown parsing."""

    def test_unclosed_formatting(self):
        """Test unclosed formatting markers are treated as literal."""
        spans = parse_markdown("This is **unclosed")
        full_text = "".join(span.text for span in spans)
        assert "unclosed" in full_text
        assert not any(isinstance(span, Bold) for span in spans)

    def test_whitespace_preservation(self):
        """Test that leading and trailing whitespace is preserved."""
        spans = parse_markdown("  **bold**  ")
        assert spans == [Bold("  bold  ")]

    def test_whitespace_only_input(self):
        """Test that whitespace-only input returns a span, not an empty list."""
        assert parse_markdown(" ") == [Plain(" ")]
        assert parse_markdown("   ") == [Plain("   ")]

    def test_soft_break_becomes_space(self):
        """Test that a single newline joins the lines."""
        assert parse_markdown("one\ntwo") == [Plain("one two")]

    def test_paragraphs_joined(self):
        """Test that blank lines collapse to a single space."""
        assert parse_markdown("one\n\ntwo") == [Plain("one two")]

    def test_hard_line_break(self):
        """Test that two trailing spaces produce a LineBreak span."""
        spans = parse_markdown("line one  \nline two")
        assert spans == [Plain("line one"), LineBreak(), Plain("line two")]

    def test_link_text_kept(self):
        """Test that link text is kept and the target dropped."""
        spans = parse_markdown("see [the docs](https://example.com)")
        assert spans == [Plain("see the docs")]


class TestMarkdownParserBlockSyntax:
    """Tests that text shaped like block markdown is kept as written."""

    def test_numbered_step(self):
        assert parse_markdown("1. First step") == [Plain("1. First step")]

    def test_year_at_line_start(self):
        assert parse_markdown("1986. A good year") == [Plain("1986. A good year")]

    def test_dash_item(self):
        assert parse_markdown("- item") == [Plain("- item")]

    def test_heading_marker(self):
        assert parse_markdown("# NAME") == [Plain("# NAME")]

    def test_quote_marker(self):
        assert parse_markdown("> x") == [Plain("> x")]

    def test_indented_text_not_code_block(self):
        """Test that four leading spaces do not start a code block."""
        assert parse_markdown("    indented") == [Plain("    indented")]

    def test_inline_formatting_after_marker(self):
        spans = parse_markdown("2. Run **make**")
        assert spans == [Plain("2. Run "), Bold("make")]


class TestMarkdownParserMerging:
    """Tests for segment merging behavior."""

    def test_adjacent_same_format_merged(self):
        """Test that adjacent segments with same formatting are merged."""
        merged = _merge_segments([TextSegment("a"), TextSegment("b")])
        assert merged == [TextSegment("ab")]

    def test_different_formats_not_merged(self):
        """Test that different formats produce separate segments."""
        merged = _merge_segments([TextSegment("a"), TextSegment("b", bold=True)])
        assert len(merged) == 2

    def test_linebreak_not_merged(self):
        """Test that linebreak segments are never merged with text."""
        merged = _merge_segments(
            [TextSegment("a"), TextSegment("", is_linebreak=True), TextSegment("b")]
        )
        assert [seg.is_linebreak for seg in merged] == [False, True, False]

    def test_empty_segments_dropped(self):
        merged = _merge_segments([TextSegment(""), TextSegment("a", bold=True)])
        assert merged == [TextSegment("a", bold=True)]

    def test_empty_list(self):
        assert _merge_segments([]) == []


class TestMarkdownParserClass:
    """Tests for MarkdownParser class."""

    def test_parser_reuse(self):
        """Test that parser can be reused for multiple parses."""
        parser = MarkdownParser()
        assert parser.parse("**bold**") == [Bold("bold")]
        assert parser.parse("*italic*") == [Italic("italic")]

    def test_parser_reset(self):
        """Test that parser state is properly reset between parses."""
        parser = MarkdownParser()
        parser.parse("**bold *nested* here**")
        segments = parser.parse_segments("plain")
        assert len(segments) == 1
        assert (segments[0].bold, segments[0].italic) == (False, False)
