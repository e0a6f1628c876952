"""
Unit tests for the line classifier and block parser.

Covers rule precedence, inline span extraction and line bookkeeping without any
host document involved.
"""

import pytest

from mdconvert.elements import BlankParagraph, Heading, InlineFormat, ListItem, Paragraph
from mdconvert.markdown_parser import classify_line, count_lines, parse_markdown, trim_line


class TestClassifyBlankAndHeadings:
    def test_empty_line_is_blank_paragraph(self):
        assert classify_line("") == BlankParagraph()

    @pytest.mark.parametrize(
        "line,level,text",
        [
            ("# Title", 1, "Title"),
            ("## Section", 2, "Section"),
            ("### Subsection", 3, "Subsection"),
        ],
    )
    def test_heading_levels(self, line, level, text):
        assert classify_line(line) == Heading(level=level, text=text)

    def test_level_three_is_never_read_as_lower_level(self):
        element = classify_line("### Title")
        assert isinstance(element, Heading)
        assert element.level == 3
        assert element.text == "Title"

    def test_heading_requires_space_after_hashes(self):
        assert classify_line("#Title") == Paragraph(text="#Title")

    def test_four_hashes_is_a_paragraph(self):
        assert classify_line("#### Deep") == Paragraph(text="#### Deep")

    def test_heading_text_keeps_inline_markers(self):
        assert classify_line("# A **bold** title") == Heading(level=1, text="A **bold** title")


class TestClassifyListItems:
    @pytest.mark.parametrize("line", ["- item one", "* item one"])
    def test_dash_and_star_bullets(self, line):
        assert classify_line(line) == ListItem(text="item one")

    def test_star_without_space_is_not_a_list_item(self):
        element = classify_line("*emphasis* here")
        assert isinstance(element, Paragraph)
        assert element.inline_format == InlineFormat(kind="italic", marked_text="emphasis")

    def test_list_item_keeps_inline_markers(self):
        assert classify_line("- **bold** item") == ListItem(text="**bold** item")


class TestClassifyInlineFormats:
    def test_bold_span(self):
        element = classify_line("This is **bold** text")
        assert element == Paragraph(
            text="This is bold text",
            inline_format=InlineFormat(kind="bold", marked_text="bold"),
        )

    def test_italic_span(self):
        element = classify_line("This is *italic* text")
        assert element == Paragraph(
            text="This is italic text",
            inline_format=InlineFormat(kind="italic", marked_text="italic"),
        )

    def test_only_first_bold_span_is_recorded_but_all_markers_are_removed(self):
        element = classify_line("**one** and **two**")
        assert element.text == "one and two"
        assert element.inline_format == InlineFormat(kind="bold", marked_text="one")

    def test_bold_wins_over_italic_and_italic_markers_stay(self):
        element = classify_line("**a** and *b*")
        assert element.text == "a and *b*"
        assert element.inline_format == InlineFormat(kind="bold", marked_text="a")

    def test_whole_line_bold(self):
        element = classify_line("**bold line**")
        assert element == Paragraph(text="bold line", inline_format=InlineFormat("bold", "bold line"))

    def test_empty_capture_is_recorded_as_empty_literal(self):
        element = classify_line("a ** b")
        assert element.text == "a  b"
        assert element.inline_format == InlineFormat(kind="italic", marked_text="")

    def test_unpaired_marker_is_plain_text(self):
        assert classify_line("5 * 3") == Paragraph(text="5 * 3")

    def test_plain_paragraph_has_no_inline_format(self):
        element = classify_line("plain text")
        assert element == Paragraph(text="plain text")
        assert element.inline_format is None

    def test_duplicate_literal_is_recorded_once(self):
        element = classify_line("go *go* go")
        assert element.text == "go go go"
        assert element.inline_format.marked_text == "go"


class TestReclassification:
    @pytest.mark.parametrize(
        "line",
        ["**bold line**", "Some **strong** words", "an *emphasized* word", "*a* and *b*"],
    )
    def test_cleaned_text_does_not_retrigger_the_same_span(self, line):
        element = classify_line(line)
        again = classify_line(element.text)

        assert isinstance(again, Paragraph)
        assert again.inline_format is None
        assert again.text == element.text


class TestParseMarkdown:
    def test_blank_lines_are_preserved(self):
        assert parse_markdown("A\n\nB") == [Paragraph("A"), BlankParagraph(), Paragraph("B")]

    def test_lines_are_trimmed_before_classification(self):
        assert parse_markdown("   # Title   \n\t- item") == [Heading(1, "Title"), ListItem("item")]

    def test_whitespace_only_line_is_blank(self):
        assert parse_markdown("   ") == [BlankParagraph()]

    def test_byte_order_mark_is_trimmed(self):
        assert parse_markdown("\ufeff# Title\n \ufeff- item\ufeff") == [Heading(1, "Title"), ListItem("item")]

    def test_byte_order_mark_only_line_is_blank(self):
        assert parse_markdown("\ufeff") == [BlankParagraph()]

    def test_empty_source_is_one_blank_line(self):
        assert parse_markdown("") == [BlankParagraph()]

    def test_trailing_newline_yields_trailing_blank(self):
        assert parse_markdown("text\n") == [Paragraph("text"), BlankParagraph()]

    @pytest.mark.parametrize("separator", ["\n", "\r\n", "\r"])
    def test_any_line_break_splits(self, separator):
        assert parse_markdown(separator.join(["# T", "body"])) == [Heading(1, "T"), Paragraph("body")]

    @pytest.mark.parametrize(
        "source",
        [
            "",
            "single",
            "a\nb\nc",
            "\n\n\n",
            "# Title\n- item one\n**bold line**\nplain text",
            "mixed\r\nbreaks\rhere\n",
        ],
    )
    def test_one_element_per_line(self, source):
        assert len(parse_markdown(source)) == count_lines(source)

    def test_order_matches_source(self):
        elements = parse_markdown("# Title\n- item one\n**bold line**\nplain text")

        assert elements == [
            Heading(level=1, text="Title"),
            ListItem(text="item one"),
            Paragraph(text="bold line", inline_format=InlineFormat("bold", "bold line")),
            Paragraph(text="plain text"),
        ]

    def test_fenced_code_is_not_recognized(self):
        elements = parse_markdown("```\ncode\n```")
        assert elements == [Paragraph("```"), Paragraph("code"), Paragraph("```")]


class TestTrimLine:
    @pytest.mark.parametrize(
        "line,expected",
        [
            ("  text  ", "text"),
            ("\ufefftext", "text"),
            (" \ufeff\t text  \ufeff", "text"),
            ("a \ufeff b", "a \ufeff b"),
            ("\ufeff \t", ""),
        ],
    )
    def test_trims_whitespace_and_byte_order_marks(self, line, expected):
        assert trim_line(line) == expected
