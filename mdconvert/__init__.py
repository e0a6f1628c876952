"""
Markdown Conversion Package

This package parses a minimal Markdown subset into block elements and applies them
to a host document at a moving insertion point.
"""

from mdconvert.applier import FormattingApplier, apply_formatting
from mdconvert.conversion import ConversionResult, convert_selection, run_conversion
from mdconvert.cursor import Cursor
from mdconvert.elements import BlankParagraph, Element, Heading, InlineFormat, ListItem, Paragraph, describe_element
from mdconvert.host import HEADING_STYLE_NAMES, HostDocument
from mdconvert.markdown_parser import classify_line, count_lines, parse_markdown, trim_line

__all__ = [
    "apply_formatting",
    "BlankParagraph",
    "classify_line",
    "ConversionResult",
    "convert_selection",
    "count_lines",
    "Cursor",
    "describe_element",
    "Element",
    "FormattingApplier",
    "Heading",
    "HEADING_STYLE_NAMES",
    "HostDocument",
    "InlineFormat",
    "ListItem",
    "Paragraph",
    "parse_markdown",
    "run_conversion",
    "trim_line",
]
