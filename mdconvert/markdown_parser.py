"""
Line-oriented Markdown parser.

This module turns a block of lightweight Markdown into an ordered list of block
elements, one element per source line. It deliberately understands only a small
subset of the syntax:

- ``# ``, ``## ``, ``### `` headings
- ``- `` / ``* `` bulleted list items
- one ``**bold**`` or ``*italic*`` span per paragraph
- blank lines, kept as empty paragraphs

Example:
    >>> parse_markdown("# Title\\n\\nSome **bold** text")
    [Heading(level=1, text='Title'), BlankParagraph(), Paragraph(text='Some bold text', ...)]

Known limitation:
    Only the first emphasis span of a line is recorded, by its literal text. The
    applier later emphasizes the first occurrence of that literal in the block,
    which is not necessarily the marked occurrence when the same text repeats.
    Bold is checked before italic, so a line holding both keeps its italic
    asterisks as literal characters.
"""

from __future__ import annotations

import logging
import re

from mdconvert.elements import BlankParagraph, Element, Heading, InlineFormat, ListItem, Paragraph

logger = logging.getLogger(__name__)

# Longest prefix first so "### " is never read as a level 1 heading
HEADING_PREFIXES: tuple[tuple[str, int], ...] = (
    ("### ", 3),
    ("## ", 2),
    ("# ", 1),
)

LIST_ITEM_PREFIXES: tuple[str, ...] = ("- ", "* ")

# Non-greedy, bold before italic
BOLD_PATTERN = re.compile(r"\*\*(.*?)\*\*")
ITALIC_PATTERN = re.compile(r"\*(.*?)\*")
INLINE_PATTERNS: tuple[tuple[str, re.Pattern[str]], ...] = (
    ("bold", BOLD_PATTERN),
    ("italic", ITALIC_PATTERN),
)

LINE_BREAK_PATTERN = re.compile(r"\r\n|\r|\n")

# Whitespace plus the byte-order mark, which str.strip() keeps
TRIM_PATTERN = re.compile(r"\A[\s\ufeff]+|[\s\ufeff]+\Z")


def split_lines(source: str) -> list[str]:
    """Split text on any line break; an empty string is a single empty line."""
    return LINE_BREAK_PATTERN.split(source)


def count_lines(source: str) -> int:
    """Number of lines ``parse_markdown`` will produce elements for."""
    return len(split_lines(source))


def trim_line(line: str) -> str:
    """Remove surrounding whitespace, byte-order marks included."""
    return TRIM_PATTERN.sub("", line)


def classify_line(line: str) -> Element:
    """
    Classify one trimmed line into exactly one element.

    Rules are tried in order and the first match wins: blank, heading 3/2/1,
    list item, bold span, italic span, plain paragraph. Classification never fails.

    Args:
        line: A single line with surrounding whitespace already removed.

    Returns:
        The element for this line.
    """
    if not line:
        return BlankParagraph()

    for prefix, level in HEADING_PREFIXES:
        if line.startswith(prefix):
            return Heading(level=level, text=line[len(prefix) :])

    if line.startswith(LIST_ITEM_PREFIXES):
        return ListItem(text=line[2:])

    for kind, pattern in INLINE_PATTERNS:
        match = pattern.search(line)
        if match:
            return Paragraph(
                text=pattern.sub(r"\1", line),
                inline_format=InlineFormat(kind=kind, marked_text=match.group(1)),
            )

    return Paragraph(text=line)


def parse_markdown(source: str) -> list[Element]:
    """
    Parse Markdown text into block elements, one per line, in source order.

    Lines are trimmed before classification. Nothing spans lines: there are no
    fenced blocks or wrapped paragraphs, and blank lines are preserved.

    Args:
        source: The raw Markdown text.

    Returns:
        A list with exactly ``count_lines(source)`` elements.
    """
    elements: list[Element] = [classify_line(trim_line(line)) for line in split_lines(source)]
    logger.debug(f"Parsed {len(elements)} element(s) from {len(source)} character(s)")
    return elements
