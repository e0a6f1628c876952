"""
Block elements produced by the Markdown line parser.

Each input line becomes exactly one element. Elements are immutable and carry a
``kind`` tag so they can be dispatched on and described without type checks
scattered through the code.
"""

from dataclasses import dataclass
from typing import ClassVar, Literal

EmphasisKind = Literal["bold", "italic"]

HEADING_LEVELS = (1, 2, 3)
EMPHASIS_KINDS = ("bold", "italic")


@dataclass(frozen=True)
class InlineFormat:
    """A single emphasis span recorded by its literal inner text.

    Attributes:
        kind: "bold" or "italic".
        marked_text: The text captured between the first marker pair on the line.
    """

    kind: EmphasisKind
    marked_text: str

    def __post_init__(self) -> None:
        if self.kind not in EMPHASIS_KINDS:
            raise ValueError(f"Unsupported emphasis kind: {self.kind!r}")


@dataclass(frozen=True)
class Heading:
    """Heading line (``#``, ``##`` or ``###``)."""

    kind: ClassVar[str] = "heading"

    level: int
    text: str

    def __post_init__(self) -> None:
        if self.level not in HEADING_LEVELS:
            raise ValueError(f"Heading level must be one of {HEADING_LEVELS}, got {self.level}")


@dataclass(frozen=True)
class ListItem:
    """Bulleted list line (``- `` or ``* ``)."""

    kind: ClassVar[str] = "list_item"

    text: str


@dataclass(frozen=True)
class Paragraph:
    """Plain text line, optionally with one emphasis span."""

    kind: ClassVar[str] = "paragraph"

    text: str
    inline_format: InlineFormat | None = None


@dataclass(frozen=True)
class BlankParagraph:
    """Empty line kept as a placeholder for vertical spacing."""

    kind: ClassVar[str] = "blank"

    text: ClassVar[str] = ""


Element = Heading | ListItem | Paragraph | BlankParagraph


def describe_element(element: Element) -> str:
    """Render an element as a one-line, human-readable summary."""
    if isinstance(element, Heading):
        return f"heading {element.level}: {element.text!r}"
    if isinstance(element, ListItem):
        return f"list item: {element.text!r}"
    if isinstance(element, Paragraph):
        if element.inline_format is None:
            return f"paragraph: {element.text!r}"
        fmt = element.inline_format
        return f"paragraph: {element.text!r} ({fmt.kind}: {fmt.marked_text!r})"
    if isinstance(element, BlankParagraph):
        return "blank line"
    return f"unknown element: {element!r}"
