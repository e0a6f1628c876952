"""
Host document capability set.

The formatter never talks to an editor directly. Everything it needs from the host
is listed in ``HostDocument``: reading and deleting the selection, inserting blocks
after an anchor, styling blocks and emphasizing sub-ranges, and committing queued
work. Only ``get_selection_text`` and ``synchronize`` suspend; every other call
queues work locally and returns immediately.

Handles returned by the host are opaque to the formatter. It only passes them back.
"""

from typing import Any, Literal, Protocol, runtime_checkable

from mdconvert.elements import EmphasisKind

HeadingStyleName = Literal["Heading 1", "Heading 2", "Heading 3"]
InsertPosition = Literal["after"]

# Delete mode that leaves the collapsed deleted range selected
DELETE_MODE_SELECT = "select-deleted-range"

HEADING_STYLE_NAMES: dict[int, HeadingStyleName] = {
    1: "Heading 1",
    2: "Heading 2",
    3: "Heading 3",
}

BlockHandle = Any
RangeHandle = Any


@runtime_checkable
class HostDocument(Protocol):
    """Protocol for rich-text host documents the formatter writes into."""

    async def get_selection_text(self) -> str:
        """Load and return the text of the current selection."""
        ...

    def delete_selection(self, mode: str = DELETE_MODE_SELECT) -> None:
        """Queue deletion of the selection, keeping the collapsed range selected."""
        ...

    def selection_anchor(self) -> RangeHandle:
        """Return the insertion anchor left after the selection was deleted."""
        ...

    def insert_block(self, anchor: BlockHandle, text: str, position: InsertPosition = "after") -> BlockHandle:
        """Queue a new block holding ``text`` after ``anchor`` and return its handle."""
        ...

    def set_block_style(self, handle: BlockHandle, style_name: HeadingStyleName) -> None:
        """Queue a named paragraph style for a block."""
        ...

    def mark_as_list_item(self, handle: BlockHandle, level: int) -> None:
        """Queue turning a block into a bulleted list item at ``level``."""
        ...

    def find_text_range_in_block(self, handle: BlockHandle, literal: str) -> RangeHandle | None:
        """Return the range of the first occurrence of ``literal`` in a block, or None."""
        ...

    def set_emphasis(self, text_range: RangeHandle, kind: EmphasisKind, on: bool) -> None:
        """Queue switching bold or italic on or off for a range."""
        ...

    async def synchronize(self) -> None:
        """Commit all queued operations."""
        ...
