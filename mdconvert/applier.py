"""
Formatting Applier

Walks parsed block elements and materializes them in a host document, one block per
element, at the position tracked by a ``Cursor``. All calls only queue work on the
host; committing it is left to the caller.
"""

import logging
from collections.abc import Iterable

from core.errors import HostOperationError
from mdconvert.cursor import Cursor
from mdconvert.elements import BlankParagraph, Element, Heading, ListItem, Paragraph
from mdconvert.host import HEADING_STYLE_NAMES, BlockHandle, HostDocument

logger = logging.getLogger(__name__)

# Nested lists are not supported, every item sits at the top level
LIST_ITEM_LEVEL = 0


class FormattingApplier:
    """
    Applies block elements to a host document.

    Each element inserts exactly one block after the cursor and advances it.
    Headings get a named heading style, list items a level 0 bullet, and a
    paragraph's emphasis span is applied to the first occurrence of its literal text.
    Nothing is rolled back when a host call fails: blocks queued earlier stay queued.

    Example:
        >>> applier = FormattingApplier(host)
        >>> applier.apply(parse_markdown("# Title\\nBody"), Cursor(host.selection_anchor()))
        2
    """

    def __init__(self, host: HostDocument) -> None:
        self.host = host

    def apply(self, elements: Iterable[Element], cursor: Cursor) -> int:
        """
        Apply elements in order.

        Args:
            elements: Parsed elements, consumed once.
            cursor: Insertion point, advanced once per element.

        Returns:
            The number of blocks inserted.

        Raises:
            HostOperationError: If a host call fails. ``element_index`` names the
                failing element (0-based).
        """
        inserted = 0
        for index, element in enumerate(elements):
            try:
                self._apply_element(element, cursor)
            except HostOperationError as e:
                if e.element_index is None:
                    e.element_index = index
                kind = getattr(element, "kind", type(element).__name__)
                logger.error(f"[apply] Host rejected element #{index} ({kind}): {e}")
                raise
            except Exception as e:
                logger.error(f"[apply] Host call failed on element #{index}: {e}", exc_info=True)
                raise HostOperationError(str(e) or type(e).__name__, element_index=index) from e
            inserted += 1

        logger.info(f"[apply] Queued {inserted} block(s)")
        return inserted

    def _apply_element(self, element: Element, cursor: Cursor) -> None:
        """Dispatch one element to its handler."""
        if isinstance(element, Heading):
            self._handle_heading(element, cursor)
        elif isinstance(element, ListItem):
            self._handle_list_item(element, cursor)
        elif isinstance(element, Paragraph):
            self._handle_paragraph(element, cursor)
        elif isinstance(element, BlankParagraph):
            cursor.insert_block(self.host, "")
        else:
            logger.warning(f"[apply] Unknown element {element!r}, inserting an empty block")
            cursor.insert_block(self.host, "")

    def _handle_heading(self, element: Heading, cursor: Cursor) -> None:
        handle = cursor.insert_block(self.host, element.text)
        self.host.set_block_style(handle, HEADING_STYLE_NAMES[element.level])

    def _handle_list_item(self, element: ListItem, cursor: Cursor) -> None:
        handle = cursor.insert_block(self.host, element.text)
        self.host.mark_as_list_item(handle, LIST_ITEM_LEVEL)

    def _handle_paragraph(self, element: Paragraph, cursor: Cursor) -> None:
        handle = cursor.insert_block(self.host, element.text)
        fmt = element.inline_format
        if fmt is not None and fmt.marked_text:
            self._emphasize(handle, fmt.marked_text, fmt.kind)

    def _emphasize(self, handle: BlockHandle, literal: str, kind: str) -> None:
        text_range = self.host.find_text_range_in_block(handle, literal)
        if text_range is None:
            logger.warning(f"[apply] Could not locate {literal!r} in block, skipping {kind}")
            return
        self.host.set_emphasis(text_range, kind, True)


def apply_formatting(elements: Iterable[Element], cursor: Cursor, host: HostDocument) -> int:
    """Apply elements to ``host`` at ``cursor``. See ``FormattingApplier.apply``."""
    return FormattingApplier(host).apply(elements, cursor)
