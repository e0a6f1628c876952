"""Insertion-point cursor for sequential block insertion."""

import logging
from dataclasses import dataclass

from mdconvert.host import BlockHandle, HostDocument

logger = logging.getLogger(__name__)


@dataclass
class Cursor:
    """
    The block after which the next block is appended.

    Starts at the collapsed range left by deleting the selection. Every insertion
    goes after the current position and then moves the cursor onto the new block,
    so blocks are only ever appended in order.

    Attributes:
        position: Host handle of the most recently inserted block (or the initial anchor).
        moves: Number of times the cursor advanced.
    """

    position: BlockHandle
    moves: int = 0

    def advance(self, handle: BlockHandle) -> None:
        """Move the cursor onto a freshly inserted block."""
        self.position = handle
        self.moves += 1

    def insert_block(self, host: HostDocument, text: str) -> BlockHandle:
        """Insert a block holding ``text`` after the cursor and advance onto it."""
        handle = host.insert_block(self.position, text, "after")
        self.advance(handle)
        logger.debug(f"Cursor advanced to block #{self.moves}: {text!r}")
        return handle
