"""
Google Docs host document.

Implements the formatter's host capability set on top of the Google Docs API.
The selection is a body range chosen by the caller. Local operations only append
``batchUpdate`` requests to a pending queue; ``synchronize`` sends the queue in one
``batchUpdate`` call. Indices are computed locally and in request order, so each
request sees the document as left by the requests before it.

Block layout:
    - After the collapsed selection anchor, ``text + "\\n"`` is inserted at the anchor,
      so the new block starts where the selection was.
    - After a block, ``"\\n" + text`` is inserted at the end of that block's text.

Each new block is reset to NORMAL_TEXT without bullets (and, when non-empty, with
bold/italic cleared) because Google Docs paragraphs inherit the style of the
paragraph they were split from.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Any

from core.config import get_config
from core.errors import HostOperationError
from core.utils import handle_http_errors
from gdocs.docs_helpers import (
    NAMED_STYLE_MAP,
    NORMAL_TEXT_STYLE,
    create_bullet_list_request,
    create_delete_bullets_request,
    create_delete_range_request,
    create_format_text_request,
    create_insert_text_request,
    create_paragraph_style_request,
    extract_text_in_range,
    get_body_end_index,
    utf16_len,
)
from mdconvert.host import DELETE_MODE_SELECT

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DocRange:
    """A ``[start_index, end_index)`` range of the document body."""

    start_index: int
    end_index: int

    @property
    def is_collapsed(self) -> bool:
        return self.start_index == self.end_index


@dataclass(frozen=True)
class DocBlock:
    """A paragraph inserted by the host. Its newline sits at ``end_index``."""

    start_index: int
    text: str

    @property
    def end_index(self) -> int:
        return self.start_index + utf16_len(self.text)

    @property
    def paragraph_range(self) -> tuple[int, int]:
        """Range covering the text and its trailing newline."""
        return self.start_index, self.end_index + 1


class GoogleDocsHost:
    """
    Host document backed by a Google Docs document.

    Attributes:
        service: An authorized Docs v1 service resource.
        document_id: ID of the document being edited.
        pending_requests: Requests queued since the last synchronization.
        sync_count: Number of synchronization points reached (reads included).
        committed_requests: Number of requests sent with ``batchUpdate``.
    """

    def __init__(
        self,
        service: Any,
        document_id: str,
        start_index: int,
        end_index: int,
        bullet_preset: str | None = None,
    ) -> None:
        self.service = service
        self.document_id = document_id
        self.bullet_preset = bullet_preset or get_config().bullet_preset
        self.pending_requests: list[dict[str, Any]] = []
        self.sync_count = 0
        self.committed_requests = 0
        self._selection = DocRange(start_index, end_index)

    @handle_http_errors("get_selection_text", is_read_only=True, service_type="docs")
    async def get_selection_text(self) -> str:
        document = await asyncio.to_thread(self.service.documents().get(documentId=self.document_id).execute)
        self.sync_count += 1

        # The final newline of the body can be neither read as selection nor deleted
        last_editable = get_body_end_index(document) - 1
        start = self._selection.start_index
        end = max(start, min(self._selection.end_index, last_editable))
        if end != self._selection.end_index:
            logger.debug(f"[get_selection_text] Clamped selection end from {self._selection.end_index} to {end}")
        self._selection = DocRange(start, end)

        text = extract_text_in_range(document, start, end)
        logger.info(f"[get_selection_text] Doc={self.document_id}, range={start}-{end}, chars={len(text)}")
        return text

    def delete_selection(self, mode: str = DELETE_MODE_SELECT) -> None:
        if mode != DELETE_MODE_SELECT:
            raise HostOperationError(f"Unsupported delete mode '{mode}'. Supported: '{DELETE_MODE_SELECT}'.")
        if not self._selection.is_collapsed:
            self._queue(create_delete_range_request(self._selection.start_index, self._selection.end_index))
        self._selection = DocRange(self._selection.start_index, self._selection.start_index)

    def selection_anchor(self) -> DocRange:
        return self._selection

    def insert_block(self, anchor: Any, text: str, position: str = "after") -> DocBlock:
        if position != "after":
            raise HostOperationError(f"Unsupported insert position '{position}'. Supported: 'after'.")
        if "\n" in text or "\r" in text:
            raise HostOperationError("Block text cannot contain line breaks")

        if isinstance(anchor, DocBlock):
            index = anchor.end_index
            self._queue(create_insert_text_request(index, "\n" + text))
            block = DocBlock(index + 1, text)
        elif isinstance(anchor, DocRange):
            index = anchor.start_index
            self._queue(create_insert_text_request(index, text + "\n"))
            block = DocBlock(index, text)
        else:
            raise HostOperationError(f"Cannot insert after unknown anchor {anchor!r}")

        para_start, para_end = block.paragraph_range
        self._queue(create_paragraph_style_request(para_start, para_end, NORMAL_TEXT_STYLE))
        self._queue(create_delete_bullets_request(para_start, para_end))
        if text:
            self._queue(create_format_text_request(block.start_index, block.end_index, bold=False, italic=False))
        return block

    def set_block_style(self, handle: DocBlock, style_name: str) -> None:
        named_style = NAMED_STYLE_MAP.get(style_name)
        if named_style is None:
            raise HostOperationError(
                f"Unsupported block style '{style_name}'. Supported: {', '.join(NAMED_STYLE_MAP)}."
            )
        self._queue(create_paragraph_style_request(*handle.paragraph_range, named_style))

    def mark_as_list_item(self, handle: DocBlock, level: int) -> None:
        if level != 0:
            raise HostOperationError(f"Only top-level list items are supported, got level {level}")
        self._queue(create_bullet_list_request(*handle.paragraph_range, self.bullet_preset))

    def find_text_range_in_block(self, handle: DocBlock, literal: str) -> DocRange | None:
        if not literal:
            return None
        position = handle.text.find(literal)
        if position < 0:
            return None
        start = handle.start_index + utf16_len(handle.text[:position])
        return DocRange(start, start + utf16_len(literal))

    def set_emphasis(self, text_range: DocRange, kind: str, on: bool) -> None:
        if kind == "bold":
            request = create_format_text_request(text_range.start_index, text_range.end_index, bold=on)
        elif kind == "italic":
            request = create_format_text_request(text_range.start_index, text_range.end_index, italic=on)
        else:
            raise HostOperationError(f"Unsupported emphasis '{kind}'. Supported: 'bold', 'italic'.")
        if text_range.is_collapsed:
            logger.debug("[set_emphasis] Skipping empty range")
            return
        self._queue(request)

    @handle_http_errors("synchronize", service_type="docs")
    async def synchronize(self) -> None:
        requests = self.pending_requests
        self.pending_requests = []
        self.sync_count += 1
        if not requests:
            logger.debug(f"[synchronize] Doc={self.document_id}, nothing to commit")
            return

        logger.info(f"[synchronize] Doc={self.document_id}, committing {len(requests)} request(s)")
        await asyncio.to_thread(
            self.service.documents().batchUpdate(documentId=self.document_id, body={"requests": requests}).execute
        )
        self.committed_requests += len(requests)

    def _queue(self, request: dict[str, Any]) -> None:
        logger.debug(f"[queue] {next(iter(request))}: {request}")
        self.pending_requests.append(request)
