"""Shared pytest fixtures for docs-markdown-formatter tests."""

from dataclasses import dataclass, field
from unittest.mock import MagicMock

import pytest

from core.errors import HostOperationError


@dataclass(eq=False)
class FakeBlock:
    """A paragraph of the fake document."""

    text: str
    style: str = "Normal"
    list_level: int | None = None
    emphasis: list[tuple[int, int, str]] = field(default_factory=list)


@dataclass(frozen=True)
class FakeRange:
    block: FakeBlock
    start: int
    end: int


class FakeAnchor:
    """Collapsed range left behind by deleting the selection."""


class FakeHostDocument:
    """
    In-memory host document.

    Local calls only queue work; ``synchronize`` applies the queue, so the
    committed ``blocks`` reflect exactly what a real host would show.
    ``fail_on`` makes the n-th call (1-based) of a method raise HostOperationError.
    """

    def __init__(self, selection_text: str = "", fail_on: tuple[str, int] | None = None):
        self.selection_text = selection_text
        self.fail_on = fail_on
        self.blocks: list[FakeBlock] = []
        self.pending: list = []
        self.calls: list[tuple] = []
        self.sync_count = 0
        self.committed_operations = 0
        self.selection_deleted = False
        self.anchor = FakeAnchor()
        self._call_counts: dict[str, int] = {}

    def _record(self, name: str, *args) -> None:
        self.calls.append((name, *args))
        self._call_counts[name] = self._call_counts.get(name, 0) + 1
        if self.fail_on and self.fail_on == (name, self._call_counts[name]):
            raise HostOperationError(f"{name} rejected by host")

    async def get_selection_text(self) -> str:
        self._record("get_selection_text")
        self.sync_count += 1
        return self.selection_text

    def delete_selection(self, mode: str = "select-deleted-range") -> None:
        self._record("delete_selection", mode)
        self.pending.append(lambda: setattr(self, "selection_deleted", True))

    def selection_anchor(self) -> FakeAnchor:
        self._record("selection_anchor")
        return self.anchor

    def insert_block(self, anchor, text: str, position: str = "after") -> FakeBlock:
        self._record("insert_block", anchor, text, position)
        block = FakeBlock(text)

        def commit():
            index = 0 if anchor is self.anchor else self.blocks.index(anchor) + 1
            self.blocks.insert(index, block)

        self.pending.append(commit)
        return block

    def set_block_style(self, handle: FakeBlock, style_name: str) -> None:
        self._record("set_block_style", handle, style_name)
        self.pending.append(lambda: setattr(handle, "style", style_name))

    def mark_as_list_item(self, handle: FakeBlock, level: int) -> None:
        self._record("mark_as_list_item", handle, level)
        self.pending.append(lambda: setattr(handle, "list_level", level))

    def find_text_range_in_block(self, handle: FakeBlock, literal: str) -> FakeRange | None:
        self._record("find_text_range_in_block", handle, literal)
        position = handle.text.find(literal)
        if position < 0:
            return None
        return FakeRange(handle, position, position + len(literal))

    def set_emphasis(self, text_range: FakeRange, kind: str, on: bool) -> None:
        self._record("set_emphasis", text_range, kind, on)
        if on:
            self.pending.append(
                lambda: text_range.block.emphasis.append((text_range.start, text_range.end, kind))
            )

    async def synchronize(self) -> None:
        self._record("synchronize")
        for operation in self.pending:
            operation()
        self.committed_operations += len(self.pending)
        self.pending = []
        self.sync_count += 1

    def call_names(self) -> list[str]:
        return [call[0] for call in self.calls]


@pytest.fixture
def make_host():
    """Factory for fake host documents."""

    def _make(selection_text: str = "", fail_on: tuple[str, int] | None = None) -> FakeHostDocument:
        return FakeHostDocument(selection_text, fail_on=fail_on)

    return _make


@pytest.fixture
def fake_host(make_host):
    """A fake host with an empty selection."""
    return make_host()


def make_document(*paragraphs: str, start_index: int = 1) -> dict:
    """Build a Docs API document resource holding one text run per paragraph."""
    content = [{"startIndex": 0, "endIndex": start_index, "sectionBreak": {}}]
    index = start_index
    for text in paragraphs:
        run = text + "\n"
        end = index + len(run.encode("utf-16-le")) // 2
        content.append(
            {
                "startIndex": index,
                "endIndex": end,
                "paragraph": {"elements": [{"startIndex": index, "endIndex": end, "textRun": {"content": run}}]},
            }
        )
        index = end
    return {"documentId": "doc123", "body": {"content": content}}


@pytest.fixture
def docs_document():
    """Factory for Docs API document resources."""
    return make_document


@pytest.fixture
def mock_docs_service():
    """Create a mock Google Docs service returning a document with Markdown in it."""
    service = MagicMock()
    documents = service.documents.return_value
    documents.get.return_value.execute.return_value = make_document("# Title", "- item one", "**bold line**")
    documents.batchUpdate.return_value.execute.return_value = {"replies": []}
    return service


@pytest.fixture
def env_override(monkeypatch):
    """Helper to override environment variables."""

    def _override(**kwargs):
        for key, value in kwargs.items():
            if value is None:
                monkeypatch.delenv(key, raising=False)
            else:
                monkeypatch.setenv(key, value)

    return _override
