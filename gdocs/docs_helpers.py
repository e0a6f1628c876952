"""
Google Docs Helper Functions

This module provides builders for Google Docs API batchUpdate requests and
helpers for reading text out of a fetched document body.
"""

import logging
from typing import Any

logger = logging.getLogger(__name__)

# Named style mappings for the heading style names used by the formatter
NAMED_STYLE_MAP: dict[str, str] = {
    "Heading 1": "HEADING_1",
    "Heading 2": "HEADING_2",
    "Heading 3": "HEADING_3",
}
NORMAL_TEXT_STYLE = "NORMAL_TEXT"


def utf16_len(text: str) -> int:
    """Length of ``text`` in UTF-16 code units, the unit of Google Docs indices."""
    return len(text.encode("utf-16-le")) // 2


def build_text_style(
    bold: bool | None = None,
    italic: bool | None = None,
    underline: bool | None = None,
) -> tuple[dict[str, Any], list[str]]:
    """
    Build text style object for Google Docs API requests.

    Args:
        bold: Whether text should be bold
        italic: Whether text should be italic
        underline: Whether text should be underlined

    Returns:
        Tuple of (text_style_dict, list_of_field_names)
    """
    text_style: dict[str, Any] = {}
    fields: list[str] = []

    if bold is not None:
        text_style["bold"] = bold
        fields.append("bold")

    if italic is not None:
        text_style["italic"] = italic
        fields.append("italic")

    if underline is not None:
        text_style["underline"] = underline
        fields.append("underline")

    return text_style, fields


def create_insert_text_request(index: int, text: str) -> dict[str, Any]:
    """Create an insertText request for Google Docs API."""
    return {"insertText": {"location": {"index": index}, "text": text}}


def create_delete_range_request(start_index: int, end_index: int) -> dict[str, Any]:
    """Create a deleteContentRange request for Google Docs API."""
    return {"deleteContentRange": {"range": {"startIndex": start_index, "endIndex": end_index}}}


def create_format_text_request(
    start_index: int,
    end_index: int,
    bold: bool | None = None,
    italic: bool | None = None,
    underline: bool | None = None,
) -> dict[str, Any] | None:
    """
    Create an updateTextStyle request for Google Docs API.

    Returns:
        Dictionary representing the updateTextStyle request, or None if no styles provided
    """
    text_style, fields = build_text_style(bold, italic, underline)

    if not text_style:
        return None

    return {
        "updateTextStyle": {
            "range": {"startIndex": start_index, "endIndex": end_index},
            "textStyle": text_style,
            "fields": ",".join(fields),
        }
    }


def create_paragraph_style_request(start_index: int, end_index: int, named_style_type: str) -> dict[str, Any]:
    """Create an updateParagraphStyle request setting a named style (HEADING_1, NORMAL_TEXT, ...)."""
    return {
        "updateParagraphStyle": {
            "range": {"startIndex": start_index, "endIndex": end_index},
            "paragraphStyle": {"namedStyleType": named_style_type},
            "fields": "namedStyleType",
        }
    }


def create_bullet_list_request(start_index: int, end_index: int, bullet_preset: str) -> dict[str, Any]:
    """Create a createParagraphBullets request for Google Docs API."""
    return {
        "createParagraphBullets": {
            "range": {"startIndex": start_index, "endIndex": end_index},
            "bulletPreset": bullet_preset,
        }
    }


def create_delete_bullets_request(start_index: int, end_index: int) -> dict[str, Any]:
    """Create a deleteParagraphBullets request for Google Docs API."""
    return {"deleteParagraphBullets": {"range": {"startIndex": start_index, "endIndex": end_index}}}


def get_body_end_index(document: dict[str, Any]) -> int:
    """
    Get the end index of a document body.

    The last character of the body is a newline that cannot be deleted, so the
    last editable index is ``get_body_end_index(document) - 1``.
    """
    content = document.get("body", {}).get("content", [])
    if not content:
        return 1
    return content[-1].get("endIndex", 1)


def extract_text_in_range(document: dict[str, Any], start_index: int, end_index: int) -> str:
    """
    Extract the plain text of a document range from its body paragraphs.

    Args:
        document: A document resource as returned by ``documents().get``.
        start_index: Start of the range (inclusive).
        end_index: End of the range (exclusive).

    Returns:
        The text of every text run overlapping the range, clipped to it.
        Paragraph breaks appear as ``"\\n"``; tables are skipped.
    """
    pieces: list[str] = []
    for element in document.get("body", {}).get("content", []):
        paragraph = element.get("paragraph")
        if not paragraph:
            continue
        for pe in paragraph.get("elements", []):
            text_run = pe.get("textRun")
            if not text_run or "content" not in text_run:
                continue
            encoded = text_run["content"].encode("utf-16-le")
            run_start = pe.get("startIndex", 0)
            run_end = pe.get("endIndex", run_start + len(encoded) // 2)
            if run_end <= start_index or run_start >= end_index:
                continue
            lo = max(start_index, run_start) - run_start
            hi = min(end_index, run_end) - run_start
            pieces.append(encoded[lo * 2 : hi * 2].decode("utf-16-le", errors="ignore"))
    return "".join(pieces)
