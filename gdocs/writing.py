"""
Google Docs Writing Tools

This module provides MCP tools for converting Markdown inside a Google Doc into
formatted content.
"""

import logging
from typing import Any

from pydantic import Field

from auth.service_decorator import require_google_service
from core.errors import ValidationError
from core.server import server
from core.utils import handle_http_errors, validate_document_id, validate_selection_range
from gdocs.docs_host import GoogleDocsHost
from mdconvert.conversion import convert_selection
from mdconvert.elements import describe_element
from mdconvert.markdown_parser import parse_markdown

logger = logging.getLogger(__name__)


@server.tool()
@handle_http_errors("convert_markdown_selection", service_type="docs")
@require_google_service("docs", "docs_write")
async def convert_markdown_selection(
    service: Any,
    user_google_email: str,
    document_id: str,
    start_index: int,
    end_index: int,
) -> str:
    """
    Replaces Markdown text in a Google Doc range with formatted content.

    Each line of the range becomes one paragraph: '#', '##' and '###' lines become
    Heading 1-3, '- ' and '* ' lines become bullets, blank lines stay blank, and the
    first **bold** or *italic* span of any other line is emphasized.

    Args:
        user_google_email: User's Google email address
        document_id: ID of the document to update
        start_index: Start of the Markdown range (1-based, inclusive)
        end_index: End of the Markdown range (exclusive)

    Returns:
        str: Status message of the conversion with a document link
    """
    logger.info(
        f"[convert_markdown_selection] Doc={document_id}, range={start_index}-{end_index}, user={user_google_email}"
    )

    try:
        document_id = validate_document_id(document_id)
        validate_selection_range(start_index, end_index)
    except ValidationError as e:
        return f"Error: {e}"

    host = GoogleDocsHost(service, document_id, start_index, end_index)
    result = await convert_selection(host)

    link = f"https://docs.google.com/document/d/{document_id}/edit"
    return f"{result.message} Document: {document_id}. Link: {link}"


@server.tool()
async def preview_markdown_blocks(
    markdown: str = Field(..., description="Markdown text to classify, one block per line."),
) -> str:
    """
    Shows how Markdown text would be converted, without touching any document.

    Returns:
        str: One numbered line per block describing its type, text and emphasis
    """
    elements = parse_markdown(markdown)
    lines = [f"{i}. {describe_element(element)}" for i, element in enumerate(elements, start=1)]
    return f"{len(elements)} block(s):\n" + "\n".join(lines)
