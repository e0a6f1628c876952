"""
Google Docs MCP Tools Package

This package provides the Google Docs host document and the MCP tools that convert
Markdown inside a document.
"""

from gdocs.writing import convert_markdown_selection, preview_markdown_blocks

__all__ = [
    "convert_markdown_selection",
    "preview_markdown_blocks",
]
