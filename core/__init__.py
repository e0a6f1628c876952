"""Core utilities for the Docs Markdown Formatter."""

from core.config import ServerConfig, get_config, reload_config
from core.errors import (
    APIError,
    AuthenticationError,
    CredentialsNotFoundError,
    EmptySelectionError,
    HostOperationError,
    MarkdownFormatterError,
    ValidationError,
    format_error,
)
from core.utils import (
    TransientNetworkError,
    handle_http_errors,
    validate_document_id,
    validate_selection_range,
)

__all__ = [
    "APIError",
    "AuthenticationError",
    "CredentialsNotFoundError",
    "EmptySelectionError",
    "format_error",
    "get_config",
    "handle_http_errors",
    "HostOperationError",
    "MarkdownFormatterError",
    "reload_config",
    "ServerConfig",
    "TransientNetworkError",
    "validate_document_id",
    "validate_selection_range",
    "ValidationError",
]
