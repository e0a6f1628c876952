"""
Custom error types for the Markdown formatter.

Provides user-friendly error messages and structured error handling.
"""

# =============================================================================
# Base Exception Hierarchy
# =============================================================================


class MarkdownFormatterError(Exception):
    """Base exception for all Markdown formatter errors."""

    pass


# =============================================================================
# Authentication Errors
# =============================================================================


class AuthenticationError(MarkdownFormatterError):
    """Raised when authentication fails or credentials are invalid."""

    pass


class CredentialsNotFoundError(AuthenticationError):
    """Raised when no credentials are found for a user."""

    def __init__(self, user_email: str):
        super().__init__(
            f"No credentials found for user: {user_email}. "
            "Store an authorized user token in the credentials directory first."
        )
        self.user_email = user_email


# =============================================================================
# Validation Errors
# =============================================================================


class ValidationError(MarkdownFormatterError):
    """Raised when input validation fails."""

    pass


class EmptySelectionError(ValidationError):
    """Raised when the selected text is blank after trimming."""

    def __init__(self, message: str = "Please select Markdown text and try again."):
        super().__init__(message)


# =============================================================================
# API Errors
# =============================================================================


class APIError(MarkdownFormatterError):
    """Raised for general host document API errors."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class HostOperationError(APIError):
    """Raised when a host document call (insert, style, synchronize) fails."""

    def __init__(self, message: str, status_code: int | None = None, element_index: int | None = None):
        super().__init__(message, status_code=status_code)
        self.element_index = element_index


def format_error(operation: str, error: Exception) -> str:
    """Format an error for display to the user."""
    return f"{operation} failed: {error}"
