import asyncio
import functools
import logging
import re
import ssl

from googleapiclient.errors import HttpError

from core.errors import HostOperationError, MarkdownFormatterError, ValidationError

logger = logging.getLogger(__name__)


def validate_document_id(document_id: str, param_name: str = "document_id") -> str:
    """Validate a Google Docs document ID."""
    if not document_id:
        raise ValidationError(f"{param_name} is required")

    document_id = document_id.strip()
    if not document_id:
        raise ValidationError(f"{param_name} cannot be empty")

    if not re.match(r"^[\w\-]+$", document_id):
        raise ValidationError(f"{param_name} contains invalid characters")

    return document_id


def validate_selection_range(start_index: int, end_index: int) -> tuple[int, int]:
    """Validate a selection range inside a document body (1-based, end exclusive)."""
    if not isinstance(start_index, int) or start_index < 1:
        raise ValidationError("start_index must be a positive integer (the document body starts at 1)")

    if not isinstance(end_index, int) or end_index <= start_index:
        raise ValidationError(f"end_index ({end_index}) must be greater than start_index ({start_index})")

    return start_index, end_index


class TransientNetworkError(HostOperationError):
    """Custom exception for transient network errors after retries."""

    pass


def handle_http_errors(tool_name: str, is_read_only: bool = False, service_type: str | None = None):
    """
    A decorator to handle Google API HttpErrors and transient SSL errors in a standardized way.

    It wraps a coroutine, catches HttpError, logs a detailed error message,
    and raises a HostOperationError with a user-friendly message.

    If is_read_only is True, it will also catch ssl.SSLError and retry with
    exponential backoff. After exhausting retries, it raises a TransientNetworkError.

    Args:
        tool_name (str): The name of the operation being decorated (e.g., 'synchronize').
        is_read_only (bool): If True, the operation is considered safe to retry on
                             transient network errors. Defaults to False.
        service_type (str): Optional. The Google service type (e.g., 'docs').
    """

    def decorator(func):
        @functools.wraps(func)
        async def wrapper(*args, **kwargs):
            max_retries = 3
            base_delay = 1

            for attempt in range(max_retries):
                try:
                    return await func(*args, **kwargs)
                except ssl.SSLError as e:
                    if is_read_only and attempt < max_retries - 1:
                        delay = base_delay * (2**attempt)
                        logger.warning(
                            f"SSL error in {tool_name} on attempt {attempt + 1}: {e}. Retrying in {delay} seconds..."
                        )
                        await asyncio.sleep(delay)
                    else:
                        logger.error(f"SSL error in {tool_name} on final attempt: {e}. Raising exception.")
                        raise TransientNetworkError(
                            f"A transient SSL error occurred in '{tool_name}' after {attempt + 1} attempt(s). "
                            "This is likely a temporary network or certificate issue. Please try again shortly."
                        ) from e
                except HttpError as error:
                    user_google_email = kwargs.get("user_google_email", "N/A")
                    status = error.resp.status

                    if status in [401, 403]:
                        message = (
                            f"API error in {tool_name}: {error}. "
                            f"You might need to re-authorize the {service_type or 'Google'} API for user "
                            f"'{user_google_email}'."
                        )
                    else:
                        message = f"API error in {tool_name}: {error}"

                    logger.error(f"API error in {tool_name}: {error}", exc_info=True)
                    raise HostOperationError(message, status_code=status) from error
                except MarkdownFormatterError:
                    # Already a project error, keep the specific type
                    raise
                except Exception as e:
                    message = f"An unexpected error occurred in {tool_name}: {e}"
                    logger.exception(message)
                    raise HostOperationError(message) from e

        return wrapper

    return decorator
