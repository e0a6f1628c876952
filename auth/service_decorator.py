"""
Service injection for MCP tools.

``require_google_service`` resolves the stored credentials of the tool's
``user_google_email``, builds the Google API service and passes it to the tool as
its first argument. The ``service`` parameter is hidden from the tool signature so
MCP clients never see it.
"""

import asyncio
import functools
import inspect
import logging
from typing import Any

from google.auth.exceptions import RefreshError
from google.auth.transport.requests import Request
from googleapiclient.discovery import build

from auth.credential_store import get_credential_store
from auth.scopes import SCOPE_GROUPS, SERVICE_CONFIGS
from core.errors import AuthenticationError, CredentialsNotFoundError

logger = logging.getLogger(__name__)


def get_authenticated_service(service_type: str, scope_group: str, user_google_email: str) -> Any:
    """
    Build an authorized Google API service for a user.

    Args:
        service_type: Key of SERVICE_CONFIGS (e.g. "docs").
        scope_group: Key of SCOPE_GROUPS the stored credentials must cover.
        user_google_email: The user whose stored credentials are used.

    Returns:
        The service resource.

    Raises:
        CredentialsNotFoundError: If no credentials are stored for the user.
        AuthenticationError: If the credentials lack scopes or cannot be refreshed.
    """
    api_name, api_version = SERVICE_CONFIGS[service_type]
    required_scopes = SCOPE_GROUPS[scope_group]

    credentials = get_credential_store().get_credential(user_google_email)
    if credentials is None:
        raise CredentialsNotFoundError(user_google_email)

    if credentials.scopes is not None:
        missing = set(required_scopes) - set(credentials.scopes)
        if missing:
            raise AuthenticationError(
                f"Stored credentials for {user_google_email} are missing scopes: {', '.join(sorted(missing))}"
            )

    if not credentials.valid:
        if not credentials.refresh_token:
            raise AuthenticationError(f"Credentials for {user_google_email} expired and cannot be refreshed")
        try:
            credentials.refresh(Request())
            logger.info(f"Refreshed credentials for {user_google_email}")
        except RefreshError as e:
            raise AuthenticationError(f"Failed to refresh token for {user_google_email}: {e}") from e

    return build(api_name, api_version, credentials=credentials, cache_discovery=False)


def require_google_service(service_type: str, scope_group: str):
    """
    Decorator injecting an authorized Google API service into an async tool.

    Args:
        service_type: The Google service type (e.g. "docs").
        scope_group: The scope group required by the tool (e.g. "docs_write").
    """

    def decorator(func):
        signature = inspect.signature(func)
        params = list(signature.parameters.values())
        if not params or params[0].name != "service":
            raise TypeError(f"{func.__name__} must take 'service' as its first parameter")
        public_signature = signature.replace(parameters=params[1:])

        @functools.wraps(func)
        async def wrapper(*args, **kwargs):
            bound = public_signature.bind_partial(*args, **kwargs)
            user_google_email = bound.arguments.get("user_google_email")
            if not user_google_email:
                raise AuthenticationError(f"{func.__name__} requires 'user_google_email'")

            service = await asyncio.to_thread(get_authenticated_service, service_type, scope_group, user_google_email)
            logger.debug(f"[{func.__name__}] Built {service_type} service for {user_google_email}")
            return await func(service, *args, **kwargs)

        wrapper.__signature__ = public_signature
        return wrapper

    return decorator
