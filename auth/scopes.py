"""
Google Docs OAuth Scopes

This module centralizes the OAuth scopes the formatter requests.
Separated from service_decorator.py to avoid circular imports.
"""

# Google Docs scopes
DOCS_WRITE_SCOPE = "https://www.googleapis.com/auth/documents"

# Scope groups by name, as used by require_google_service
SCOPE_GROUPS: dict[str, list[str]] = {
    "docs_write": [DOCS_WRITE_SCOPE],
}

# Service name -> (API name, API version)
SERVICE_CONFIGS: dict[str, tuple[str, str]] = {
    "docs": ("docs", "v1"),
}
