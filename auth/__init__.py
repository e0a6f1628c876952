# Make the auth directory a Python package
# Public API exports from canonical locations

from auth.credential_store import (
    CredentialStore,
    LocalDirectoryCredentialStore,
    get_credential_store,
    set_credential_store,
)
from auth.scopes import DOCS_WRITE_SCOPE

__all__ = [
    "CredentialStore",
    "LocalDirectoryCredentialStore",
    "get_credential_store",
    "set_credential_store",
    "DOCS_WRITE_SCOPE",
]
