# web_storage: Web Storage style key/value facade with persistent and session scopes.

from web_storage.domain import (
    MISSING,
    ArgumentError,
    BrandingError,
    NotSupportedError,
    QuotaExceededError,
    Scope,
    StorageError,
)
from web_storage.storage import (
    CUSTOM_INSPECT,
    ScopeRegistry,
    Storage,
    StorageProxy,
    configure,
    configure_from_file,
    local_storage,
    session_storage,
)

__all__ = [
    "CUSTOM_INSPECT",
    "MISSING",
    "ArgumentError",
    "BrandingError",
    "NotSupportedError",
    "QuotaExceededError",
    "Scope",
    "ScopeRegistry",
    "Storage",
    "StorageError",
    "StorageProxy",
    "configure",
    "configure_from_file",
    "local_storage",
    "session_storage",
]
