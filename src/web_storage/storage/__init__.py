from .facade import Storage, create_storage
from .inspection import install_inspect_hook, snapshot
from .registry import (
    ScopeRegistry,
    configure,
    configure_from_file,
    create_scoped_storage,
    default_registry,
    local_storage,
    session_storage,
)
from .router import CUSTOM_INSPECT, PropertyDescriptor, StorageProxy, StorageRouter, is_symbol_name

__all__ = [
    "CUSTOM_INSPECT",
    "PropertyDescriptor",
    "ScopeRegistry",
    "Storage",
    "StorageProxy",
    "StorageRouter",
    "configure",
    "configure_from_file",
    "create_scoped_storage",
    "create_storage",
    "default_registry",
    "install_inspect_hook",
    "is_symbol_name",
    "local_storage",
    "session_storage",
    "snapshot",
]
