from .log_sink import LogSink
from .storage_backend import DEFAULT_QUOTA_BYTES, StorageBackend, entry_size

# Public port exports keep wiring explicit at composition time.
__all__ = [
    "DEFAULT_QUOTA_BYTES",
    "LogSink",
    "StorageBackend",
    "entry_size",
]
