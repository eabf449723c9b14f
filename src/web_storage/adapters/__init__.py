from .factory import build_backend, build_log_sink
from .log_sinks import JsonlLogSink, MemoryLogSink, NullLogSink, StdoutLogSink
from .memory_backend import InMemoryStorageBackend
from .sqlite_backend import SqliteStorageBackend

__all__ = [
    "InMemoryStorageBackend",
    "JsonlLogSink",
    "MemoryLogSink",
    "NullLogSink",
    "SqliteStorageBackend",
    "StdoutLogSink",
    "build_backend",
    "build_log_sink",
]
