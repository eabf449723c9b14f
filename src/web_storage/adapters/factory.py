from __future__ import annotations

from pathlib import Path

from web_storage.adapters.log_sinks import JsonlLogSink, NullLogSink, StdoutLogSink
from web_storage.adapters.memory_backend import InMemoryStorageBackend
from web_storage.adapters.sqlite_backend import SqliteStorageBackend
from web_storage.config.models import LoggingConfig, StorageConfig
from web_storage.ports.log_sink import LogSink
from web_storage.ports.storage_backend import StorageBackend


def build_log_sink(config: LoggingConfig) -> LogSink:
    # Map the logging section to a concrete sink.
    if config.kind == "stdout":
        return StdoutLogSink()
    if config.kind == "jsonl":
        # LoggingConfig guarantees a path for jsonl.
        return JsonlLogSink(Path(str(config.path)))
    return NullLogSink()


def build_backend(config: StorageConfig, log_sink: LogSink | None = None) -> StorageBackend:
    # Map the backend section to a concrete adapter.
    if config.backend == "sqlite":
        location = Path(config.location) if config.location else None
        return SqliteStorageBackend(location=location, quota_bytes=config.quota_bytes, log_sink=log_sink)
    return InMemoryStorageBackend(quota_bytes=config.quota_bytes, log_sink=log_sink)
