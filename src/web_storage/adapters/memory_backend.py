from __future__ import annotations

from itertools import islice
from threading import Lock

from web_storage.adapters.quota import check_quota
from web_storage.domain.scope import Scope
from web_storage.ports.log_sink import LogSink
from web_storage.ports.storage_backend import DEFAULT_QUOTA_BYTES, StorageBackend, entry_size


class InMemoryStorageBackend(StorageBackend):
    # In-memory adapter: one insertion-ordered dict per scope, nothing survives the process.
    def __init__(self, *, quota_bytes: int = DEFAULT_QUOTA_BYTES, log_sink: LogSink | None = None) -> None:
        if quota_bytes <= 0:
            raise ValueError("quota_bytes must be positive")
        self._quota_bytes = quota_bytes
        self._log_sink = log_sink
        self._lock = Lock()
        self._data: dict[Scope, dict[str, str]] = {scope: {} for scope in Scope}
        self._used: dict[Scope, int] = {scope: 0 for scope in Scope}

    def length(self, scope: Scope) -> int:
        with self._lock:
            return len(self._data[scope])

    def key_at(self, index: int, scope: Scope) -> str | None:
        with self._lock:
            entries = self._data[scope]
            if index < 0 or index >= len(entries):
                return None
            return next(islice(entries, index, None))

    def get(self, key: str, scope: Scope) -> str | None:
        with self._lock:
            return self._data[scope].get(key)

    def set(self, key: str, value: str, scope: Scope) -> None:
        with self._lock:
            entries = self._data[scope]
            check_quota(
                scope=scope,
                entry_bytes=entry_size(key, value),
                used_bytes=self._used[scope],
                quota_bytes=self._quota_bytes,
                log_sink=self._log_sink,
            )
            previous = entries.get(key)
            if previous is not None:
                self._used[scope] -= entry_size(key, previous)
            # Plain assignment keeps the original position of an existing key.
            entries[key] = value
            self._used[scope] += entry_size(key, value)

    def remove(self, key: str, scope: Scope) -> None:
        with self._lock:
            previous = self._data[scope].pop(key, None)
            if previous is not None:
                self._used[scope] -= entry_size(key, previous)

    def clear(self, scope: Scope) -> None:
        with self._lock:
            self._data[scope].clear()
            self._used[scope] = 0

    def enumerate_keys(self, scope: Scope) -> list[str]:
        with self._lock:
            return list(self._data[scope])

    def close(self) -> None:
        # Nothing to release; data stays readable until the object is dropped.
        return None
