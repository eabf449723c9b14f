from __future__ import annotations

from typing import Protocol, runtime_checkable

from web_storage.domain.scope import Scope

# Per-scope quota, counted in UTF-8 bytes of keys plus values.
DEFAULT_QUOTA_BYTES = 10 * 1024 * 1024


# StorageBackend isolates the ordered key/value engine behind the facade.
# Every call addresses one scope; enumeration follows insertion order and
# overwriting a key keeps its position.
@runtime_checkable
class StorageBackend(Protocol):
    def length(self, scope: Scope) -> int:
        """Return the number of entries stored in the scope."""
        raise NotImplementedError("StorageBackend is a port; use a concrete adapter.")

    def key_at(self, index: int, scope: Scope) -> str | None:
        """Return the key at a 0-based position, or None when out of range."""
        raise NotImplementedError("StorageBackend is a port; use a concrete adapter.")

    def get(self, key: str, scope: Scope) -> str | None:
        """Return the stored value, or None when the key is absent."""
        raise NotImplementedError("StorageBackend is a port; use a concrete adapter.")

    def set(self, key: str, value: str, scope: Scope) -> None:
        """Create or overwrite an entry; may raise QuotaExceededError."""
        raise NotImplementedError("StorageBackend is a port; use a concrete adapter.")

    def remove(self, key: str, scope: Scope) -> None:
        """Delete an entry if present."""
        raise NotImplementedError("StorageBackend is a port; use a concrete adapter.")

    def clear(self, scope: Scope) -> None:
        """Delete every entry of the scope."""
        raise NotImplementedError("StorageBackend is a port; use a concrete adapter.")

    def enumerate_keys(self, scope: Scope) -> list[str]:
        """Return all keys of the scope in insertion order."""
        raise NotImplementedError("StorageBackend is a port; use a concrete adapter.")

    def close(self) -> None:
        """Release engine resources."""
        raise NotImplementedError("StorageBackend is a port; use a concrete adapter.")


def entry_size(key: str, value: str) -> int:
    return len(key.encode("utf-8")) + len(value.encode("utf-8"))
