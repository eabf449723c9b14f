from __future__ import annotations

from web_storage.domain.branding import assert_branded, create_branded, illegal_constructor
from web_storage.domain.conversions import required_arguments, to_dom_string, to_unsigned_long
from web_storage.domain.scope import Scope
from web_storage.ports.storage_backend import StorageBackend


# Fixed method surface over one backend scope; checks run branding, count, coercion, then one backend call.
class Storage:
    _scope: Scope
    _backend: StorageBackend

    def __init__(self) -> None:
        illegal_constructor()

    @property
    def length(self) -> int:
        assert_branded(self, Storage)
        return self._backend.length(self._scope)

    def __len__(self) -> int:
        assert_branded(self, Storage)
        return self._backend.length(self._scope)

    def key(self, *args: object) -> str | None:
        assert_branded(self, Storage)
        prefix = "Failed to execute 'key' on 'Storage'"
        required_arguments(len(args), 1, prefix)
        index = to_unsigned_long(args[0], prefix, "Argument 1")
        return self._backend.key_at(index, self._scope)

    def get_item(self, *args: object) -> str | None:
        assert_branded(self, Storage)
        prefix = "Failed to execute 'getItem' on 'Storage'"
        required_arguments(len(args), 1, prefix)
        key = to_dom_string(args[0], prefix, "Argument 1")
        return self._backend.get(key, self._scope)

    def set_item(self, *args: object) -> None:
        assert_branded(self, Storage)
        prefix = "Failed to execute 'setItem' on 'Storage'"
        required_arguments(len(args), 2, prefix)
        key = to_dom_string(args[0], prefix, "Argument 1")
        value = to_dom_string(args[1], prefix, "Argument 2")
        self._backend.set(key, value, self._scope)

    def remove_item(self, *args: object) -> None:
        assert_branded(self, Storage)
        prefix = "Failed to execute 'removeItem' on 'Storage'"
        required_arguments(len(args), 1, prefix)
        key = to_dom_string(args[0], prefix, "Argument 1")
        self._backend.remove(key, self._scope)

    def clear(self) -> None:
        assert_branded(self, Storage)
        self._backend.clear(self._scope)

    # Web Storage spelling of the same members.
    getItem = get_item
    setItem = set_item
    removeItem = remove_item


def create_storage(scope: Scope, backend: StorageBackend) -> Storage:
    # The only way to obtain a branded facade; scope and backend are fixed afterwards.
    storage = create_branded(Storage)
    object.__setattr__(storage, "_scope", scope)
    object.__setattr__(storage, "_backend", backend)
    return storage


def enumerate_storage_keys(storage: Storage) -> list[str]:
    # Stored keys of the facade's own scope, in insertion order.
    assert_branded(storage, Storage)
    return storage._backend.enumerate_keys(storage._scope)
