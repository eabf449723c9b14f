from __future__ import annotations

import inspect
from collections.abc import Iterator
from dataclasses import dataclass

from web_storage.domain.branding import assert_branded
from web_storage.domain.conversions import MISSING, to_dom_string
from web_storage.storage.facade import Storage, enumerate_storage_keys

# Name of the inspection hook; the only symbol that has() reports as present.
CUSTOM_INSPECT = "__custom_inspect__"

_NOT_FOUND = object()


def is_symbol_name(name: str) -> bool:
    # Dunder names reaching the attribute surface act as symbols.
    return len(name) > 4 and name.startswith("__") and name.endswith("__")


def has_real_member(target: object, name: str) -> bool:
    # Static lookup: finds methods, properties and own attributes without running getters.
    return inspect.getattr_static(target, name, _NOT_FOUND) is not _NOT_FOUND


def _routes_to_member(target: object, name: str, symbol: bool) -> bool:
    # Dunder-shaped strings are plain keys; only symbols may reach dunder members.
    if not symbol and is_symbol_name(name):
        return False
    return has_real_member(target, name)


@dataclass(frozen=True, slots=True)
class PropertyDescriptor:
    # Synthesized description of a stored key seen as a property.
    value: str
    enumerable: bool = True
    configurable: bool = True
    writable: bool = True


# Per-access choice between real members of a Storage and stored keys.
# symbol=True marks a dunder arriving through attribute syntax; item keys are always strings.
class StorageRouter:
    def get(self, target: Storage, name: str, *, symbol: bool = False) -> object:
        assert_branded(target, Storage)
        if _routes_to_member(target, name, symbol):
            return getattr(target, name)
        value = target.get_item(name)
        return MISSING if value is None else value

    def set(self, target: Storage, name: str, value: object, *, symbol: bool = False) -> bool:
        assert_branded(target, Storage)
        if symbol:
            # Own attribute, never listed by own_keys.
            vars(target)[name] = value
        else:
            target.set_item(name, value)
        return True

    def has(self, target: Storage, name: str, *, symbol: bool = False) -> bool:
        assert_branded(target, Storage)
        # Presence means "currently holds a string value", not "has a member".
        if symbol and name == CUSTOM_INSPECT:
            return True
        return isinstance(target.get_item(name), str)

    def delete_property(self, target: Storage, name: str, *, symbol: bool = False) -> bool:
        assert_branded(target, Storage)
        if symbol:
            vars(target).pop(name, None)
        else:
            target.remove_item(name)
        return True

    def own_keys(self, target: Storage) -> list[str]:
        # Stored keys of the target's own scope; members such as length or clear are never enumerated.
        return enumerate_storage_keys(target)

    def get_own_property_descriptor(
        self, target: Storage, *args: str, symbol: bool = False
    ) -> PropertyDescriptor | None:
        assert_branded(target, Storage)
        # Called without a name, the answer is always "no descriptor".
        if not args:
            return None
        name = args[0]
        if _routes_to_member(target, name, symbol):
            return None
        value = target.get_item(name)
        if value is None:
            return None
        return PropertyDescriptor(value=value)


# The object callers hold; attribute and item syntax both resolve through the router.
# A missing key raises AttributeError on attribute reads and KeyError on item reads.
class StorageProxy:
    __slots__ = ("_proxy_target", "_proxy_router")

    def __init__(self, target: Storage, router: StorageRouter) -> None:
        object.__setattr__(self, "_proxy_target", target)
        object.__setattr__(self, "_proxy_router", router)

    def __getattribute__(self, name: str) -> object:
        target, router = _unwrap(self)
        value = router.get(target, name, symbol=is_symbol_name(name))
        if value is MISSING:
            raise AttributeError(f"'Storage' object has no attribute {name!r}")
        return value

    def __setattr__(self, name: str, value: object) -> None:
        target, router = _unwrap(self)
        router.set(target, name, value, symbol=is_symbol_name(name))

    def __delattr__(self, name: str) -> None:
        target, router = _unwrap(self)
        router.delete_property(target, name, symbol=is_symbol_name(name))

    def __getitem__(self, key: object) -> object:
        target, router = _unwrap(self)
        value = router.get(target, _property_key(key))
        if value is MISSING:
            raise KeyError(key)
        return value

    def __setitem__(self, key: object, value: object) -> None:
        target, router = _unwrap(self)
        router.set(target, _property_key(key), value)

    def __delitem__(self, key: object) -> None:
        target, router = _unwrap(self)
        router.delete_property(target, _property_key(key))

    def __contains__(self, key: object) -> bool:
        target, router = _unwrap(self)
        return router.has(target, _property_key(key))

    def __iter__(self) -> Iterator[str]:
        target, router = _unwrap(self)
        return iter(router.own_keys(target))

    def __len__(self) -> int:
        target, router = _unwrap(self)
        return router.get(target, "length")

    def __repr__(self) -> str:
        target, router = _unwrap(self)
        hook = router.get(target, CUSTOM_INSPECT, symbol=True)
        if callable(hook):
            return hook(repr)
        return object.__repr__(self)


def _unwrap(proxy: StorageProxy) -> tuple[Storage, StorageRouter]:
    return (
        object.__getattribute__(proxy, "_proxy_target"),
        object.__getattribute__(proxy, "_proxy_router"),
    )


def _property_key(key: object) -> str:
    if isinstance(key, str):
        return key
    return to_dom_string(key, "Failed to resolve property key on 'Storage'", "Key")
