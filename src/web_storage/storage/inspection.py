from __future__ import annotations

from collections.abc import Callable

from web_storage.storage.facade import Storage
from web_storage.storage.router import CUSTOM_INSPECT, StorageProxy, StorageRouter

Renderer = Callable[[object], str]


def snapshot(target: Storage, router: StorageRouter) -> dict[str, object]:
    # Plain view: length first, then every enumerable stored key in order.
    view: dict[str, object] = {"length": target.length}
    for key in router.own_keys(target):
        descriptor = router.get_own_property_descriptor(target, key)
        if descriptor is not None and descriptor.enumerable:
            view[key] = descriptor.value
    return view


def install_inspect_hook(proxy: StorageProxy, target: Storage, router: StorageRouter) -> None:
    def custom_inspect(render: Renderer) -> str:
        return f"{proxy.__class__.__name__} {render(snapshot(target, router))}"

    # Goes through the proxy so the hook lands on the real object, not in the store.
    setattr(proxy, CUSTOM_INSPECT, custom_inspect)
