from __future__ import annotations

from typing import TypeVar

from .errors import BrandingError

T = TypeVar("T")

# Process-wide token; only objects stamped by create_branded carry it.
_BRAND = object()
_BRAND_ATTR = "_web_storage_brand"


def illegal_constructor() -> None:
    raise BrandingError("Illegal constructor")


def create_branded(cls: type[T]) -> T:
    # Bypass __init__ (which rejects direct construction) and stamp the brand.
    obj = object.__new__(cls)
    object.__setattr__(obj, _BRAND_ATTR, _BRAND)
    return obj


def is_branded(obj: object, cls: type) -> bool:
    # Plain attribute lookup so a proxy wrapping a branded object passes too.
    if not isinstance(obj, cls):
        return False
    return getattr(obj, _BRAND_ATTR, None) is _BRAND


def assert_branded(obj: object, cls: type) -> None:
    # Checked on every call; a positive result is never cached.
    if not is_branded(obj, cls):
        raise BrandingError("Illegal invocation")
