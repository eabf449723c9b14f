from __future__ import annotations

from types import SimpleNamespace

import pytest

from web_storage.domain.branding import assert_branded, create_branded, is_branded
from web_storage.domain.errors import BrandingError, StorageError
from web_storage.domain.scope import Scope
from web_storage.storage.facade import Storage


def test_direct_construction_is_illegal() -> None:
    # Storage objects only come from the factory.
    with pytest.raises(BrandingError, match="Illegal constructor"):
        Storage()


def test_create_branded_stamps_instance() -> None:
    # Factory-built objects pass the brand check.
    storage = create_branded(Storage)
    assert is_branded(storage, Storage)
    assert_branded(storage, Storage)


def test_unbranded_instances_are_rejected() -> None:
    # Same class but not built by the factory, or another type entirely.
    with pytest.raises(BrandingError, match="Illegal invocation"):
        assert_branded(object.__new__(Storage), Storage)
    with pytest.raises(BrandingError):
        assert_branded(SimpleNamespace(), Storage)


def test_branding_error_is_a_type_error_and_storage_error() -> None:
    # Callers can catch either the package base class or TypeError.
    assert issubclass(BrandingError, TypeError)
    assert issubclass(BrandingError, StorageError)


def test_scope_flags() -> None:
    # Only the persistent scope reports the persistence flag.
    assert Scope.PERSISTENT.persistent is True
    assert Scope.SESSION.persistent is False
    assert Scope("session") is Scope.SESSION
