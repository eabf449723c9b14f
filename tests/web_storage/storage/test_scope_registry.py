from __future__ import annotations

import threading
from pathlib import Path

import pytest

import web_storage
import web_storage.storage.registry as registry_module
from web_storage.adapters.log_sinks import MemoryLogSink
from web_storage.adapters.memory_backend import InMemoryStorageBackend
from web_storage.adapters.sqlite_backend import DATABASE_FILE_NAME, SqliteStorageBackend
from web_storage.config.loader import ConfigError
from web_storage.config.models import StorageConfig
from web_storage.storage.registry import ScopeRegistry


@pytest.fixture
def fresh_default_registry(monkeypatch: pytest.MonkeyPatch) -> None:
    # Isolate the process-wide singletons from other tests.
    monkeypatch.setattr(registry_module, "_default_registry", None)
    monkeypatch.setattr(registry_module, "_default_config", StorageConfig())


def test_each_scope_is_a_stable_singleton() -> None:
    # Repeated access returns the same object; the two scopes differ.
    registry = ScopeRegistry(InMemoryStorageBackend())
    assert registry.local_storage() is registry.local_storage()
    assert registry.session_storage() is registry.session_storage()
    assert registry.local_storage() is not registry.session_storage()


def test_scopes_do_not_share_entries() -> None:
    registry = ScopeRegistry(InMemoryStorageBackend())
    registry.local_storage().k = "persistent"
    assert registry.session_storage().get_item("k") is None
    registry.session_storage().k = "session"
    assert registry.local_storage().k == "persistent"


def test_concurrent_first_access_builds_once() -> None:
    # Many threads racing on first access still construct one storage per scope.
    sink = MemoryLogSink()
    registry = ScopeRegistry(InMemoryStorageBackend(), log_sink=sink)
    barrier = threading.Barrier(16)
    seen: list[object] = []
    seen_lock = threading.Lock()

    def worker() -> None:
        barrier.wait()
        instance = registry.local_storage()
        with seen_lock:
            seen.append(instance)

    threads = [threading.Thread(target=worker) for _ in range(16)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(seen) == 16
    assert all(instance is seen[0] for instance in seen)
    created = [event for event in sink.events if event.name == "storage.scope.created"]
    assert len(created) == 1
    assert created[0].to_record()["scope"] == "persistent"
    assert created[0].details == {"backend": "InMemoryStorageBackend"}


@pytest.mark.usefixtures("fresh_default_registry")
def test_module_accessors_share_default_registry() -> None:
    # Package-level accessors return the same singletons for the life of the process.
    assert web_storage.local_storage() is web_storage.local_storage()
    assert web_storage.session_storage() is registry_module.default_registry().session_storage()
    assert isinstance(registry_module.default_registry().backend, InMemoryStorageBackend)


@pytest.mark.usefixtures("fresh_default_registry")
def test_configure_after_first_access_fails() -> None:
    web_storage.session_storage()
    with pytest.raises(ConfigError, match="already initialized"):
        web_storage.configure(StorageConfig())


@pytest.mark.usefixtures("fresh_default_registry")
def test_configure_selects_sqlite_backend(tmp_path: Path) -> None:
    # Configuration installed before first access decides the backend.
    web_storage.configure(StorageConfig(backend="sqlite", location=str(tmp_path)))
    storage = web_storage.local_storage()
    storage.theme = "dark"
    backend = registry_module.default_registry().backend
    assert isinstance(backend, SqliteStorageBackend)
    assert (tmp_path / DATABASE_FILE_NAME).exists()
    assert storage.theme == "dark"
    backend.close()


@pytest.mark.usefixtures("fresh_default_registry")
def test_configure_from_file(tmp_path: Path) -> None:
    path = tmp_path / "storage.yml"
    path.write_text("backend: memory\nquota_bytes: 16\n", encoding="utf-8")
    web_storage.configure_from_file(path)
    storage = web_storage.session_storage()
    with pytest.raises(web_storage.QuotaExceededError):
        storage.big = "x" * 32
