from __future__ import annotations

from pathlib import Path
from threading import Lock

from web_storage.adapters.factory import build_backend, build_log_sink
from web_storage.config.loader import ConfigError, load_storage_config
from web_storage.config.models import StorageConfig
from web_storage.domain.scope import Scope
from web_storage.observability.events import StorageEvent
from web_storage.ports.log_sink import LogSink
from web_storage.ports.storage_backend import StorageBackend
from web_storage.storage.facade import create_storage
from web_storage.storage.inspection import install_inspect_hook
from web_storage.storage.router import StorageProxy, StorageRouter


def create_scoped_storage(scope: Scope, backend: StorageBackend) -> StorageProxy:
    # Facade + router + inspection hook for one scope.
    target = create_storage(scope, backend)
    router = StorageRouter()
    proxy = StorageProxy(target, router)
    install_inspect_hook(proxy, target, router)
    return proxy


# One lazily built storage per scope; the slow path re-checks under a lock so each is built once.
class ScopeRegistry:
    def __init__(self, backend: StorageBackend, *, log_sink: LogSink | None = None) -> None:
        self._backend = backend
        self._log_sink = log_sink
        self._lock = Lock()
        self._instances: dict[Scope, StorageProxy] = {}

    @property
    def backend(self) -> StorageBackend:
        return self._backend

    def local_storage(self) -> StorageProxy:
        return self._get_or_create(Scope.PERSISTENT)

    def session_storage(self) -> StorageProxy:
        return self._get_or_create(Scope.SESSION)

    def _get_or_create(self, scope: Scope) -> StorageProxy:
        instance = self._instances.get(scope)
        if instance is not None:
            return instance
        with self._lock:
            instance = self._instances.get(scope)
            if instance is None:
                instance = create_scoped_storage(scope, self._backend)
                self._instances[scope] = instance
                if self._log_sink is not None:
                    self._log_sink.emit(StorageEvent.scope_created(scope, backend=type(self._backend).__name__))
        return instance


# Process-wide default registry, built from the active config on first access.
_default_config = StorageConfig()
_default_registry: ScopeRegistry | None = None
_default_lock = Lock()


def configure(config: StorageConfig) -> None:
    # Only valid before the default registry exists; singletons are never rebuilt.
    global _default_config
    with _default_lock:
        if _default_registry is not None:
            raise ConfigError("storage is already initialized; configure() must run before first access")
        _default_config = config


def configure_from_file(path: Path) -> None:
    configure(load_storage_config(path))


def default_registry() -> ScopeRegistry:
    global _default_registry
    registry = _default_registry
    if registry is not None:
        return registry
    with _default_lock:
        if _default_registry is None:
            log_sink = build_log_sink(_default_config.logging)
            _default_registry = ScopeRegistry(build_backend(_default_config, log_sink), log_sink=log_sink)
        return _default_registry


def local_storage() -> StorageProxy:
    return default_registry().local_storage()


def session_storage() -> StorageProxy:
    return default_registry().session_storage()
