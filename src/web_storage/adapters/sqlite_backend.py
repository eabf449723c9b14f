from __future__ import annotations

import sqlite3
from pathlib import Path
from threading import Lock

from web_storage.adapters.quota import check_quota
from web_storage.domain.errors import NotSupportedError
from web_storage.domain.scope import Scope
from web_storage.observability.events import StorageEvent
from web_storage.ports.log_sink import LogSink
from web_storage.ports.storage_backend import DEFAULT_QUOTA_BYTES, StorageBackend, entry_size

# Persistent entries live in <location>/local_storage; session entries never touch disk.
DATABASE_FILE_NAME = "local_storage"

# Schema versions are applied in order and recorded in PRAGMA user_version.
_MIGRATIONS = (
    "CREATE TABLE data (key TEXT UNIQUE NOT NULL, value TEXT NOT NULL)",
)

_FILE_PRAGMAS = (
    "PRAGMA journal_mode=WAL",
    "PRAGMA synchronous=NORMAL",
    "PRAGMA temp_store=memory",
)

_STATEMENT_LENGTH = "SELECT COUNT(*) FROM data"
_STATEMENT_KEY_AT = "SELECT key FROM data ORDER BY rowid LIMIT 1 OFFSET ?"
_STATEMENT_GET = "SELECT value FROM data WHERE key = ?"
_STATEMENT_USED_BYTES = (
    "SELECT COALESCE(SUM(LENGTH(CAST(key AS BLOB)) + LENGTH(CAST(value AS BLOB))), 0) FROM data"
)
# Upsert keeps the rowid of an existing key, so enumeration order is stable.
_STATEMENT_SET = (
    "INSERT INTO data (key, value) VALUES (?, ?) "
    "ON CONFLICT(key) DO UPDATE SET value = excluded.value"
)
_STATEMENT_REMOVE = "DELETE FROM data WHERE key = ?"
_STATEMENT_CLEAR = "DELETE FROM data"
_STATEMENT_KEYS = "SELECT key FROM data ORDER BY rowid"


class SqliteStorageBackend(StorageBackend):
    # SQLite adapter: file database for the persistent scope, private in-memory one for session.
    def __init__(
        self,
        *,
        location: Path | None,
        quota_bytes: int = DEFAULT_QUOTA_BYTES,
        log_sink: LogSink | None = None,
    ) -> None:
        if quota_bytes <= 0:
            raise ValueError("quota_bytes must be positive")
        self._location = location
        self._quota_bytes = quota_bytes
        self._log_sink = log_sink
        self._lock = Lock()
        self._connections: dict[Scope, sqlite3.Connection] = {}

    def length(self, scope: Scope) -> int:
        with self._lock:
            row = self._connection(scope).execute(_STATEMENT_LENGTH).fetchone()
            return int(row[0])

    def key_at(self, index: int, scope: Scope) -> str | None:
        if index < 0:
            return None
        with self._lock:
            row = self._connection(scope).execute(_STATEMENT_KEY_AT, (index,)).fetchone()
            return None if row is None else row[0]

    def get(self, key: str, scope: Scope) -> str | None:
        with self._lock:
            row = self._connection(scope).execute(_STATEMENT_GET, (key,)).fetchone()
            return None if row is None else row[0]

    def set(self, key: str, value: str, scope: Scope) -> None:
        with self._lock:
            conn = self._connection(scope)
            used = int(conn.execute(_STATEMENT_USED_BYTES).fetchone()[0])
            check_quota(
                scope=scope,
                entry_bytes=entry_size(key, value),
                used_bytes=used,
                quota_bytes=self._quota_bytes,
                log_sink=self._log_sink,
            )
            with conn:
                conn.execute(_STATEMENT_SET, (key, value))

    def remove(self, key: str, scope: Scope) -> None:
        with self._lock:
            conn = self._connection(scope)
            with conn:
                conn.execute(_STATEMENT_REMOVE, (key,))

    def clear(self, scope: Scope) -> None:
        with self._lock:
            conn = self._connection(scope)
            with conn:
                conn.execute(_STATEMENT_CLEAR)

    def enumerate_keys(self, scope: Scope) -> list[str]:
        with self._lock:
            rows = self._connection(scope).execute(_STATEMENT_KEYS).fetchall()
            return [row[0] for row in rows]

    def close(self) -> None:
        with self._lock:
            for conn in self._connections.values():
                conn.close()
            self._connections.clear()

    def _connection(self, scope: Scope) -> sqlite3.Connection:
        # Caller holds self._lock; connections are opened on first use per scope.
        conn = self._connections.get(scope)
        if conn is not None:
            return conn
        if scope.persistent:
            if self._location is None:
                raise NotSupportedError("LocalStorage is not supported in this context.")
            self._location.mkdir(parents=True, exist_ok=True)
            target = str(self._location / DATABASE_FILE_NAME)
            conn = sqlite3.connect(target, check_same_thread=False)
            for pragma in _FILE_PRAGMAS:
                conn.execute(pragma)
        else:
            target = ":memory:"
            conn = sqlite3.connect(target, check_same_thread=False)
        _migrate(conn)
        self._connections[scope] = conn
        if self._log_sink is not None:
            self._log_sink.emit(StorageEvent.backend_opened(scope, database=target))
        return conn


def _migrate(conn: sqlite3.Connection) -> None:
    current = int(conn.execute("PRAGMA user_version").fetchone()[0])
    for version, statement in enumerate(_MIGRATIONS, start=1):
        if version <= current:
            continue
        with conn:
            conn.execute(statement)
            conn.execute(f"PRAGMA user_version = {version}")
