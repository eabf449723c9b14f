from __future__ import annotations

from web_storage.domain.errors import QuotaExceededError
from web_storage.domain.scope import Scope
from web_storage.observability.events import StorageEvent
from web_storage.ports.log_sink import LogSink


def check_quota(
    *,
    scope: Scope,
    entry_bytes: int,
    used_bytes: int,
    quota_bytes: int,
    log_sink: LogSink | None,
) -> None:
    # Reject the write when the entry alone, or the scope as it stands, reaches the quota.
    if entry_bytes < quota_bytes and used_bytes < quota_bytes:
        return
    if log_sink is not None:
        log_sink.emit(
            StorageEvent.quota_exceeded(
                scope, entry_bytes=entry_bytes, used_bytes=used_bytes, quota_bytes=quota_bytes
            )
        )
    raise QuotaExceededError("Exceeded maximum storage size")
