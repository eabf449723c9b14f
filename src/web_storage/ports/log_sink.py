from __future__ import annotations

from typing import Protocol, runtime_checkable

from web_storage.observability.events import StorageEvent


# LogSink is the outbound port for storage diagnostics.
@runtime_checkable
class LogSink(Protocol):
    def emit(self, event: StorageEvent) -> None:
        """Deliver one storage event."""
        raise NotImplementedError("LogSink is a port; use a concrete adapter.")
