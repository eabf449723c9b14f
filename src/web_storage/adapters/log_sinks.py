from __future__ import annotations

import json
import sys
from pathlib import Path
from threading import Lock

from web_storage.observability.events import StorageEvent
from web_storage.ports.log_sink import LogSink


def encode_event(event: StorageEvent) -> str:
    return json.dumps(event.to_record(), separators=(",", ":"), ensure_ascii=False)


class StdoutLogSink(LogSink):
    def emit(self, event: StorageEvent) -> None:
        sys.stdout.write(encode_event(event) + "\n")


class JsonlLogSink(LogSink):
    # Storage events are rare; the file is opened per event so no handle outlives a write.
    def __init__(self, path: Path) -> None:
        self.path = path
        self._lock = Lock()

    def emit(self, event: StorageEvent) -> None:
        line = encode_event(event) + "\n"
        with self._lock:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("a", encoding="utf-8") as handle:
                handle.write(line)


class NullLogSink(LogSink):
    def emit(self, event: StorageEvent) -> None:
        _ = event


class MemoryLogSink(LogSink):
    # Collects events for assertions and for hosts that inspect them in-process.
    def __init__(self) -> None:
        self.events: list[StorageEvent] = []

    def emit(self, event: StorageEvent) -> None:
        self.events.append(event)

    def names(self) -> list[str]:
        return [event.name for event in self.events]
