from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Literal

from web_storage.domain.scope import Scope

EventLevel = Literal["info", "warning"]


@dataclass(frozen=True, slots=True)
class StorageEvent:
    # Diagnostic about one scope; built only through the named constructors below.
    level: EventLevel
    name: str
    scope: Scope
    details: dict[str, object] = field(default_factory=dict)
    at: datetime = field(default_factory=lambda: datetime.now(tz=UTC))

    @classmethod
    def scope_created(cls, scope: Scope, *, backend: str) -> StorageEvent:
        return cls("info", "storage.scope.created", scope, {"backend": backend})

    @classmethod
    def backend_opened(cls, scope: Scope, *, database: str) -> StorageEvent:
        return cls("info", "storage.backend.opened", scope, {"database": database})

    @classmethod
    def quota_exceeded(cls, scope: Scope, *, entry_bytes: int, used_bytes: int, quota_bytes: int) -> StorageEvent:
        return cls(
            "warning",
            "storage.quota.exceeded",
            scope,
            {"entry_bytes": entry_bytes, "used_bytes": used_bytes, "quota_bytes": quota_bytes},
        )

    def to_record(self) -> dict[str, object]:
        # Flat record: fixed keys first, event details after.
        return {
            "at": self.at.isoformat().replace("+00:00", "Z"),
            "level": self.level,
            "event": self.name,
            "scope": self.scope.value,
            **self.details,
        }
