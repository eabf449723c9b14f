from __future__ import annotations

from enum import Enum


# Two independent partitions: persistent survives the process, session does not.
class Scope(str, Enum):
    PERSISTENT = "persistent"
    SESSION = "session"

    @property
    def persistent(self) -> bool:
        return self is Scope.PERSISTENT
