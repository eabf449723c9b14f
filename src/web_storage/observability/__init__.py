from .events import EventLevel, StorageEvent

__all__ = ["EventLevel", "StorageEvent"]
