from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from web_storage.ports.storage_backend import DEFAULT_QUOTA_BYTES

# Config models map the YAML document to typed structures.


class LoggingConfig(BaseModel):
    # Log sink selector: only one sink is active at a time.
    model_config = ConfigDict(extra="forbid")
    kind: Literal["none", "stdout", "jsonl"] = "none"
    path: str | None = None

    @model_validator(mode="after")
    def _require_path(self) -> LoggingConfig:
        # For jsonl kind, a path is required to avoid silent defaults.
        if self.kind == "jsonl" and not self.path:
            raise ValueError("logging.path is required when kind is 'jsonl'")
        return self


class StorageConfig(BaseModel):
    # Top-level typed view of storage configuration.
    model_config = ConfigDict(extra="forbid")
    backend: Literal["memory", "sqlite"] = "memory"
    # Origin storage directory; the persistent scope of the sqlite backend needs it.
    location: str | None = None
    quota_bytes: int = Field(default=DEFAULT_QUOTA_BYTES, gt=0)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
