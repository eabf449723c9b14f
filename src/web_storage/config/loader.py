from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import ValidationError

from web_storage.config.models import StorageConfig


class ConfigError(ValueError):
    # Raised for invalid storage config (fail fast).
    pass


def load_yaml_config(path: Path) -> dict[str, object]:
    # YAML loader; returns a raw mapping for validation.
    raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigError("Config root must be a mapping")
    return raw


def parse_storage_config(raw: dict[str, object]) -> StorageConfig:
    try:
        return StorageConfig.model_validate(raw)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc


def load_storage_config(path: Path) -> StorageConfig:
    return parse_storage_config(load_yaml_config(path))
