from .loader import ConfigError, load_storage_config, load_yaml_config, parse_storage_config
from .models import LoggingConfig, StorageConfig

__all__ = [
    "ConfigError",
    "LoggingConfig",
    "StorageConfig",
    "load_storage_config",
    "load_yaml_config",
    "parse_storage_config",
]
