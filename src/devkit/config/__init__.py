"""Project configuration for devkit commands."""

from __future__ import annotations

from .loader import load_config, read_config_file, validate_config
from .models import (
    ConfigError,
    ConfigIOError,
    ConfigValidationError,
    ConfigYamlError,
    DevkitConfig,
    ScaffoldConfig,
    SyncConfig,
)
from .resolver import collect_env_overrides

__all__ = [
    "ConfigError",
    "ConfigIOError",
    "ConfigValidationError",
    "ConfigYamlError",
    "DevkitConfig",
    "ScaffoldConfig",
    "SyncConfig",
    "collect_env_overrides",
    "load_config",
    "read_config_file",
    "validate_config",
]
