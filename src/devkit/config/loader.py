"""Loading of `.devkit/config.yaml` for the scaffold and sync commands."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

import yaml
from pydantic import ValidationError
from result import Err, Ok, Result

from devkit.common import JsonDict, create_logger
from devkit.utils.dicts import deep_merge

from .models import ConfigError, ConfigIOError, ConfigValidationError, ConfigYamlError, DevkitConfig
from .resolver import collect_env_overrides

logger = create_logger("config")


def load_config(config_file: Path) -> Result[DevkitConfig, ConfigError]:
    """Built-in defaults, then `config_file` when it exists, then env overrides."""
    logger.debug("Loading config", path=str(config_file))
    return (
        read_config_file(config_file)
        .map(lambda data: deep_merge(data, collect_env_overrides()))
        .and_then(lambda data: validate_config(data, config_file))
        .inspect_err(lambda error: logger.error("Config load failed", path=str(error.path), error=error.message))
    )


def read_config_file(path: Path) -> Result[JsonDict, ConfigError]:
    if not path.is_file():
        logger.debug("No config file, using defaults", path=str(path))
        return Ok({})

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except UnicodeDecodeError as exc:
        return Err(ConfigIOError(path=path, message=f"not valid UTF-8 (byte {exc.start})"))
    except OSError as exc:
        return Err(ConfigIOError(path=path, message=str(exc)))
    except yaml.YAMLError as exc:
        mark = getattr(exc, "problem_mark", None)
        return Err(
            ConfigYamlError(
                path=path,
                line=mark.line + 1 if mark is not None else None,
                column=mark.column + 1 if mark is not None else None,
                message=str(getattr(exc, "problem", None) or exc),
            )
        )

    if data is None:
        return Ok({})
    if not isinstance(data, dict):
        return Err(
            ConfigValidationError(path=path, message="Configuration root must be a mapping of keys to values.")
        )
    return Ok(data)


def validate_config(data: Mapping[str, object], path: Path) -> Result[DevkitConfig, ConfigValidationError]:
    try:
        return Ok(DevkitConfig.model_validate(data))
    except ValidationError as exc:
        first = exc.errors()[0]
        field = ".".join(str(part) for part in first["loc"]) or None
        return Err(ConfigValidationError(path=path, field=field, message=first["msg"]))
