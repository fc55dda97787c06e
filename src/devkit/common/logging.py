"""loguru setup for devkit.

The CLI writes to a rotating log file. Imported as a library, devkit stays
silent until `devkit.enable_logging()` adds a stderr sink.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Literal

import loguru
from loguru import logger
from pydantic import BaseModel, ConfigDict

from devkit.constants import APP_NAME

from .models import AppDirectories, AppInfo
from .paths import get_data_directory

LogLevel = Literal["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]

LINE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {extra[scope]}: {message} | {extra}\n{exception}"


class LoggingConfig(BaseModel):
    """Log sink options, set through `DEVKIT_LOGGING__*` variables."""

    model_config = ConfigDict(extra="forbid")

    enabled: bool = True
    level: LogLevel = "INFO"
    file: Path | None = None
    rotation: str = "1 MB"
    retention: str = "7 days"
    serialize: bool = False

    def log_file(self, directories: AppDirectories) -> Path:
        if self.file is not None:
            return self.file.expanduser()
        return get_data_directory(directories) / "logs" / f"{APP_NAME}.log"


def setup_cli_logging(app_info: AppInfo, config: LoggingConfig, directories: AppDirectories) -> int:
    log_file = config.log_file(directories)
    log_file.parent.mkdir(parents=True, exist_ok=True)

    _reset_sinks(scope="cli", env=app_info.environment)
    handler_id = logger.add(
        log_file,
        level=config.level,
        format=LINE_FORMAT,
        rotation=config.rotation,
        retention=config.retention,
        serialize=config.serialize,
        diagnose=app_info.environment == "dev",
    )
    logger.debug("CLI logging initialized", log_file=str(log_file), level=config.level)
    return handler_id


def enable_library_logging(level: LogLevel = "INFO") -> int:
    _reset_sinks(scope=APP_NAME)
    return logger.add(sys.stderr, level=level, format=LINE_FORMAT, colorize=False)


def disable_library_logging() -> None:
    logger.disable(APP_NAME)


def create_logger(scope: str) -> loguru.Logger:
    return logger.bind(scope=scope)


def _reset_sinks(**extra: str) -> None:
    logger.enable(APP_NAME)
    logger.remove()
    logger.configure(extra=extra)
