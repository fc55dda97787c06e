"""Common models and helpers used across devkit modules."""

from .fields import Extension, JsonDict, NonEmptyString
from .logging import (
    LoggingConfig,
    LogLevel,
    create_logger,
    disable_library_logging,
    enable_library_logging,
    setup_cli_logging,
)
from .models import AppDirectories, AppInfo, AppPaths, ProjectRootNotFoundError
from .paths import get_data_directory, resolve_project_root, resolve_working_directory

__all__ = [
    "AppDirectories",
    "AppInfo",
    "AppPaths",
    "Extension",
    "JsonDict",
    "LogLevel",
    "LoggingConfig",
    "NonEmptyString",
    "ProjectRootNotFoundError",
    "create_logger",
    "disable_library_logging",
    "enable_library_logging",
    "get_data_directory",
    "resolve_project_root",
    "resolve_working_directory",
    "setup_cli_logging",
]
