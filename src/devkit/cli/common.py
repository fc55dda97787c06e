"""Helpers shared by CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from result import Err, Ok

from devkit.common import resolve_project_root
from devkit.config import ConfigError, ConfigValidationError, ConfigYamlError, DevkitConfig, load_config
from devkit.settings import get_settings

ProjectRootOption = Annotated[
    Path | None,
    typer.Option(
        "--project-root",
        help="Project root directory (defaults to $PRJ_ROOT, then the nearest directory with a project marker).",
        show_default=False,
    ),
]


def fail(message: str) -> typer.Exit:
    typer.secho(message, err=True, fg=typer.colors.RED)
    return typer.Exit(code=1)


def project_root_or_exit(explicit: Path | None) -> Path:
    match resolve_project_root(explicit, get_settings().directories):
        case Ok(root):
            return root
        case Err(error):
            raise fail(error.message)


def load_config_or_exit(project_root: Path) -> DevkitConfig:
    match load_config(get_settings().config_file(project_root)):
        case Ok(config):
            return config
        case Err(error):
            raise fail(format_config_error(error))


def format_config_error(error: ConfigError) -> str:
    location = str(error.path)
    match error:
        case ConfigYamlError(line=int() as line, column=column):
            location = f"{location}:{line}:{column}"
        case ConfigValidationError(field=str() as field):
            return f"{location}: {field}: {error.message}"
    return f"{location}: {error.message}"
