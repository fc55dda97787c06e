"""Common models used across devkit."""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from pydantic import BaseModel

from devkit.constants import APP_NAME


class AppInfo(BaseModel):
    project_name: str = APP_NAME
    version: str = "0.1.0"
    environment: Literal["test", "dev", "prod"] = "dev"


class AppPaths(BaseModel):
    data_dir_name: str = APP_NAME
    project_subdir_name: str = f".{APP_NAME}"
    config_filename: str = "config.yaml"
    root_markers: tuple[str, ...] = ("flake.nix", ".git")


@dataclass(frozen=True)
class AppDirectories:
    """Where devkit looks for things.

    `app_name` names the XDG data directory (logs). `project_marker` is the
    per-project directory holding `config.yaml`; it and any of `root_markers`
    mark a project root.
    """

    app_name: str = APP_NAME
    project_marker: str = f".{APP_NAME}"
    root_markers: tuple[str, ...] = ("flake.nix", ".git")


class ProjectRootNotFoundError(BaseModel):
    """No project root could be determined for the current invocation."""

    start_dir: Path
    message: str
