"""Filesystem locations used by devkit."""

from __future__ import annotations

import os
from pathlib import Path

from result import Err, Ok, Result

from devkit.constants import PROJECT_ROOT_ENV

from .models import AppDirectories, ProjectRootNotFoundError


def resolve_working_directory(working_dir: Path | None) -> Path:
    base = working_dir or Path.cwd()
    if base.is_file():
        base = base.parent
    try:
        return base.resolve(strict=False)
    except OSError:
        return base


def get_data_directory(directories: AppDirectories) -> Path:
    """$XDG_DATA_HOME/<app>, falling back to ~/.local/share/<app>."""
    xdg_data = os.getenv("XDG_DATA_HOME")
    base_dir = Path(xdg_data).expanduser() if xdg_data else Path.home() / ".local" / "share"
    return base_dir / directories.app_name


def resolve_project_root(
    explicit: Path | None,
    directories: AppDirectories,
    working_dir: Path | None = None,
) -> Result[Path, ProjectRootNotFoundError]:
    """Resolve the project root for an invocation.

    Lookup order: explicit path, the PRJ_ROOT environment variable, then the
    nearest ancestor of the working directory holding the project marker or
    one of the root markers.
    """
    if explicit is not None:
        return Ok(resolve_working_directory(explicit.expanduser()))

    from_env = os.getenv(PROJECT_ROOT_ENV)
    if from_env:
        return Ok(resolve_working_directory(Path(from_env).expanduser()))

    start_dir = resolve_working_directory(working_dir)
    markers = (directories.project_marker, *directories.root_markers)
    for path in [start_dir, *start_dir.parents]:
        if any((path / marker).exists() for marker in markers):
            return Ok(path)

    return Err(
        ProjectRootNotFoundError(
            start_dir=start_dir,
            message=(
                f"Could not determine the project root. Set {PROJECT_ROOT_ENV} or run inside a directory "
                f"containing one of: {', '.join(markers)}"
            ),
        )
    )
