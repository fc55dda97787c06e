"""Location of the tool binary whose path is kept in the settings file."""

from __future__ import annotations

import shutil
from pathlib import Path

from result import Err, Ok, Result

from devkit.config.models import SyncConfig

from .models import ToolNotFoundError


def resolve_tool_path(explicit: Path | None, config: SyncConfig) -> Result[Path, ToolNotFoundError]:
    """Explicit path first, then the configured path, then a PATH lookup of the tool name."""
    if explicit is not None:
        return Ok(explicit.expanduser())
    if config.tool_path:
        return Ok(Path(config.tool_path).expanduser())

    found = shutil.which(config.tool_name)
    if found is None:
        return Err(
            ToolNotFoundError(
                tool_name=config.tool_name,
                message=f"'{config.tool_name}' not found on PATH; pass --tool-path or set sync.tool_path",
            )
        )
    return Ok(Path(found))
