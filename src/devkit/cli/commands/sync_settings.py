"""CLI command for syncing the editor settings file."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from result import Err, Ok, is_err

from devkit.sync import SyncOutcome, resolve_settings_path, resolve_tool_path, sync_settings

from ..common import ProjectRootOption, fail, load_config_or_exit, project_root_or_exit

ToolPathOption = Annotated[
    Path | None,
    typer.Option(
        "--tool-path",
        help="Tool binary to record (defaults to sync.tool_path, then a PATH lookup of sync.tool_name).",
        show_default=False,
    ),
]


def sync_settings_command(
    tool_path: ToolPathOption = None,
    project_root: ProjectRootOption = None,
) -> None:
    """Write the tool binary location into the editor settings file.

    Creates the file with defaults when missing, otherwise rewrites only the
    line holding the configured key.
    """
    root = project_root_or_exit(project_root)
    config = load_config_or_exit(root)

    tool_result = resolve_tool_path(tool_path, config.sync)
    if is_err(tool_result):
        raise fail(tool_result.err().message)
    tool = tool_result.unwrap()

    path_result = resolve_settings_path(root, config.sync.settings_path)
    if is_err(path_result):
        raise fail(path_result.err().message)
    settings_path = path_result.unwrap()

    match sync_settings(settings_path, config.sync.key, tool, config.sync.defaults):
        case Ok(report) if report.outcome is SyncOutcome.KEY_MISSING:
            typer.secho(
                f"⚠ '{report.key}' not found in {config.sync.settings_path}; file left unchanged",
                err=True,
                fg=typer.colors.YELLOW,
            )
        case Ok(report) if report.outcome is SyncOutcome.CREATED:
            typer.secho(f"✓ Created {config.sync.settings_path}", fg=typer.colors.GREEN)
        case Ok(report):
            typer.secho(f"✓ Updated '{report.key}' in {config.sync.settings_path}", fg=typer.colors.GREEN)
        case Err(error):
            raise fail(error.message)
