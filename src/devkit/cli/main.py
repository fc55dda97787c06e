from __future__ import annotations

import os
from typing import Annotated

import typer

from devkit.common import setup_cli_logging
from devkit.settings import get_settings

from .commands import config as config_commands
from .commands.scaffold import scaffold
from .commands.sync_settings import sync_settings_command

app = typer.Typer(
    help="Project scaffolding and editor settings tools.",
    context_settings={"help_option_names": ["-h", "--help"]},
)
app.command("scaffold")(scaffold)
app.command("sync-settings")(sync_settings_command)
app.add_typer(config_commands.app, name="config")


@app.callback(invoke_without_command=True)
def _root_callback(
    ctx: typer.Context,
    no_color: Annotated[bool, typer.Option("--no-color", help="Disable colored output")] = False,
) -> None:
    if no_color or os.getenv("NO_COLOR"):
        ctx.color = False

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def main() -> None:
    """Entrypoint for the devkit CLI."""
    settings = get_settings()
    if settings.logging.enabled:
        setup_cli_logging(settings.app, settings.logging, settings.directories)
    app()
