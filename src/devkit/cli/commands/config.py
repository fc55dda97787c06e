from __future__ import annotations

import json
from enum import Enum
from typing import Annotated

import typer
import yaml

from ..common import ProjectRootOption, load_config_or_exit, project_root_or_exit


class OutputFormat(str, Enum):
    YAML = "yaml"
    JSON = "json"


FormatOption = Annotated[
    OutputFormat,
    typer.Option("--format", "-f", show_default=True, case_sensitive=False, help="Output format (yaml or json)."),
]

app = typer.Typer(help="Inspect devkit configuration.")


@app.callback(invoke_without_command=True)
def _config_root(ctx: typer.Context) -> None:
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("show")
def show(
    format: FormatOption = OutputFormat.YAML,
    project_root: ProjectRootOption = None,
) -> None:
    """Print the effective configuration for the project."""
    config = load_config_or_exit(project_root_or_exit(project_root))
    typer.echo(_format_payload(config.model_dump(mode="json"), format))


def _format_payload(payload: dict[str, object], format: OutputFormat) -> str:
    if format is OutputFormat.JSON:
        return json.dumps(payload, indent=2, sort_keys=True)
    return yaml.safe_dump(payload, sort_keys=True)
