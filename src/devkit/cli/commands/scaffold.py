"""CLI command for creating source files."""

from __future__ import annotations

from typing import Annotated

import typer
from result import Err, Ok

from devkit.scaffold import Created, ExistingFilePolicy, Scaffolder, WriteMode, select_path_argument

from ..common import ProjectRootOption, fail, load_config_or_exit, project_root_or_exit

PathArgument = Annotated[
    list[str] | None,
    typer.Argument(
        help="Path relative to the source root, e.g. 'parser' or 'net/socket.rs'. Exactly one is expected.",
        show_default=False,
    ),
]
DirectoryOption = Annotated[
    bool,
    typer.Option("--directory", "-d", help="Create a module directory containing the index file."),
]
IfExistsOption = Annotated[
    ExistingFilePolicy,
    typer.Option(
        "--if-exists",
        case_sensitive=False,
        help="What to do when the file already exists: fail, overwrite, or append another header.",
    ),
]

_VERBS = {
    WriteMode.CREATED: "Created",
    WriteMode.OVERWRITTEN: "Overwrote",
    WriteMode.APPENDED: "Appended header to",
}


def scaffold(
    paths: PathArgument = None,
    directory: DirectoryOption = False,
    if_exists: IfExistsOption = ExistingFilePolicy.FAIL,
    project_root: ProjectRootOption = None,
) -> None:
    """Create a new source file with the license header.

    Examples:

        # src/parser.rs
        devkit scaffold parser

        # src/net/mod.rs
        devkit scaffold -d net
    """
    root = project_root_or_exit(project_root)
    config = load_config_or_exit(root)
    scaffolder = Scaffolder(config.scaffold, root)

    outcome = select_path_argument(paths or [], directory_mode=directory).and_then(
        lambda path: scaffolder.scaffold(path, directory_mode=directory, if_exists=if_exists)
    )
    match outcome:
        case Ok(created):
            _report(created)
        case Err(error):
            raise fail(error.message)


def _report(created: Created) -> None:
    if created.directory is not None:
        typer.echo(f"Created directory {created.directory}")
    typer.secho(f"✓ {_VERBS[created.mode]} {created.path}", fg=typer.colors.GREEN)
