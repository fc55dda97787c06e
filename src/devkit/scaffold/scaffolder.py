"""Create new source files and module directories under the project source root."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path, PurePath

from result import Err, Ok, Result, is_err

from devkit.common import create_logger
from devkit.config.models import ScaffoldConfig

from .models import (
    Created,
    ExistingFilePolicy,
    FileKind,
    MissingArgumentsError,
    MissingDirectoryArgError,
    ResolvedTarget,
    ScaffoldError,
    ScaffoldFileExistsError,
    ScaffoldIOError,
    TooManyArgumentsError,
    UnrecognizedExtensionError,
    WriteMode,
)
from .resolver import resolve_target

logger = create_logger("scaffold")


def infer_file_kind(name: str, extension: str) -> Result[FileKind, UnrecognizedExtensionError]:
    """Infer the kind of `name`, where everything after the first dot is the extension."""
    if "." not in name:
        return Ok(FileKind.NONE)

    _, found = name.split(".", 1)
    if found == extension:
        return Ok(FileKind.SOURCE)

    return Err(
        UnrecognizedExtensionError(
            extension=found,
            expected=extension,
            message=f"Unrecognized extension '.{found}' for '{name}', expected '.{extension}'",
        )
    )


def select_path_argument(paths: Sequence[str], *, directory_mode: bool) -> Result[str | None, ScaffoldError]:
    """Pick the one requested path from the positional arguments, or None when there are none."""
    if len(paths) <= 1:
        return Ok(paths[0] if paths else None)
    if directory_mode:
        return Err(MissingDirectoryArgError(message=f"Directory mode takes exactly one path argument, got {len(paths)}"))
    return Err(TooManyArgumentsError(count=len(paths), message=f"Expected one path argument, got {len(paths)}"))


class Scaffolder:
    def __init__(self, config: ScaffoldConfig, project_root: Path) -> None:
        self.config = config
        self.project_root = project_root

    @property
    def source_root(self) -> Path:
        return self.project_root / self.config.source_dir

    def scaffold(
        self,
        requested: str | None,
        *,
        directory_mode: bool = False,
        if_exists: ExistingFilePolicy = ExistingFilePolicy.FAIL,
    ) -> Result[Created, ScaffoldError]:
        if not requested:
            if directory_mode:
                return Err(MissingDirectoryArgError(message="Directory mode requires a path argument"))
            return Err(MissingArgumentsError(message="Missing path argument"))

        target = PurePath(requested)
        if directory_mode:
            target = target / self.config.index_filename

        logger.debug("Scaffolding", requested=requested, target=str(target), directory_mode=directory_mode)

        resolved = resolve_target(str(target), self.source_root, self.project_root, directory_mode=directory_mode)
        if is_err(resolved):
            return resolved

        kind = infer_file_kind(target.name, self.config.extension)
        if is_err(kind):
            return kind

        if kind.unwrap() is FileKind.NONE:
            target = target.with_name(f"{target.name}.{self.config.extension}")
            resolved = resolve_target(str(target), self.source_root, self.project_root, directory_mode=directory_mode)
            if is_err(resolved):
                return resolved

        return self._write(resolved.unwrap(), if_exists).inspect(
            lambda created: logger.info("Scaffolded file", path=str(created.path), mode=created.mode.value)
        )

    def _write(self, target: ResolvedTarget, if_exists: ExistingFilePolicy) -> Result[Created, ScaffoldError]:
        path = target.absolute_path

        if path.is_dir():
            return Err(ScaffoldIOError(path=target.relative_path, message=f"{target.relative_path} is a directory"))

        if path.exists():
            match if_exists:
                case ExistingFilePolicy.FAIL:
                    return Err(
                        ScaffoldFileExistsError(
                            path=target.relative_path,
                            message=f"{target.relative_path} already exists (use --if-exists to overwrite or append)",
                        )
                    )
                case ExistingFilePolicy.OVERWRITE:
                    open_mode, write_mode = "w", WriteMode.OVERWRITTEN
                case ExistingFilePolicy.APPEND:
                    open_mode, write_mode = "a", WriteMode.APPENDED
        else:
            open_mode, write_mode = "w", WriteMode.CREATED

        directory = None if path.parent.is_dir() else target.relative_path.parent

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with path.open(open_mode, encoding="utf-8") as handle:
                handle.write(self.config.license_header)
        except OSError as exc:
            logger.error("Scaffold write failed", path=str(path), error=str(exc))
            return Err(ScaffoldIOError(path=target.relative_path, message=str(exc)))

        return Ok(Created(path=target.relative_path, directory=directory, mode=write_mode))
