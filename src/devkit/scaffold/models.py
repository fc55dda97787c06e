"""Data and error models for source-file scaffolding."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict


class ExistingFilePolicy(str, Enum):
    """What to do when the scaffold target already exists."""

    FAIL = "fail"
    OVERWRITE = "overwrite"
    APPEND = "append"


class FileKind(str, Enum):
    """File kind inferred from the requested name."""

    SOURCE = "source"
    NONE = "none"


class WriteMode(str, Enum):
    CREATED = "created"
    OVERWRITTEN = "overwritten"
    APPENDED = "appended"


@dataclass(frozen=True, slots=True)
class ResolvedTarget:
    absolute_path: Path
    relative_path: Path
    directory_mode: bool = False


class Created(BaseModel):
    """Successful scaffold result, paths relative to the project root."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    path: Path
    directory: Path | None = None
    mode: WriteMode = WriteMode.CREATED


class ScaffoldError(BaseModel):
    """Base scaffold error."""

    model_config = ConfigDict(extra="forbid")

    message: str


class MissingArgumentsError(ScaffoldError):
    """No path was given."""


class MissingDirectoryArgError(ScaffoldError):
    """Directory mode was requested without exactly one path."""


class TooManyArgumentsError(ScaffoldError):
    """More than one path was given in file mode."""

    count: int


class UnsafePathError(ScaffoldError):
    """Requested path is absolute, home- or variable-relative, or escapes the source root."""

    requested: str
    expected_root: Path


class UnrecognizedExtensionError(ScaffoldError):
    """Requested file carries an extension other than the canonical one."""

    extension: str
    expected: str


class ScaffoldFileExistsError(ScaffoldError):
    """Target exists and the existing-file policy is `fail`."""

    path: Path


class ScaffoldIOError(ScaffoldError):
    """Filesystem failure while creating directories or writing the file."""

    path: Path
