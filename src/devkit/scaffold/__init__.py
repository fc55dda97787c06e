"""Source-file scaffolding."""

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
    UnsafePathError,
    WriteMode,
)
from .resolver import resolve_target
from .scaffolder import Scaffolder, infer_file_kind, select_path_argument

__all__ = [
    "Created",
    "ExistingFilePolicy",
    "FileKind",
    "MissingArgumentsError",
    "MissingDirectoryArgError",
    "ResolvedTarget",
    "ScaffoldError",
    "ScaffoldFileExistsError",
    "ScaffoldIOError",
    "Scaffolder",
    "TooManyArgumentsError",
    "UnrecognizedExtensionError",
    "UnsafePathError",
    "WriteMode",
    "infer_file_kind",
    "resolve_target",
    "select_path_argument",
]
