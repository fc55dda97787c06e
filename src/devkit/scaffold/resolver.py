"""Resolution of user-supplied paths against the project source root."""

from __future__ import annotations

from pathlib import Path

from result import Err, Ok, Result

from .models import ResolvedTarget, UnsafePathError

UNSAFE_PREFIXES = ("/", "~", "$")


def resolve_target(
    requested: str,
    source_root: Path,
    project_root: Path,
    *,
    directory_mode: bool = False,
) -> Result[ResolvedTarget, UnsafePathError]:
    """Resolve `requested` below `source_root`.

    Rejects absolute, home-relative and variable-prefixed paths outright, then
    canonicalizes the joined path and rejects anything that does not land
    strictly inside the source root. Never touches the filesystem beyond
    reading symlinks during canonicalization.
    """
    root = source_root.resolve(strict=False)

    if requested.startswith(UNSAFE_PREFIXES):
        return Err(
            UnsafePathError(
                requested=requested,
                expected_root=root,
                message=f"'{requested}' must be a path relative to {root}",
            )
        )

    absolute = (root / requested).resolve(strict=False)
    if absolute == root or not absolute.is_relative_to(root):
        return Err(
            UnsafePathError(
                requested=requested,
                expected_root=root,
                message=f"'{requested}' resolves outside of {root}",
            )
        )

    return Ok(
        ResolvedTarget(
            absolute_path=absolute,
            relative_path=_relative_to_project(absolute, project_root),
            directory_mode=directory_mode,
        )
    )


def _relative_to_project(path: Path, project_root: Path) -> Path:
    try:
        return path.relative_to(project_root.resolve(strict=False))
    except ValueError:
        return path
