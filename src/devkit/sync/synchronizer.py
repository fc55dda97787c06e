"""Keep a single tool-path field of an editor settings file in sync."""

from __future__ import annotations

import json
import re
from collections.abc import Mapping
from pathlib import Path

from pydantic import JsonValue
from result import Err, Ok, Result

from devkit.common import create_logger

from . import jsonc
from .models import (
    SettingsFormatError,
    SettingsIOError,
    SettingsParseError,
    SettingsPathError,
    SyncError,
    SyncOutcome,
    SyncReport,
)

logger = create_logger("sync")

_SCALAR_VALUE = r'(?:"(?:[^"\\]|\\.)*"|[^\s,/{}\[\]]+)'


def resolve_settings_path(project_root: Path, settings_path: str) -> Result[Path, SettingsPathError]:
    """Join the configured settings path onto the project root, refusing anything that lands outside it."""
    root = project_root.resolve(strict=False)
    absolute = (root / settings_path).resolve(strict=False)
    if absolute == root or not absolute.is_relative_to(root):
        return Err(
            SettingsPathError(
                path=Path(settings_path),
                message=f"sync.settings_path '{settings_path}' resolves outside of {root}",
            )
        )
    return Ok(absolute)


def render_default_document(key: str, tool_path: Path, defaults: Mapping[str, JsonValue]) -> str:
    document = dict(defaults)
    document[key] = str(tool_path)
    return json.dumps(document, indent=4, ensure_ascii=False) + "\n"


def replace_key_lines(text: str, key: str, tool_path: Path) -> tuple[str, int]:
    """Rewrite the value on the lines where `key` is a member of the root object.

    Everything else on such a line is kept. Nested members and commented-out
    lines are never touched. Returns the new text and the number of lines
    rewritten.
    """
    pattern = re.compile(
        r"(?P<head>\s*"
        + re.escape(json.dumps(key, ensure_ascii=False))
        + r"\s*:\s*)"
        + _SCALAR_VALUE
        + r"(?P<tail>.*)"
    )
    value = json.dumps(str(tool_path), ensure_ascii=False)

    lines = text.split("\n")
    changed = 0
    for number in jsonc.root_member_lines(text, key):
        line = lines[number]
        body = line.removesuffix("\r")
        match = pattern.fullmatch(body)
        if match is None:
            continue
        lines[number] = f"{match['head']}{value}{match['tail']}{line[len(body):]}"
        changed += 1

    return "\n".join(lines), changed


def sync_settings(
    settings_path: Path,
    key: str,
    tool_path: Path,
    defaults: Mapping[str, JsonValue],
) -> Result[SyncReport, SyncError]:
    """Create the settings file from defaults, or rewrite the line holding `key`.

    An existing file is rewritten on every call even when the value is already
    current. A file without `key` is left untouched and reported as
    `SyncOutcome.KEY_MISSING`.
    """
    if not settings_path.exists():
        return _create(settings_path, key, tool_path, defaults)
    return _update(settings_path, key, tool_path)


def _create(
    settings_path: Path,
    key: str,
    tool_path: Path,
    defaults: Mapping[str, JsonValue],
) -> Result[SyncReport, SyncError]:
    logger.debug("Creating settings file", path=str(settings_path))
    try:
        settings_path.parent.mkdir(parents=True, exist_ok=True)
        settings_path.write_text(render_default_document(key, tool_path, defaults), encoding="utf-8")
    except OSError as exc:
        logger.error("Settings write failed", path=str(settings_path), error=str(exc))
        return Err(SettingsIOError(path=settings_path, message=str(exc)))

    logger.info("Settings file created", path=str(settings_path), key=key, tool_path=str(tool_path))
    return Ok(SyncReport(outcome=SyncOutcome.CREATED, path=settings_path, key=key, tool_path=tool_path, lines_changed=1))


def _update(settings_path: Path, key: str, tool_path: Path) -> Result[SyncReport, SyncError]:
    try:
        with settings_path.open(encoding="utf-8", newline="") as handle:
            text = handle.read()
    except UnicodeDecodeError as exc:
        logger.error("Settings file is not UTF-8", path=str(settings_path), position=exc.start)
        return Err(SettingsParseError(path=settings_path, message=f"{settings_path}: not valid UTF-8 (byte {exc.start})"))
    except OSError as exc:
        logger.error("Settings read failed", path=str(settings_path), error=str(exc))
        return Err(SettingsIOError(path=settings_path, message=str(exc)))

    try:
        document = jsonc.loads(text)
    except ValueError as exc:
        logger.error("Settings parse error", path=str(settings_path), error=str(exc))
        return Err(SettingsParseError(path=settings_path, message=f"{settings_path}: {exc}"))

    if not isinstance(document, dict):
        return Err(SettingsParseError(path=settings_path, message=f"{settings_path}: root must be a JSON object"))

    if key not in document:
        logger.warning("Settings key missing, file left unchanged", path=str(settings_path), key=key)
        return Ok(SyncReport(outcome=SyncOutcome.KEY_MISSING, path=settings_path, key=key, tool_path=tool_path))

    occurrences = len(jsonc.root_member_lines(text, key))
    if occurrences > 1:
        logger.error("Settings key duplicated", path=str(settings_path), key=key, occurrences=occurrences)
        return Err(
            SettingsFormatError(
                path=settings_path,
                key=key,
                message=f"'{key}' appears {occurrences} times in {settings_path}",
            )
        )

    updated, changed = replace_key_lines(text, key, tool_path)
    if changed != 1:
        logger.error("Settings key not on a single line", path=str(settings_path), key=key)
        return Err(
            SettingsFormatError(
                path=settings_path,
                key=key,
                message=f"'{key}' in {settings_path} does not hold a single-line value",
            )
        )

    try:
        with settings_path.open("w", encoding="utf-8", newline="") as handle:
            handle.write(updated)
    except OSError as exc:
        logger.error("Settings write failed", path=str(settings_path), error=str(exc))
        return Err(SettingsIOError(path=settings_path, message=str(exc)))

    logger.info("Settings key updated", path=str(settings_path), key=key, tool_path=str(tool_path))
    return Ok(
        SyncReport(
            outcome=SyncOutcome.UPDATED,
            path=settings_path,
            key=key,
            tool_path=tool_path,
            lines_changed=changed,
        )
    )
