"""Data and error models for editor settings synchronization."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict


class SyncOutcome(str, Enum):
    CREATED = "created"
    UPDATED = "updated"
    KEY_MISSING = "key_missing"


class SyncReport(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    outcome: SyncOutcome
    path: Path
    key: str
    tool_path: Path
    lines_changed: int = 0


class SyncError(BaseModel):
    """Base settings sync error."""

    model_config = ConfigDict(extra="forbid")

    message: str


class SettingsParseError(SyncError):
    """Settings file is not valid JSON with comments."""

    path: Path


class SettingsFormatError(SyncError):
    """Key exists but its value does not sit on a single rewritable line."""

    path: Path
    key: str


class SettingsIOError(SyncError):
    path: Path


class SettingsPathError(SyncError):
    """Configured settings path points outside the project root."""

    path: Path


class ToolNotFoundError(SyncError):
    tool_name: str
