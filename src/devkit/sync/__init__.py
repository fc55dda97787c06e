"""Editor settings synchronization."""

from .models import (
    SettingsFormatError,
    SettingsIOError,
    SettingsParseError,
    SettingsPathError,
    SyncError,
    SyncOutcome,
    SyncReport,
    ToolNotFoundError,
)
from .synchronizer import render_default_document, replace_key_lines, resolve_settings_path, sync_settings
from .tools import resolve_tool_path

__all__ = [
    "SettingsFormatError",
    "SettingsIOError",
    "SettingsParseError",
    "SettingsPathError",
    "SyncError",
    "SyncOutcome",
    "SyncReport",
    "ToolNotFoundError",
    "render_default_document",
    "replace_key_lines",
    "resolve_settings_path",
    "resolve_tool_path",
    "sync_settings",
]
