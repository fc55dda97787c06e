from __future__ import annotations

from pathlib import Path

import pytest
from result import is_err

from devkit.config import SyncConfig
from devkit.sync import ToolNotFoundError, resolve_tool_path


def test_explicit_path_wins(tmp_path: Path) -> None:
    config = SyncConfig(tool_path="/opt/configured/rust-analyzer")

    result = resolve_tool_path(tmp_path / "ra", config)

    assert result.unwrap() == tmp_path / "ra"


def test_configured_path_is_used_before_path_lookup() -> None:
    config = SyncConfig(tool_path="/opt/configured/rust-analyzer")

    assert resolve_tool_path(None, config).unwrap() == Path("/opt/configured/rust-analyzer")


def test_falls_back_to_path_lookup(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    binary = tmp_path / "bin" / "rust-analyzer"
    binary.parent.mkdir()
    binary.write_text("#!/bin/sh\n")
    binary.chmod(0o755)
    monkeypatch.setenv("PATH", str(binary.parent))

    result = resolve_tool_path(None, SyncConfig())

    assert result.unwrap() == binary


def test_missing_tool_is_an_error(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PATH", str(tmp_path))

    result = resolve_tool_path(None, SyncConfig(tool_name="definitely-not-installed"))

    assert is_err(result)
    error = result.unwrap_err()
    assert isinstance(error, ToolNotFoundError)
    assert error.tool_name == "definitely-not-installed"
