from __future__ import annotations

import os

import pytest


@pytest.fixture(autouse=True)
def _isolate_environment(tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep tests away from the developer's own project root, logs and overrides."""
    monkeypatch.delenv("PRJ_ROOT", raising=False)
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path_factory.mktemp("xdg-data")))
    for key in list(os.environ):
        if key.startswith("DEVKIT_"):
            monkeypatch.delenv(key, raising=False)
