"""Pydantic models for the project configuration file and its errors."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, JsonValue

from devkit.common import Extension, NonEmptyString

DEFAULT_LICENSE_NOTICE = """\
Copyright 2021 David Karrick

Licensed under the Apache License, Version 2.0 <LICENSE-APACHE or
https://www.apache.org/licenses/LICENSE-2.0> or the MIT license
<LICENSE-MIT or https://opensource.org/licenses/MIT>, at your
option. This file may not be copied, modified, or distributed
except according to those terms."""

DEFAULT_LICENSE_HEADER = f"/*\n{DEFAULT_LICENSE_NOTICE}\n*/\n\n\n"


def _default_settings_fields() -> dict[str, JsonValue]:
    return {
        "rust-analyzer.trace.extension": True,
        "rust-analyzer.trace.server": "messages",
        "terminal.integrated.profiles.linux": {
            "bash": {"path": "bash"},
            "zsh": {"path": "zsh"},
            "nix": {"path": "nix-shell"},
        },
        "terminal.integrated.defaultProfile.linux": "nix",
        "editor.insertSpaces": False,
    }


class ConfigYamlError(BaseModel):
    """The project config file is not valid YAML."""

    model_config = ConfigDict(extra="forbid")

    path: Path
    line: int | None = None
    column: int | None = None
    message: str


class ConfigValidationError(BaseModel):
    """File contents or env overrides do not fit the config schema."""

    model_config = ConfigDict(extra="forbid")

    path: Path
    field: str | None = None
    message: str


class ConfigIOError(BaseModel):
    model_config = ConfigDict(extra="forbid")

    path: Path
    message: str


type ConfigError = ConfigYamlError | ConfigValidationError | ConfigIOError


class ScaffoldConfig(BaseModel):
    """Settings for `devkit scaffold`."""

    model_config = ConfigDict(extra="forbid")

    source_dir: NonEmptyString = "src"
    extension: Extension = "rs"
    index_filename: NonEmptyString = "mod.rs"
    license_header: str = DEFAULT_LICENSE_HEADER


class SyncConfig(BaseModel):
    """Settings for `devkit sync-settings`."""

    model_config = ConfigDict(extra="forbid")

    settings_path: NonEmptyString = ".vscode/settings.json"
    key: NonEmptyString = "rust-analyzer.server.path"
    tool_name: NonEmptyString = "rust-analyzer"
    tool_path: str | None = None
    defaults: dict[str, JsonValue] = Field(default_factory=_default_settings_fields)


class DevkitConfig(BaseModel):
    """Contents of `.devkit/config.yaml` after env overrides."""

    model_config = ConfigDict(extra="forbid")

    scaffold: ScaffoldConfig = Field(default_factory=ScaffoldConfig)
    sync: SyncConfig = Field(default_factory=SyncConfig)
