"""Application settings read from `DEVKIT_*` environment variables.

These cover naming and logging only. Command behavior lives in the project's
`.devkit/config.yaml` (see `devkit.config`).
"""

from __future__ import annotations

from functools import cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from devkit.common import AppDirectories, AppInfo, AppPaths, LoggingConfig


class Settings(BaseSettings):
    app: AppInfo = Field(default_factory=AppInfo)
    paths: AppPaths = Field(default_factory=AppPaths)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    # DEVKIT_CONFIG__* belongs to devkit.config and is ignored here
    model_config = SettingsConfigDict(
        env_prefix="DEVKIT_",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def directories(self) -> AppDirectories:
        return AppDirectories(
            app_name=self.paths.data_dir_name,
            project_marker=self.paths.project_subdir_name,
            root_markers=self.paths.root_markers,
        )

    def config_file(self, project_root: Path) -> Path:
        return project_root / self.paths.project_subdir_name / self.paths.config_filename


@cache
def get_settings() -> Settings:
    return Settings()


__all__ = ["Settings", "get_settings"]
