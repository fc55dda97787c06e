"""Environment overrides for the project configuration."""

from __future__ import annotations

import os
from collections.abc import Mapping

import yaml

from devkit.common import JsonDict
from devkit.constants import ENV_PREFIX
from devkit.utils.dicts import insert_path

OVERRIDE_PREFIX = f"{ENV_PREFIX}__"


def collect_env_overrides(environ: Mapping[str, str] | None = None) -> JsonDict:
    """Build a nested mapping from `DEVKIT_CONFIG__SECTION__KEY=value` variables.

    Values are read as YAML, so `true` or `3` arrive typed. Text that YAML
    rejects is kept as a plain string.
    """
    overrides: JsonDict = {}
    for name, raw in (os.environ if environ is None else environ).items():
        if not name.startswith(OVERRIDE_PREFIX):
            continue
        segments = [segment.lower() for segment in name[len(OVERRIDE_PREFIX) :].split("__") if segment]
        if segments:
            insert_path(overrides, segments, _parse_env_value(raw))
    return overrides


def _parse_env_value(raw: str) -> object:
    try:
        return yaml.safe_load(raw)
    except yaml.YAMLError:
        return raw
