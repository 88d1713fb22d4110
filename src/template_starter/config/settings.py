"""Settings for template-starter.

Settings discovery:
- Load the defaults bundled with the package (`starter.yml`).
- If the bundled file is not available, fall back to built-in defaults.
- Apply environment overrides (`TEMPLATE_STARTER_REPOSITORY`, `TEMPLATE_STARTER_GIT`).
- Expose a memoized getter so callers can treat it like a constant.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from functools import lru_cache
from importlib.resources import files
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

DEFAULT_REPOSITORY = "https://github.com/template-starter/template-starter.git"

REPOSITORY_ENV = "TEMPLATE_STARTER_REPOSITORY"
GIT_ENV = "TEMPLATE_STARTER_GIT"


@dataclass(frozen=True)
class StarterSettings:
    """Configuration passed explicitly into discovery, selection and import."""

    default_repository: str = DEFAULT_REPOSITORY  # distribution repository URL
    reserved_branch: str = "main"  # never a template on the default repository
    remote_alias: str = "template-starter"
    temp_dir: Path = Path(".template-starter-temp")  # relative to cwd
    git_executable: str = "git"


def _parse_settings(data: Mapping[str, Any]) -> StarterSettings:
    defaults = StarterSettings()
    values: Dict[str, Any] = {}
    for key, field in (
        ("repository", "default_repository"),
        ("reserved_branch", "reserved_branch"),
        ("remote_alias", "remote_alias"),
        ("git_executable", "git_executable"),
    ):
        value = data.get(key)
        if value is None:
            continue
        assert isinstance(value, str), f"Setting '{key}' must be a string"
        values[field] = value
    temp_dir = data.get("temp_dir")
    if temp_dir is not None:
        assert isinstance(temp_dir, str), "Setting 'temp_dir' must be a string"
        values["temp_dir"] = Path(temp_dir)
    return replace(defaults, **values)


def load_settings(path: Path) -> StarterSettings:
    """Load settings from a YAML file path."""
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    assert isinstance(data, dict)
    return _parse_settings(data)


def load_bundled_settings() -> StarterSettings:
    """Load the bundled default settings from the package resources."""
    try:
        settings_file = files("template_starter.config").joinpath("starter.yml")
        content = settings_file.read_text(encoding="utf-8")
    except (FileNotFoundError, ModuleNotFoundError):
        return StarterSettings()
    data = yaml.safe_load(content) or {}
    assert isinstance(data, dict)
    return _parse_settings(data)


def apply_env_overrides(
    settings: StarterSettings, environ: Optional[Mapping[str, str]] = None
) -> StarterSettings:
    env = os.environ if environ is None else environ
    overrides: Dict[str, Any] = {}
    if env.get(REPOSITORY_ENV):
        overrides["default_repository"] = env[REPOSITORY_ENV]
    if env.get(GIT_ENV):
        overrides["git_executable"] = env[GIT_ENV]
    return replace(settings, **overrides) if overrides else settings


@lru_cache(maxsize=1)
def get_settings() -> StarterSettings:
    """Return bundled settings with environment overrides applied (memoized)."""
    return apply_env_overrides(load_bundled_settings())
