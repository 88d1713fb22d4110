"""Configuration management for template-starter."""

from .settings import (
    StarterSettings,
    apply_env_overrides,
    get_settings,
    load_bundled_settings,
    load_settings,
)

__all__ = [
    "StarterSettings",
    "apply_env_overrides",
    "get_settings",
    "load_bundled_settings",
    "load_settings",
]
