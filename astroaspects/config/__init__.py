"""Configuration helpers exposed at :mod:`astroaspects.config`."""

from __future__ import annotations

from .settings import (
    CURRENT_SETTINGS_SCHEMA_VERSION,
    AspectsCfg,
    LoggingCfg,
    Settings,
    SettingsError,
    config_path,
    default_settings,
    get_config_home,
    load_settings,
    parse_level,
    save_settings,
)

__all__ = [
    "AspectsCfg",
    "CURRENT_SETTINGS_SCHEMA_VERSION",
    "LoggingCfg",
    "Settings",
    "SettingsError",
    "config_path",
    "default_settings",
    "get_config_home",
    "load_settings",
    "parse_level",
    "save_settings",
]
