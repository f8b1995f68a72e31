"""Configuration models and helpers for astroaspects settings."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Dict, Optional

import yaml
from pydantic import BaseModel, Field, field_validator

from ..aspects.table import normalize_family

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


CURRENT_SETTINGS_SCHEMA_VERSION = 1

MAX_ORB_DEG = 30.0


class SettingsError(RuntimeError):
    """Raised when a settings document cannot be interpreted."""


# -------------------- Settings Schema --------------------


class AspectsCfg(BaseModel):
    """Aspect detection, orb overrides and result limits."""

    orbs_by_aspect: Dict[str, float] = Field(default_factory=dict)
    max_aspects: Optional[int] = Field(None, ge=1)
    max_patterns: Optional[int] = Field(None, ge=1)
    stationary_threshold_deg: float = Field(0.01, ge=0.0)

    @field_validator("orbs_by_aspect", mode="before")
    @classmethod
    def _cap_orbs_by_aspect(cls, data: Dict[str, float] | object) -> Dict[str, float] | object:
        if not isinstance(data, dict):
            return data
        return {
            normalize_family(key): max(0.0, min(MAX_ORB_DEG, float(value)))
            for key, value in data.items()
        }


LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def parse_level(value: str | int) -> int | None:
    """Return the numeric level for a name or number, ``None`` if unknown."""

    if isinstance(value, int):
        return value
    candidate = str(value).strip().upper()
    if candidate.isdigit():
        return int(candidate)
    resolved = logging.getLevelName(candidate)
    return resolved if isinstance(resolved, int) else None


class LoggingCfg(BaseModel):
    """Output for the ``astroaspects`` logger namespace."""

    level: str = "WARNING"
    format: str = LOG_FORMAT
    propagate: bool = True

    @field_validator("level", mode="before")
    @classmethod
    def _known_level(cls, value: object) -> object:
        if isinstance(value, (str, int)) and not isinstance(value, bool):
            level = parse_level(value)
            if level is None:
                raise ValueError(f"unknown log level {value!r}")
            name = logging.getLevelName(level)
            return name if parse_level(name) == level else str(level)
        return value


class Settings(BaseModel):
    """Top-level settings document."""

    schema_version: int = CURRENT_SETTINGS_SCHEMA_VERSION
    aspects: AspectsCfg = Field(default_factory=AspectsCfg)
    logging: LoggingCfg = Field(default_factory=LoggingCfg)


# -------------------- Persistence --------------------


def get_config_home() -> Path:
    """Return the directory holding the user's settings file."""

    raw = os.environ.get("ASTROASPECTS_HOME")
    return Path(raw).expanduser() if raw else Path.home() / ".astroaspects"


def config_path() -> Path:
    return get_config_home() / "config.yaml"


def default_settings() -> Settings:
    return Settings()


def save_settings(settings: Settings, path: Optional[Path] = None) -> Path:
    """Write ``settings`` as YAML and return the destination path."""

    target = Path(path) if path else config_path()
    target.parent.mkdir(parents=True, exist_ok=True)
    data = settings.model_dump(mode="json")
    with target.open("w", encoding="utf-8") as handle:
        yaml.safe_dump(data, handle, sort_keys=False, allow_unicode=True)
    return target


def load_settings(path: Optional[Path] = None) -> Settings:
    """Load settings from disk, creating defaults if missing."""

    source_path = Path(path) if path else config_path()
    if not source_path.exists():
        settings = default_settings()
        save_settings(settings, source_path)
        return settings
    with source_path.open("r", encoding="utf-8") as handle:
        try:
            raw = yaml.safe_load(handle) or {}
        except yaml.YAMLError as exc:
            raise SettingsError(f"Invalid YAML in {source_path}") from exc
    if not isinstance(raw, dict):
        raise SettingsError(
            f"Settings document {source_path} must be a mapping, got {type(raw).__name__}"
        )
    return Settings(**raw)
