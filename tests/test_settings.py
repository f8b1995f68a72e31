"""Tests for YAML-backed settings."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from astroaspects.aspects import OrbTable
from astroaspects.config import (
    CURRENT_SETTINGS_SCHEMA_VERSION,
    AspectsCfg,
    LoggingCfg,
    Settings,
    SettingsError,
    config_path,
    default_settings,
    get_config_home,
    load_settings,
    save_settings,
)


def test_default_settings() -> None:
    settings = default_settings()
    assert settings.schema_version == CURRENT_SETTINGS_SCHEMA_VERSION
    assert settings.aspects.orbs_by_aspect == {}
    assert settings.aspects.max_aspects is None
    assert settings.aspects.max_patterns is None
    assert settings.aspects.stationary_threshold_deg == 0.01


def test_config_home_follows_environment(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("ASTROASPECTS_HOME", str(tmp_path / "cfg"))
    assert get_config_home() == tmp_path / "cfg"
    assert config_path() == tmp_path / "cfg" / "config.yaml"


def test_load_settings_creates_missing_file(tmp_path: Path) -> None:
    target = tmp_path / "nested" / "config.yaml"
    settings = load_settings(target)
    assert target.exists()
    assert settings == default_settings()


def test_load_settings_uses_config_home_by_default() -> None:
    settings = load_settings()
    assert config_path().exists()
    assert settings == default_settings()


def test_save_and_load_round_trip(tmp_path: Path) -> None:
    settings = Settings(
        aspects=AspectsCfg(
            orbs_by_aspect={"trine": 6.5, "semi-square": 1.5},
            max_aspects=40,
            max_patterns=10,
        )
    )
    path = save_settings(settings, tmp_path / "config.yaml")
    loaded = load_settings(path)
    assert loaded == settings
    assert loaded.aspects.orbs_by_aspect == {"trine": 6.5, "semisquare": 1.5}


def test_orb_overrides_are_capped() -> None:
    cfg = AspectsCfg(orbs_by_aspect={"Conjunction": 45, "square": -2})
    assert cfg.orbs_by_aspect == {"conjunction": 30.0, "square": 0.0}


@pytest.mark.parametrize("field", ["max_aspects", "max_patterns"])
def test_limits_must_be_positive(field: str) -> None:
    with pytest.raises(ValidationError):
        AspectsCfg(**{field: 0})


def test_negative_threshold_rejected() -> None:
    with pytest.raises(ValidationError):
        AspectsCfg(stationary_threshold_deg=-0.1)


def test_invalid_yaml_raises(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("aspects: [unclosed\n", encoding="utf-8")
    with pytest.raises(SettingsError):
        load_settings(path)


def test_non_mapping_document_raises(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text(yaml.safe_dump(["not", "a", "mapping"]), encoding="utf-8")
    with pytest.raises(SettingsError):
        load_settings(path)


def test_empty_document_loads_defaults(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("", encoding="utf-8")
    assert load_settings(path) == default_settings()


def test_orb_table_from_settings() -> None:
    cfg = AspectsCfg(orbs_by_aspect={"trine": 5.0, "septile": 1.0})
    table = OrbTable.from_settings(cfg)
    assert table.get_orb("trine") == 5.0
    assert table.get_orb("square") == 8.0
    assert table.get_orb("septile") == 0.0


def test_logging_section_round_trip(tmp_path: Path) -> None:
    settings = Settings(logging=LoggingCfg(level="debug", propagate=False))
    path = save_settings(settings, tmp_path / "config.yaml")
    raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    assert raw["logging"]["level"] == "DEBUG"
    assert load_settings(path).logging == settings.logging


def test_unknown_log_level_in_document_is_rejected(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text(yaml.safe_dump({"logging": {"level": "chatty"}}), encoding="utf-8")
    with pytest.raises(ValidationError):
        load_settings(path)
