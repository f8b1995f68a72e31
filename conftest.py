"""Pytest configuration for astroaspects."""

from __future__ import annotations

import logging

import pytest


@pytest.fixture(autouse=True)
def _isolated_config_home(tmp_path, monkeypatch):
    """Keep settings files written during tests out of the real home directory."""

    monkeypatch.setenv("ASTROASPECTS_HOME", str(tmp_path / "astroaspects-home"))
    monkeypatch.delenv("LOG_LEVEL", raising=False)


@pytest.fixture(autouse=True)
def _restore_package_logger():
    """Undo handler and level changes made by ``configure_logging``."""

    logger = logging.getLogger("astroaspects")
    saved = (logger.level, list(logger.handlers), logger.propagate)
    yield
    logger.setLevel(saved[0])
    logger.handlers[:] = saved[1]
    logger.propagate = saved[2]
