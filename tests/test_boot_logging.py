from __future__ import annotations

import io
import logging

import pytest
from pydantic import ValidationError

from astroaspects.boot.logging import PACKAGE_LOGGER, configure_logging, effective_level
from astroaspects.config import LoggingCfg, Settings, parse_level


@pytest.mark.parametrize(
    "value, expected",
    [
        ("debug", logging.DEBUG),
        (" WARNING ", logging.WARNING),
        ("15", 15),
        (logging.ERROR, logging.ERROR),
        ("chatty", None),
    ],
)
def test_parse_level(value, expected) -> None:
    assert parse_level(value) == expected


def test_logging_cfg_normalises_level() -> None:
    assert LoggingCfg(level="info").level == "INFO"
    assert LoggingCfg(level=10).level == "DEBUG"
    assert LoggingCfg(level="15").level == "15"
    with pytest.raises(ValidationError):
        LoggingCfg(level="chatty")


def test_level_precedence(monkeypatch) -> None:
    cfg = LoggingCfg(level="error")
    assert effective_level(cfg) == logging.ERROR
    monkeypatch.setenv("LOG_LEVEL", "debug")
    assert effective_level(cfg) == logging.DEBUG
    assert effective_level(cfg, "critical") == logging.CRITICAL
    with pytest.raises(ValueError):
        effective_level(cfg, "chatty")


def test_unknown_environment_level_falls_back_to_settings(monkeypatch, caplog) -> None:
    monkeypatch.setenv("LOG_LEVEL", "chatty")
    with caplog.at_level(logging.WARNING, logger=PACKAGE_LOGGER):
        assert effective_level(LoggingCfg(level="info")) == logging.INFO
    assert any("LOG_LEVEL" in record.getMessage() for record in caplog.records)


def test_configure_logging_targets_package_namespace() -> None:
    root_handlers = list(logging.getLogger().handlers)
    stream = io.StringIO()
    settings = Settings(logging=LoggingCfg(level="debug", format="%(name)s:%(message)s"))

    logger = configure_logging(settings, stream=stream)

    assert logger.name == "astroaspects"
    assert logger.level == logging.DEBUG
    assert logging.getLogger().handlers == root_handlers
    logging.getLogger("astroaspects.aspects.builder").debug("hello")
    assert "astroaspects.aspects.builder:hello" in stream.getvalue()


def test_configure_logging_reuses_its_handler() -> None:
    first, second = io.StringIO(), io.StringIO()
    configure_logging(Settings(), stream=first)
    logger = configure_logging(Settings(logging=LoggingCfg(level="info")), stream=second)

    owned = [h for h in logger.handlers if h.get_name() == "astroaspects-stream"]
    assert len(owned) == 1
    assert logger.level == logging.INFO
    logger.info("after reload")
    assert "after reload" in second.getvalue()
    assert first.getvalue() == ""


def test_builder_logs_truncation(body, caplog) -> None:
    from astroaspects.aspects import calc_all_aspects

    bodies = [body("sun", 0.0), body("moon", 1.0), body("mars", 2.0)]
    with caplog.at_level(logging.DEBUG, logger="astroaspects"):
        calc_all_aspects(bodies, limit=1)
    assert any("limit 1 reached" in record.getMessage() for record in caplog.records)
