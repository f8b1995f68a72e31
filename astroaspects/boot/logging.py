"""Attach output to the ``astroaspects`` logger namespace.

Importing the package only installs a ``NullHandler``. Hosts that want to
see engine diagnostics call :func:`configure_logging` once, normally with the
:class:`~astroaspects.config.Settings` they loaded. The root logger is never
touched.
"""

from __future__ import annotations

import logging
import os
from typing import IO

from ..config.settings import LoggingCfg, Settings, parse_level

__all__ = ["PACKAGE_LOGGER", "configure_logging", "effective_level"]

PACKAGE_LOGGER = "astroaspects"
_HANDLER_NAME = "astroaspects-stream"

LOG = logging.getLogger(__name__)


def effective_level(cfg: LoggingCfg, override: str | int | None = None) -> int:
    """Pick the level from ``override``, then ``LOG_LEVEL``, then ``cfg``.

    An unrecognised ``override`` raises :class:`ValueError`; an unrecognised
    ``LOG_LEVEL`` is ignored with a warning.
    """

    if override is not None:
        level = parse_level(override)
        if level is None:
            raise ValueError(f"unknown log level {override!r}")
        return level

    env_value = os.environ.get("LOG_LEVEL", "").strip()
    if env_value:
        level = parse_level(env_value)
        if level is not None:
            return level
        LOG.warning("Ignoring unknown LOG_LEVEL %r; using %s", env_value, cfg.level)

    level = parse_level(cfg.level)
    return level if level is not None else logging.WARNING


def _owned_handler(logger: logging.Logger) -> logging.Handler | None:
    for handler in logger.handlers:
        if handler.get_name() == _HANDLER_NAME:
            return handler
    return None


def configure_logging(
    settings: Settings | None = None,
    *,
    level: str | int | None = None,
    stream: IO[str] | None = None,
) -> logging.Logger:
    """Configure the package logger from ``settings`` and return it.

    Repeated calls reuse the same stream handler, so reconfiguring after a
    settings reload does not duplicate output.
    """

    cfg = settings.logging if settings is not None else LoggingCfg()
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(effective_level(cfg, level))
    logger.propagate = cfg.propagate

    handler = _owned_handler(logger)
    if handler is None:
        handler = logging.StreamHandler(stream)
        handler.set_name(_HANDLER_NAME)
        logger.addHandler(handler)
    elif stream is not None and isinstance(handler, logging.StreamHandler):
        handler.setStream(stream)
    handler.setFormatter(logging.Formatter(cfg.format))

    logger.debug("Logging configured at %s", logging.getLevelName(logger.level))
    return logger
