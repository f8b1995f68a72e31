"""astroaspects package bootstrap and curated public API surface."""

from __future__ import annotations

import logging
from importlib.metadata import PackageNotFoundError, version as _get_version

LOG = logging.getLogger(__name__)
LOG.addHandler(logging.NullHandler())

try:
    __version__ = _get_version("astroaspects")
except PackageNotFoundError:  # pragma: no cover - running from a source checkout
    __version__ = "0.0.0"

from .aspects import (  # noqa: E402
    ASPECT_FAMILIES,
    Aspect,
    AspectDefinition,
    InvalidBodyPairError,
    OrbTable,
    aspect_harmony,
    aspect_name,
    aspect_strength,
    aspect_symbol,
    calc_all_aspects,
    calc_aspect,
    calc_cross_aspects,
    check_aspect,
    classify_motion,
    format_aspect,
)
from .config import Settings, load_settings  # noqa: E402
from .core import BodyPosition, angular_distance, normalize_degrees  # noqa: E402
from .engine import AspectEngine  # noqa: E402
from .patterns import Pattern, find_patterns  # noqa: E402


def get_version() -> str:
    """Return the resolved astroaspects package version."""

    return __version__


__all__ = [
    "ASPECT_FAMILIES",
    "Aspect",
    "AspectDefinition",
    "AspectEngine",
    "BodyPosition",
    "InvalidBodyPairError",
    "OrbTable",
    "Pattern",
    "Settings",
    "__version__",
    "angular_distance",
    "aspect_harmony",
    "aspect_name",
    "aspect_strength",
    "aspect_symbol",
    "calc_all_aspects",
    "calc_aspect",
    "calc_cross_aspects",
    "check_aspect",
    "classify_motion",
    "find_patterns",
    "format_aspect",
    "get_version",
    "load_settings",
    "normalize_degrees",
]
