"""Aspect configuration, detection and interpretation."""

from __future__ import annotations

from .builder import calc_all_aspects, calc_cross_aspects
from .detector import (
    STATIONARY_THRESHOLD_DEG,
    Aspect,
    AspectMatch,
    InvalidBodyPairError,
    MotionState,
    calc_aspect,
    check_aspect,
    classify_motion,
)
from .interpret import (
    aspect_harmony,
    aspect_name,
    aspect_strength,
    aspect_symbol,
    format_aspect,
)
from .table import (
    ASPECT_FAMILIES,
    DEFAULT_DEFINITIONS,
    AspectDefinition,
    AspectFamily,
    OrbTable,
    normalize_family,
)

__all__ = [
    "ASPECT_FAMILIES",
    "Aspect",
    "AspectDefinition",
    "AspectFamily",
    "AspectMatch",
    "DEFAULT_DEFINITIONS",
    "InvalidBodyPairError",
    "MotionState",
    "OrbTable",
    "STATIONARY_THRESHOLD_DEG",
    "aspect_harmony",
    "aspect_name",
    "aspect_strength",
    "aspect_symbol",
    "calc_aspect",
    "calc_all_aspects",
    "calc_cross_aspects",
    "check_aspect",
    "classify_motion",
    "format_aspect",
    "normalize_family",
]
