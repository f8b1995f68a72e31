"""Core value types and angular helpers for astroaspects."""

from __future__ import annotations

from .angles import angular_distance, normalize_degrees, sign_degree, sign_index
from .bodies import (
    ELEMENTS,
    MODALITIES,
    SIGN_NAMES,
    BodyPosition,
    canonical_body,
    display_name,
    sign_element,
    sign_modality,
    sign_name,
)

__all__ = [
    "BodyPosition",
    "ELEMENTS",
    "MODALITIES",
    "SIGN_NAMES",
    "angular_distance",
    "canonical_body",
    "display_name",
    "normalize_degrees",
    "sign_degree",
    "sign_element",
    "sign_index",
    "sign_modality",
    "sign_name",
]
