"""Static interpretive lookups for aspect families."""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Literal

from .table import OrbTable, normalize_family

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .detector import Aspect

__all__ = [
    "Harmony",
    "aspect_harmony",
    "aspect_name",
    "aspect_strength",
    "aspect_symbol",
    "format_aspect",
]

Harmony = Literal["harmonious", "challenging", "neutral"]

_NAMES: Dict[str, str] = {
    "conjunction": "conjunction",
    "opposition": "opposition",
    "trine": "trine",
    "square": "square",
    "sextile": "sextile",
    "quincunx": "quincunx",
    "semisextile": "semi-sextile",
    "semisquare": "semi-square",
    "sesquiquadrate": "sesquiquadrate",
    "quintile": "quintile",
    "biquintile": "biquintile",
}

_SYMBOLS: Dict[str, str] = {
    "conjunction": "☌",
    "opposition": "☍",
    "trine": "△",
    "square": "□",
    "sextile": "⚹",
    "quincunx": "⚻",
    "semisextile": "⚺",
    "semisquare": "∠",
    "sesquiquadrate": "⚼",
    "quintile": "Q",
    "biquintile": "bQ",
}

_HARMONY: Dict[str, Harmony] = {
    "trine": "harmonious",
    "sextile": "harmonious",
    "quintile": "harmonious",
    "biquintile": "harmonious",
    "square": "challenging",
    "opposition": "challenging",
    "semisquare": "challenging",
    "sesquiquadrate": "challenging",
    "quincunx": "challenging",
    # Conjunction and semi-sextile take their tone from the bodies involved.
    "conjunction": "neutral",
    "semisextile": "neutral",
}


def aspect_name(family: str) -> str:
    return _NAMES.get(normalize_family(family), "unknown")


def aspect_symbol(family: str) -> str:
    return _SYMBOLS.get(normalize_family(family), "?")


def aspect_harmony(family: str) -> Harmony:
    """Return ``"harmonious"``, ``"challenging"`` or ``"neutral"`` for ``family``."""

    return _HARMONY.get(normalize_family(family), "neutral")


def aspect_strength(aspect: "Aspect", table: OrbTable | None = None) -> float:
    """Return how close ``aspect`` is to exact, from ``0.0`` (edge of orb) to ``1.0``.

    The score is ``1 - difference / orb`` using the detection orb currently
    configured in ``table``; aspects beyond the orb clamp to ``0.0``.
    """

    orb = (table if table is not None else OrbTable()).get_orb(aspect.family)
    if orb <= 0.0:
        return 0.0
    return max(0.0, 1.0 - aspect.difference / orb)


def format_aspect(aspect: "Aspect") -> str:
    """Render ``aspect`` as ``"Sun trine Moon (2.00° applying, exact)"``."""

    label = aspect.label or f"{aspect.body_a} {aspect_name(aspect.family)} {aspect.body_b}"
    suffix = ", exact" if aspect.is_exact else ""
    return f"{label} ({aspect.difference:.2f}° {aspect.motion}{suffix})"
