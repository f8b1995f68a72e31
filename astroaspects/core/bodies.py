"""Body position value type and zodiac lookup tables."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

from .angles import normalize_degrees, sign_degree, sign_index

__all__ = [
    "BodyPosition",
    "ELEMENTS",
    "MODALITIES",
    "SIGN_NAMES",
    "canonical_body",
    "display_name",
    "sign_element",
    "sign_modality",
    "sign_name",
]


SIGN_NAMES: Tuple[str, ...] = (
    "Aries",
    "Taurus",
    "Gemini",
    "Cancer",
    "Leo",
    "Virgo",
    "Libra",
    "Scorpio",
    "Sagittarius",
    "Capricorn",
    "Aquarius",
    "Pisces",
)

ELEMENTS: Tuple[str, ...] = ("Fire", "Earth", "Air", "Water")
MODALITIES: Tuple[str, ...] = ("Cardinal", "Fixed", "Mutable")

# Display names for the bodies an ephemeris provider usually reports.
_DISPLAY_NAMES: Dict[str, str] = {
    "sun": "Sun",
    "moon": "Moon",
    "mercury": "Mercury",
    "venus": "Venus",
    "mars": "Mars",
    "jupiter": "Jupiter",
    "saturn": "Saturn",
    "uranus": "Uranus",
    "neptune": "Neptune",
    "pluto": "Pluto",
    "mean_node": "Mean Node",
    "true_node": "True Node",
    "mean_apogee": "Mean Apogee",
    "osc_apogee": "Osc. Apogee",
    "earth": "Earth",
    "chiron": "Chiron",
    "pholus": "Pholus",
    "ceres": "Ceres",
    "pallas": "Pallas",
    "juno": "Juno",
    "vesta": "Vesta",
    "intp_apogee": "Intp. Apogee",
    "intp_perigee": "Intp. Perigee",
}


def canonical_body(body: str) -> str:
    """Return the lower-case, underscore separated identifier for ``body``."""

    return str(body).strip().lower().replace(" ", "_").replace("-", "_")


def display_name(body: str) -> str:
    key = canonical_body(body)
    if key in _DISPLAY_NAMES:
        return _DISPLAY_NAMES[key]
    return key.replace("_", " ").title()


def sign_name(sign: int) -> str:
    """Return the English sign name for ``sign`` or ``"Unknown"``."""

    if 0 <= sign < len(SIGN_NAMES):
        return SIGN_NAMES[sign]
    return "Unknown"


def sign_element(sign: int) -> str:
    """Return the element of ``sign`` (Aries→Fire, Taurus→Earth, …)."""

    return ELEMENTS[sign % 4]


def sign_modality(sign: int) -> str:
    return MODALITIES[sign % 3]


@dataclass(frozen=True)
class BodyPosition:
    """Instantaneous state of one body as supplied by an ephemeris provider.

    Attributes
    ----------
    body:
        Canonical identifier such as ``"sun"`` or ``"true_node"``. Two
        positions with the same identifier are treated as the same body.
    lon:
        Ecliptic longitude in degrees, normalised into ``[0, 360)``.
    speed_lon:
        Longitudinal motion in degrees per day. Negative values denote
        retrograde motion.
    name:
        Display name used in labels and pattern descriptions. Derived from
        ``body`` when omitted.
    sign:
        Zodiac sign index ``0..11``. Derived from ``lon`` when omitted.
    """

    body: str
    lon: float
    speed_lon: float = 0.0
    name: str = ""
    sign: int | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "body", canonical_body(self.body))
        object.__setattr__(self, "lon", normalize_degrees(self.lon))
        object.__setattr__(self, "speed_lon", float(self.speed_lon))
        if not self.name:
            object.__setattr__(self, "name", display_name(self.body))
        if self.sign is None:
            object.__setattr__(self, "sign", sign_index(self.lon))
        elif not 0 <= self.sign < len(SIGN_NAMES):
            raise ValueError(f"sign must be in 0..11, got {self.sign!r}")

    @property
    def retrograde(self) -> bool:
        return self.speed_lon < 0.0

    @property
    def sign_name(self) -> str:
        return sign_name(self.sign)

    @property
    def sign_degree(self) -> float:
        return sign_degree(self.lon)

    @property
    def element(self) -> str:
        return sign_element(self.sign)

    @property
    def modality(self) -> str:
        return sign_modality(self.sign)

    def as_mapping(self) -> dict[str, object]:
        """Return the position as a plain mapping payload."""

        return {
            "body": self.body,
            "name": self.name,
            "lon": self.lon,
            "speed_lon": self.speed_lon,
            "sign": self.sign_name,
            "retrograde": self.retrograde,
        }
