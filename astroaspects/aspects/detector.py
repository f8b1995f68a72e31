"""Pairwise aspect detection and applying/separating classification."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, NamedTuple

from ..core.angles import angular_distance
from ..core.bodies import BodyPosition
from .interpret import aspect_name
from .table import OrbTable

__all__ = [
    "Aspect",
    "AspectMatch",
    "InvalidBodyPairError",
    "MotionState",
    "STATIONARY_THRESHOLD_DEG",
    "calc_aspect",
    "check_aspect",
    "classify_motion",
]

MotionState = Literal["applying", "separating", "stationary"]

STATIONARY_THRESHOLD_DEG = 0.01
"""Relative speed (deg/day) below which a pair counts as stationary."""


class InvalidBodyPairError(ValueError):
    """Raised when a pair cannot carry an aspect (missing or identical body)."""


class AspectMatch(NamedTuple):
    family: str
    difference: float


@dataclass(frozen=True)
class Aspect:
    """A detected aspect between two distinct bodies.

    Attributes
    ----------
    body_a, body_b:
        Identifiers of the two bodies, in the order they were passed in.
    family:
        Matched aspect family (``"trine"``, ``"square"``, …).
    orb:
        Raw angular separation between the bodies in ``[0, 180]``.
    difference:
        Absolute deviation of ``orb`` from the family's target angle.
    motion:
        ``"applying"``, ``"separating"`` or ``"stationary"``.
    is_exact:
        ``True`` when ``difference`` is within the family's tight orb.
    label:
        Human readable summary such as ``"Sun trine Moon"``.
    """

    body_a: str
    body_b: str
    family: str
    orb: float
    difference: float
    motion: MotionState
    is_exact: bool
    label: str = ""

    @property
    def is_applying(self) -> bool:
        return self.motion == "applying"

    @property
    def is_separating(self) -> bool:
        return self.motion == "separating"

    @property
    def bodies(self) -> tuple[str, str]:
        return (self.body_a, self.body_b)

    def involves(self, body: str) -> bool:
        return body == self.body_a or body == self.body_b

    def other(self, body: str) -> str | None:
        """Return the partner of ``body`` in this aspect, if ``body`` takes part."""

        if body == self.body_a:
            return self.body_b
        if body == self.body_b:
            return self.body_a
        return None

    def as_mapping(self) -> dict[str, object]:
        return {
            "body_a": self.body_a,
            "body_b": self.body_b,
            "aspect": self.family,
            "orb": self.orb,
            "difference": self.difference,
            "motion": self.motion,
            "exact": self.is_exact,
            "label": self.label,
        }


def _resolve_table(table: OrbTable | None) -> OrbTable:
    return table if table is not None else OrbTable()


def check_aspect(
    lon_a: float, lon_b: float, table: OrbTable | None = None
) -> AspectMatch | None:
    """Return the first family whose orb contains the separation of the longitudes.

    Families are scanned in table order and the first hit wins, even when a
    later family's target is closer. With the built-in orbs no two ranges
    overlap; widened custom orbs can make the order observable.
    """

    distance = angular_distance(lon_a, lon_b)
    for definition in _resolve_table(table):
        diff = abs(distance - definition.angle)
        if diff <= definition.default_orb:
            return AspectMatch(definition.family, diff)
    return None


def classify_motion(
    body_a: BodyPosition | None,
    body_b: BodyPosition | None,
    angle: float,
    *,
    threshold: float = STATIONARY_THRESHOLD_DEG,
) -> MotionState:
    """Classify an aspect of ``angle`` degrees as applying, separating or stationary.

    A positive speed difference (``body_a`` faster) closes separations that
    are still below the target angle; a negative one closes separations
    above it. Pairs whose speeds differ by less than ``threshold`` deg/day
    are frozen relative to each other and reported as stationary.
    """

    if body_a is None or body_b is None:
        raise InvalidBodyPairError("both bodies are required to classify motion")

    speed_diff = body_a.speed_lon - body_b.speed_lon
    if abs(speed_diff) < threshold:
        return "stationary"

    current = angular_distance(body_a.lon, body_b.lon)
    if speed_diff > 0:
        applying = current < angle
    else:
        applying = current > angle
    return "applying" if applying else "separating"


def calc_aspect(
    body_a: BodyPosition | None,
    body_b: BodyPosition | None,
    table: OrbTable | None = None,
    *,
    stationary_threshold: float = STATIONARY_THRESHOLD_DEG,
) -> Aspect | None:
    """Return the :class:`Aspect` formed by two bodies, or ``None`` without one.

    Raises
    ------
    InvalidBodyPairError
        If either body is missing or both share the same identifier.
    """

    if body_a is None or body_b is None:
        raise InvalidBodyPairError("calc_aspect requires two body positions")
    if body_a.body == body_b.body:
        raise InvalidBodyPairError(f"{body_a.body!r} cannot aspect itself")

    resolved = _resolve_table(table)
    match = check_aspect(body_a.lon, body_b.lon, resolved)
    if match is None:
        return None

    definition = resolved.definition(match.family)
    assert definition is not None
    motion = classify_motion(
        body_a, body_b, definition.angle, threshold=stationary_threshold
    )
    return Aspect(
        body_a=body_a.body,
        body_b=body_b.body,
        family=match.family,
        orb=angular_distance(body_a.lon, body_b.lon),
        difference=match.difference,
        motion=motion,
        is_exact=match.difference <= definition.tight_orb,
        label=f"{body_a.name} {aspect_name(match.family)} {body_b.name}",
    )
