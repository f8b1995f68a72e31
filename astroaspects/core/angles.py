"""Angular utilities shared across aspect and pattern detection.

Aspect detection compares separations between ecliptic longitudes against
fixed target angles. Raw subtraction breaks down around the 0°/360°
boundary, so every comparison in the package goes through the helpers in
this module: longitudes are first folded into ``[0, 360)`` and separations
are always reported as the minor arc in ``[0, 180]``.

The zodiac helpers live here as well because a body's sign is a pure
function of its longitude (twelve 30° slices starting at 0° Aries).
"""

from __future__ import annotations

import math
from typing import Final

__all__ = [
    "angular_distance",
    "normalize_degrees",
    "sign_degree",
    "sign_index",
]


EPSILON_DEG: Final[float] = 1e-9
SIGN_SPAN_DEG: Final[float] = 30.0


def normalize_degrees(angle: float) -> float:
    """Return ``angle`` normalised to the ``[0, 360)`` interval.

    Parameters
    ----------
    angle:
        Value in **degrees**. Inputs outside the canonical range are
        wrapped by multiples of 360°.

    Returns
    -------
    float
        A degree value in ``[0, 360)``. Values within ``1e-9`` of ``360``
        are coerced to ``0`` so that tiny negative inputs such as ``-1e-15``
        never surface as ``360.0`` after floating point rounding.
    """

    wrapped = math.fmod(float(angle), 360.0)
    if wrapped < 0.0:
        wrapped += 360.0
    if wrapped >= 360.0 - EPSILON_DEG:
        wrapped = 0.0
    return wrapped


def angular_distance(lon_a: float, lon_b: float) -> float:
    """Return the absolute circular separation in degrees within ``[0, 180]``.

    The result is symmetric in its arguments and always describes the
    shorter of the two arcs joining the longitudes.
    """

    diff = abs(normalize_degrees(lon_a) - normalize_degrees(lon_b))
    if diff > 180.0:
        diff = 360.0 - diff
    return diff


def sign_index(lon: float) -> int:
    """Return the zodiac sign index (``0`` = Aries … ``11`` = Pisces)."""

    return min(11, int(normalize_degrees(lon) // SIGN_SPAN_DEG))


def sign_degree(lon: float) -> float:
    """Return the position of ``lon`` inside its sign, in ``[0, 30)``."""

    return normalize_degrees(lon) % SIGN_SPAN_DEG
