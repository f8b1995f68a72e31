from __future__ import annotations

import math

import pytest

from astroaspects.core.angles import angular_distance, normalize_degrees

hypothesis = pytest.importorskip("hypothesis")
given = hypothesis.given
st = hypothesis.strategies
settings = hypothesis.settings

FLOATS = st.floats(
    min_value=-1e6,
    max_value=1e6,
    allow_nan=False,
    allow_infinity=False,
)


@settings(deadline=None)
@given(x=FLOATS)
def test_normalize_degrees_range(x: float) -> None:
    """normalize(x) always lands in [0, 360)."""

    assert 0.0 <= normalize_degrees(x) < 360.0


@settings(deadline=None)
@given(x=FLOATS)
def test_normalize_degrees_congruent(x: float) -> None:
    """normalize(x) differs from x by whole turns only."""

    residue = math.remainder(normalize_degrees(x) - x, 360.0)
    assert math.isclose(residue, 0.0, abs_tol=1e-6)


@settings(deadline=None)
@given(a=FLOATS, b=FLOATS)
def test_angular_distance_symmetric(a: float, b: float) -> None:
    assert angular_distance(a, b) == angular_distance(b, a)


@settings(deadline=None)
@given(a=FLOATS, b=FLOATS)
def test_angular_distance_bounded(a: float, b: float) -> None:
    assert 0.0 <= angular_distance(a, b) <= 180.0


@settings(deadline=None)
@given(a=FLOATS, k=st.integers(min_value=-20, max_value=20))
def test_angular_distance_ignores_full_turns(a: float, k: int) -> None:
    assert math.isclose(angular_distance(a, a + 360.0 * k), 0.0, abs_tol=1e-6)
