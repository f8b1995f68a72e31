from __future__ import annotations

from collections.abc import Callable

import pytest

from astroaspects.core.bodies import BodyPosition


@pytest.fixture
def body() -> Callable[..., BodyPosition]:
    """Factory building :class:`BodyPosition` values with terse arguments."""

    def _make(name: str, lon: float, speed: float = 0.0, **kwargs) -> BodyPosition:
        return BodyPosition(body=name, lon=lon, speed_lon=speed, **kwargs)

    return _make
