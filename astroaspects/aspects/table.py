"""Aspect configuration table: target angles and orb tolerances."""

from __future__ import annotations

import logging
import math
from collections.abc import Iterator
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Dict, Literal, Tuple

if TYPE_CHECKING:  # pragma: no cover - typing only
    from ..config.settings import AspectsCfg

__all__ = [
    "ASPECT_FAMILIES",
    "AspectDefinition",
    "AspectFamily",
    "DEFAULT_DEFINITIONS",
    "OrbTable",
    "normalize_family",
]

LOG = logging.getLogger(__name__)

AspectFamily = Literal[
    "conjunction",
    "opposition",
    "trine",
    "square",
    "sextile",
    "quincunx",
    "semisextile",
    "semisquare",
    "sesquiquadrate",
    "quintile",
    "biquintile",
]


@dataclass(frozen=True)
class AspectDefinition:
    """One aspect family with its target angle and orb tolerances."""

    family: str
    angle: float
    default_orb: float
    tight_orb: float
    is_major: bool


# Order matters: detection returns the first family whose orb contains the
# separation, so earlier (major) families win overlaps against later ones.
DEFAULT_DEFINITIONS: Tuple[AspectDefinition, ...] = (
    AspectDefinition("conjunction", 0.0, 8.0, 3.0, True),
    AspectDefinition("opposition", 180.0, 8.0, 3.0, True),
    AspectDefinition("trine", 120.0, 8.0, 3.0, True),
    AspectDefinition("square", 90.0, 8.0, 3.0, True),
    AspectDefinition("sextile", 60.0, 6.0, 2.0, True),
    AspectDefinition("quincunx", 150.0, 3.0, 1.0, False),
    AspectDefinition("semisextile", 30.0, 3.0, 1.0, False),
    AspectDefinition("semisquare", 45.0, 3.0, 1.0, False),
    AspectDefinition("sesquiquadrate", 135.0, 3.0, 1.0, False),
    AspectDefinition("quintile", 72.0, 2.0, 0.5, False),
    AspectDefinition("biquintile", 144.0, 2.0, 0.5, False),
)

ASPECT_FAMILIES: Tuple[str, ...] = tuple(d.family for d in DEFAULT_DEFINITIONS)

_FAMILY_ALIASES: Dict[str, str] = {
    "semi-sextile": "semisextile",
    "semi_sextile": "semisextile",
    "semi-square": "semisquare",
    "semi_square": "semisquare",
    "sesquisquare": "sesquiquadrate",
    "sesqui-square": "sesquiquadrate",
    "inconjunct": "quincunx",
    "bi-quintile": "biquintile",
}


def normalize_family(name: str) -> str:
    """Return the canonical family key for ``name`` (case/alias tolerant)."""

    key = str(name or "").strip().lower()
    return _FAMILY_ALIASES.get(key, key)


class OrbTable:
    """Mutable orb configuration for the eleven aspect families.

    Each instance owns an independent copy of :data:`DEFAULT_DEFINITIONS`, so
    separate computations can run with isolated configurations. Instances are
    not synchronised: configure one fully before sharing it between threads.
    """

    def __init__(self) -> None:
        self._definitions: list[AspectDefinition] = list(DEFAULT_DEFINITIONS)

    @classmethod
    def from_settings(cls, cfg: "AspectsCfg") -> "OrbTable":
        """Build a table with ``cfg.orbs_by_aspect`` applied over the defaults."""

        table = cls()
        for family, orb in cfg.orbs_by_aspect.items():
            table.set_orb(family, orb)
        return table

    def __iter__(self) -> Iterator[AspectDefinition]:
        return iter(tuple(self._definitions))

    def __len__(self) -> int:
        return len(self._definitions)

    def __repr__(self) -> str:
        orbs = ", ".join(f"{d.family}={d.default_orb:g}" for d in self._definitions)
        return f"OrbTable({orbs})"

    def _index(self, family: str) -> int | None:
        key = normalize_family(family)
        for idx, definition in enumerate(self._definitions):
            if definition.family == key:
                return idx
        return None

    def families(self) -> Tuple[str, ...]:
        return tuple(d.family for d in self._definitions)

    def definition(self, family: str) -> AspectDefinition | None:
        """Return the current definition for ``family`` or ``None``."""

        idx = self._index(family)
        return None if idx is None else self._definitions[idx]

    def get_orb(self, family: str) -> float:
        """Return the detection orb for ``family``; ``0.0`` when unknown."""

        definition = self.definition(family)
        return definition.default_orb if definition is not None else 0.0

    def set_orb(self, family: str, orb: float) -> None:
        """Override the detection orb for ``family``.

        Unknown families are ignored so callers can apply partially matching
        override maps without pre-filtering them.
        """

        value = float(orb)
        if not math.isfinite(value) or value < 0.0:
            raise ValueError(f"orb must be a finite non-negative number, got {value!r}")
        idx = self._index(family)
        if idx is None:
            LOG.debug("Ignoring orb override for unknown aspect family %r", family)
            return
        self._definitions[idx] = replace(self._definitions[idx], default_orb=value)
        LOG.debug("Orb for %s set to %.3f°", self._definitions[idx].family, value)

    def reset(self) -> None:
        """Restore every family to its built-in definition."""

        self._definitions = list(DEFAULT_DEFINITIONS)

    def copy(self) -> "OrbTable":
        clone = type(self)()
        clone._definitions = list(self._definitions)
        return clone
