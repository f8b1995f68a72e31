"""Settings-bound facade over the aspect and pattern functions."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from .aspects.builder import calc_all_aspects, calc_cross_aspects
from .aspects.detector import Aspect, calc_aspect
from .aspects.interpret import aspect_strength
from .aspects.table import OrbTable
from .boot.logging import configure_logging
from .config.settings import Settings, default_settings, load_settings
from .core.bodies import BodyPosition
from .patterns import Pattern, find_patterns

__all__ = ["AspectEngine"]

LOG = logging.getLogger(__name__)


class AspectEngine:
    """Bundle a :class:`Settings` document with its own :class:`OrbTable`.

    Each engine owns its table, so engines built from different settings
    can run side by side. Mutating orbs on an engine that is shared between
    threads requires external locking.
    """

    def __init__(self, settings: Settings | None = None, table: OrbTable | None = None) -> None:
        self.settings = settings if settings is not None else default_settings()
        self.table = table if table is not None else OrbTable.from_settings(self.settings.aspects)
        LOG.debug("AspectEngine ready: %r", self.table)

    @classmethod
    def from_config(
        cls, path: Path | None = None, *, configure_logs: bool = True
    ) -> "AspectEngine":
        """Build an engine from the settings file at ``path`` (or the default).

        With ``configure_logs`` the package logger is set up from the same
        document before the engine is created.
        """

        settings = load_settings(path)
        if configure_logs:
            configure_logging(settings)
        return cls(settings)

    @property
    def _threshold(self) -> float:
        return self.settings.aspects.stationary_threshold_deg

    # -------------------- configuration --------------------

    def set_orb(self, family: str, orb: float) -> None:
        self.table.set_orb(family, orb)

    def get_orb(self, family: str) -> float:
        return self.table.get_orb(family)

    def reset_orbs(self) -> None:
        """Restore the built-in orbs, discarding settings overrides too."""

        self.table.reset()

    # -------------------- detection --------------------

    def calc_aspect(self, body_a: BodyPosition, body_b: BodyPosition) -> Aspect | None:
        return calc_aspect(body_a, body_b, self.table, stationary_threshold=self._threshold)

    def calc_all_aspects(self, bodies: Sequence[BodyPosition]) -> list[Aspect]:
        return calc_all_aspects(
            bodies,
            self.table,
            limit=self.settings.aspects.max_aspects,
            stationary_threshold=self._threshold,
        )

    def calc_cross_aspects(
        self, bodies_a: Sequence[BodyPosition], bodies_b: Sequence[BodyPosition]
    ) -> list[Aspect]:
        return calc_cross_aspects(
            bodies_a,
            bodies_b,
            self.table,
            limit=self.settings.aspects.max_aspects,
            stationary_threshold=self._threshold,
        )

    def find_patterns(
        self, bodies: Sequence[BodyPosition], aspects: Sequence[Aspect] | None = None
    ) -> list[Pattern]:
        """Detect patterns, computing the aspect set first when not supplied."""

        if aspects is None:
            aspects = self.calc_all_aspects(bodies)
        return find_patterns(bodies, aspects, limit=self.settings.aspects.max_patterns)

    def strength(self, aspect: Aspect) -> float:
        return aspect_strength(aspect, self.table)
