"""Collect aspects across a body list or between two body lists."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from itertools import combinations, product

from ..core.bodies import BodyPosition
from .detector import (
    STATIONARY_THRESHOLD_DEG,
    Aspect,
    InvalidBodyPairError,
    calc_aspect,
)
from .table import OrbTable

__all__ = ["calc_all_aspects", "calc_cross_aspects", "check_limit"]

LOG = logging.getLogger(__name__)


def check_limit(limit: int | None) -> None:
    """Raise :class:`ValueError` unless ``limit`` is ``None`` or non-negative."""

    if limit is not None and limit < 0:
        raise ValueError(f"limit must be None or >= 0, got {limit!r}")


def _collect(
    pairs: Iterable[tuple[BodyPosition, BodyPosition]],
    table: OrbTable,
    limit: int | None,
    stationary_threshold: float,
) -> list[Aspect]:
    check_limit(limit)
    out: list[Aspect] = []
    for body_a, body_b in pairs:
        if limit is not None and len(out) >= limit:
            LOG.debug("Aspect limit %d reached; remaining pairs skipped", limit)
            break
        try:
            aspect = calc_aspect(
                body_a, body_b, table, stationary_threshold=stationary_threshold
            )
        except InvalidBodyPairError as exc:
            LOG.debug("Skipping pair: %s", exc)
            continue
        if aspect is not None:
            out.append(aspect)
    return out


def calc_all_aspects(
    bodies: Sequence[BodyPosition],
    table: OrbTable | None = None,
    *,
    limit: int | None = None,
    stationary_threshold: float = STATIONARY_THRESHOLD_DEG,
) -> list[Aspect]:
    """Return every aspect between unordered pairs of ``bodies``.

    Pairs are visited as ``(i, j)`` with ``i < j`` in input order and results
    keep that order. When ``limit`` is given the scan stops silently once
    ``limit`` aspects have been collected; ``None`` returns the full set.
    """

    resolved = table if table is not None else OrbTable()
    return _collect(combinations(bodies, 2), resolved, limit, stationary_threshold)


def calc_cross_aspects(
    bodies_a: Sequence[BodyPosition],
    bodies_b: Sequence[BodyPosition],
    table: OrbTable | None = None,
    *,
    limit: int | None = None,
    stationary_threshold: float = STATIONARY_THRESHOLD_DEG,
) -> list[Aspect]:
    """Return aspects between every body of ``bodies_a`` and every body of ``bodies_b``.

    Typical use is transiting bodies (``bodies_a``) against a natal chart
    (``bodies_b``). Each result's ``body_a`` comes from the first list. Pairs
    sharing an identifier are skipped, so a transiting Sun never aspects the
    natal Sun. No deduplication is done; ``limit`` behaves as in
    :func:`calc_all_aspects`.
    """

    resolved = table if table is not None else OrbTable()
    return _collect(product(bodies_a, bodies_b), resolved, limit, stationary_threshold)
