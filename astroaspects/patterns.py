"""Multi-body aspect pattern detection (grand trines, T-squares, stelliums)."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Dict, FrozenSet, Literal, Set, Tuple

from .aspects.builder import check_limit
from .aspects.detector import Aspect
from .core.bodies import SIGN_NAMES, BodyPosition, sign_element, sign_name

__all__ = [
    "IMPLEMENTED_PATTERNS",
    "Pattern",
    "PatternKind",
    "RESERVED_PATTERNS",
    "find_grand_trines",
    "find_patterns",
    "find_stelliums",
    "find_t_squares",
]

LOG = logging.getLogger(__name__)

PatternKind = Literal[
    "grand_trine",
    "t_square",
    "stellium",
    "grand_cross",
    "yod",
    "kite",
    "mystic_rectangle",
]

IMPLEMENTED_PATTERNS: Tuple[str, ...] = ("grand_trine", "t_square", "stellium")
RESERVED_PATTERNS: Tuple[str, ...] = ("grand_cross", "yod", "kite", "mystic_rectangle")

STELLIUM_MIN_BODIES = 3

_Edges = Dict[FrozenSet[str], Set[str]]


@dataclass(frozen=True)
class Pattern:
    """A configuration formed by several bodies.

    ``bodies`` holds identifiers in discovery order. ``element`` is set for
    stelliums and for grand trines whose three bodies share an element;
    ``apex`` names the body squaring both ends of a T-square.
    """

    kind: PatternKind
    bodies: Tuple[str, ...]
    description: str
    element: str | None = None
    apex: str | None = None

    def as_mapping(self) -> dict[str, object]:
        return {
            "pattern": self.kind,
            "bodies": list(self.bodies),
            "description": self.description,
            "element": self.element,
            "apex": self.apex,
        }


def _edge_lookup(aspects: Sequence[Aspect]) -> _Edges:
    edges: _Edges = {}
    for aspect in aspects:
        edges.setdefault(frozenset(aspect.bodies), set()).add(aspect.family)
    return edges


def _has_edge(edges: _Edges, a: str, b: str, family: str) -> bool:
    return family in edges.get(frozenset((a, b)), ())


def find_grand_trines(
    bodies: Sequence[BodyPosition], aspects: Sequence[Aspect]
) -> list[Pattern]:
    """Return closed trine triangles, each reported once."""

    by_id = {pos.body: pos for pos in bodies}
    edges = _edge_lookup(aspects)
    trines = [a for a in aspects if a.family == "trine"]
    seen: Set[FrozenSet[str]] = set()
    out: list[Pattern] = []

    for i, first in enumerate(trines):
        for second in trines[i + 1 :]:
            shared = set(first.bodies) & set(second.bodies)
            if len(shared) != 1:
                continue
            (pivot,) = shared
            third = second.other(pivot)
            closing = first.other(pivot)
            if third is None or closing is None:
                continue
            if not _has_edge(edges, closing, third, "trine"):
                continue
            key = frozenset((first.body_a, first.body_b, third))
            if key in seen:
                continue
            seen.add(key)
            members = (first.body_a, first.body_b, third)
            names = ", ".join(_name(by_id, body) for body in members)
            out.append(
                Pattern(
                    kind="grand_trine",
                    bodies=members,
                    description=f"Grand Trine: {names}",
                    element=_shared_element(by_id, members),
                )
            )
    return out


def find_t_squares(
    bodies: Sequence[BodyPosition], aspects: Sequence[Aspect]
) -> list[Pattern]:
    """Return oppositions whose two ends are both square to a third body."""

    by_id = {pos.body: pos for pos in bodies}
    edges = _edge_lookup(aspects)
    squares = [a for a in aspects if a.family == "square"]
    seen: Set[Tuple[FrozenSet[str], str]] = set()
    out: list[Pattern] = []

    for opposition in (a for a in aspects if a.family == "opposition"):
        end_a, end_b = opposition.bodies
        for square in squares:
            if square.involves(end_a):
                anchor, remaining = end_a, end_b
            elif square.involves(end_b):
                anchor, remaining = end_b, end_a
            else:
                continue
            apex = square.other(anchor)
            if apex is None or apex in (end_a, end_b):
                continue
            if not _has_edge(edges, apex, remaining, "square"):
                continue
            key = (frozenset((end_a, end_b)), apex)
            if key in seen:
                continue
            seen.add(key)
            out.append(
                Pattern(
                    kind="t_square",
                    bodies=(end_a, end_b, apex),
                    description=(
                        f"T-Square: {_name(by_id, end_a)} opp {_name(by_id, end_b)}, "
                        f"both square {_name(by_id, apex)}"
                    ),
                    apex=apex,
                )
            )
    return out


def find_stelliums(bodies: Sequence[BodyPosition]) -> list[Pattern]:
    """Return one stellium per sign holding at least three bodies."""

    out: list[Pattern] = []
    for sign in range(len(SIGN_NAMES)):
        members = tuple(pos.body for pos in bodies if pos.sign == sign)
        if len(members) < STELLIUM_MIN_BODIES:
            continue
        out.append(
            Pattern(
                kind="stellium",
                bodies=members,
                description=f"Stellium in {sign_name(sign)} ({len(members)} planets)",
                element=sign_element(sign),
            )
        )
    return out


def find_patterns(
    bodies: Sequence[BodyPosition],
    aspects: Sequence[Aspect],
    *,
    limit: int | None = None,
) -> list[Pattern]:
    """Run every pattern scan and return the results as one flat list.

    Grand trines come first, then T-squares, then stelliums. ``aspects`` is
    expected to come from :func:`~astroaspects.aspects.calc_all_aspects` over
    the same ``bodies``. When ``limit`` is given the list is cut silently at
    that length; a negative ``limit`` raises :class:`ValueError`.
    """

    check_limit(limit)
    found = [
        *find_grand_trines(bodies, aspects),
        *find_t_squares(bodies, aspects),
        *find_stelliums(bodies),
    ]
    if limit is not None and len(found) > limit:
        LOG.debug("Pattern limit %d reached; %d patterns dropped", limit, len(found) - limit)
        found = found[:limit]
    return found


def _name(by_id: Dict[str, BodyPosition], body: str) -> str:
    pos = by_id.get(body)
    return pos.name if pos is not None else body


def _shared_element(by_id: Dict[str, BodyPosition], members: Tuple[str, ...]) -> str | None:
    elements = {by_id[body].element for body in members if body in by_id}
    if len(elements) == 1 and all(body in by_id for body in members):
        return elements.pop()
    return None
