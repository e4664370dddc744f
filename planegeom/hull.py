"""Convex hull by Andrew's monotone chain."""

from __future__ import annotations

import logging
from typing import Callable, Iterable, List, Optional, Union

import numpy as np

from .logging_utils import apply_debug_logging
from .predicates import turn
from .tolerance import Tolerance, sign
from .vector import PointLike, Vec2, as_points

logger = logging.getLogger(__name__)


def _sorted_distinct(points: List[Vec2], tol: Optional[Tolerance]) -> List[Vec2]:
    ordered: List[Vec2] = []
    for p in sorted(points):
        # near-equal points share an x window but need not be adjacent after sorting
        j = len(ordered) - 1
        while j >= 0 and sign(p.x - ordered[j].x, tol) == 0:
            if ordered[j].isclose(p, tol):
                break
            j -= 1
        else:
            ordered.append(p)
    return ordered


def _chain(ordered: List[Vec2], should_pop: Callable[[Vec2, Vec2, Vec2], bool]) -> List[Vec2]:
    hull: List[Vec2] = []
    for p in ordered:
        while len(hull) >= 2 and should_pop(hull[-2], hull[-1], p):
            hull.pop()
        hull.append(p)
    taken = len(hull) - 1
    for p in reversed(ordered[:-1]):
        # never pop into the lower chain
        while len(hull) >= taken + 2 and should_pop(hull[-2], hull[-1], p):
            hull.pop()
        hull.append(p)
    hull.pop()
    return hull


def monotone_chain(
    points: Union[Iterable[PointLike], np.ndarray],
    keep_collinear: bool = False,
    tol: Optional[Tolerance] = None,
) -> List[Vec2]:
    """Convex hull of ``points`` in counter-clockwise order.

    The result starts at the lexicographically smallest point. Near-equal
    input points are merged. Points lying on a hull edge are dropped unless
    ``keep_collinear`` is set. Fewer than three distinct points are returned
    as they are, sorted; for collinear input the two extreme points are
    returned (every distinct point with ``keep_collinear``).
    """

    ordered = _sorted_distinct(as_points(points), tol)
    logger.debug("monotone chain: %d distinct point(s)", len(ordered))
    if len(ordered) < 3:
        return ordered

    if keep_collinear:
        first, last = ordered[0], ordered[-1]
        if all(turn(first, last, p, tol) == 0 for p in ordered):
            logger.debug("monotone chain: collinear input kept as a path")
            return ordered

        def should_pop(a: Vec2, b: Vec2, c: Vec2) -> bool:
            return turn(a, b, c, tol) < 0

    else:

        def should_pop(a: Vec2, b: Vec2, c: Vec2) -> bool:
            return turn(a, b, c, tol) <= 0

    hull = _chain(ordered, should_pop)
    logger.debug("monotone chain: %d hull vertex(es)", len(hull))
    return hull


apply_debug_logging(globals(), logger=logger)

__all__ = ["monotone_chain"]
