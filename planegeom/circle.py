"""Circle constructions and circle/line/circle intersection queries."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .errors import InvalidGeometry
from .line import Line
from .logging_utils import apply_debug_logging
from .predicates import turn
from .tolerance import Tolerance, is_zero, isclose, sign
from .vector import PointLike, Vec2, as_point, cross, perp, sq

logger = logging.getLogger(__name__)

TangentPair = Tuple[Vec2, Vec2]


@dataclass(frozen=True)
class Circle:
    center: Vec2
    r: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "center", as_point(self.center))
        object.__setattr__(self, "r", float(self.r))
        if self.r < 0.0:
            raise InvalidGeometry("negative-radius", f"circle radius must be non-negative, got {self.r}")


def circum_center(a: PointLike, b: PointLike, c: PointLike, tol: Optional[Tolerance] = None) -> Vec2:
    """Center of the circle through three non-collinear points."""

    a = as_point(a)
    b = as_point(b)
    c = as_point(c)
    if turn(a, b, c, tol) == 0:
        raise InvalidGeometry("collinear", "circumcircle is undefined for collinear points")
    b = b - a
    c = c - a
    return a + perp(b * sq(c) - c * sq(b)) / cross(b, c) / 2


def circum_circle(a: PointLike, b: PointLike, c: PointLike, tol: Optional[Tolerance] = None) -> Circle:
    center = circum_center(a, b, c, tol)
    return Circle(center, abs(as_point(a) - center))


def circle_2pts_rad(p1: PointLike, p2: PointLike, r: float, tol: Optional[Tolerance] = None) -> Optional[Circle]:
    """Circle of radius ``r`` through ``p1`` and ``p2`` centered left of ``p1->p2``.

    Returns ``None`` when ``r`` is smaller than half the distance between the
    points. The other solution is obtained by swapping the points.
    """

    p1 = as_point(p1)
    p2 = as_point(p2)
    if p1.isclose(p2, tol):
        raise InvalidGeometry("coincident", "circle through two points needs distinct points")
    if sign(r - abs(p1 - p2) / 2, tol) < 0:
        return None
    h = math.sqrt(max(r * r / sq(p1 - p2) - 0.25, 0.0))
    center = Vec2(
        (p1.x + p2.x) * 0.5 + (p1.y - p2.y) * h,
        (p1.y + p2.y) * 0.5 + (p2.x - p1.x) * h,
    )
    return Circle(center, r)


def circle_line(circle: Circle, line: Line, tol: Optional[Tolerance] = None) -> Tuple[Vec2, ...]:
    """Intersections of ``circle`` and ``line`` ordered along the line direction."""

    kind = sign(circle.r - line.dist(circle.center), tol)
    if kind < 0:
        return ()
    p = line.proj(circle.center)
    if kind == 0:
        return (p,)
    h2 = max(circle.r * circle.r - line.sq_dist(circle.center), 0.0)
    h = line.v * math.sqrt(h2) / abs(line.v)
    return (p - h, p + h)


def circle_circle(c1: Circle, c2: Circle, tol: Optional[Tolerance] = None) -> Tuple[Vec2, ...]:
    """Intersections of two circles: zero, one (tangency) or two points.

    Concentric circles with different radii never meet; identical circles
    meet everywhere and raise :class:`InvalidGeometry`.
    """

    d = c2.center - c1.center
    if is_zero(abs(d), tol):
        if isclose(c1.r, c2.r, tol):
            raise InvalidGeometry("coincident-circles", "identical circles have infinitely many intersections")
        return ()
    d2 = sq(d)
    pd = (d2 + c1.r * c1.r - c2.r * c2.r) / 2
    # radius against the distance from c1.center to the radical line
    kind = sign(c1.r - abs(pd) / abs(d), tol)
    if kind < 0:
        return ()
    p = c1.center + d * pd / d2
    if kind == 0:
        return (p,)
    h2 = max(c1.r * c1.r - pd * pd / d2, 0.0)
    h = perp(d) * math.sqrt(h2 / d2)
    return (p - h, p + h)


def tangents(c1: Circle, c2: Circle, inner: bool = False, tol: Optional[Tolerance] = None) -> List[TangentPair]:
    """Common tangents of two circles as (point on ``c1``, point on ``c2``) pairs.

    ``inner`` selects the tangents crossing between the circles. A single
    pair is returned when the circles touch; identical circles raise
    :class:`InvalidGeometry`.
    """

    r1 = c1.r
    r2 = -c2.r if inner else c2.r
    d = c2.center - c1.center
    dr = r1 - r2
    d2 = sq(d)
    h2 = d2 - dr * dr
    kind = sign(abs(d) - abs(dr), tol)
    if is_zero(abs(d), tol):
        if kind == 0:
            raise InvalidGeometry("coincident-circles", "identical circles have infinitely many tangents")
        return []
    if kind < 0:
        return []
    h = math.sqrt(max(h2, 0.0))
    out: List[TangentPair] = []
    for s in ((-1,) if kind == 0 else (-1, 1)):
        v = (d * dr + perp(d) * h * s) / d2
        out.append((c1.center + v * r1, c2.center + v * r2))
    return out


apply_debug_logging(globals(), logger=logger)

__all__ = [
    "Circle",
    "TangentPair",
    "circle_2pts_rad",
    "circle_circle",
    "circle_line",
    "circum_center",
    "circum_circle",
    "tangents",
]
