"""Polygon measures and containment tests.

A polygon is a sequence of vertices whose last vertex connects back to the
first. Both windings are accepted; only :func:`signed_area` depends on it.
"""

from __future__ import annotations

from typing import Iterable, Optional, Tuple, Union

import numpy as np

from .errors import InvalidGeometry
from .predicates import on_segment, orient, turn
from .tolerance import Tolerance, is_zero
from .vector import PointLike, Vec2, as_point, as_points

PolygonLike = Union[Iterable[PointLike], np.ndarray]


def _coords(poly: PolygonLike) -> Tuple[np.ndarray, np.ndarray]:
    points = as_points(poly)
    if not points:
        return np.zeros(0), np.zeros(0)
    arr = np.array([(p.x, p.y) for p in points], dtype=float)
    return arr[:, 0], arr[:, 1]


def _shoelace(x: np.ndarray, y: np.ndarray) -> float:
    if x.size < 3:
        return 0.0
    return 0.5 * float(np.dot(x, np.roll(y, -1)) - np.dot(np.roll(x, -1), y))


def is_convex(poly: PolygonLike, tol: Optional[Tolerance] = None) -> bool:
    """``True`` unless the boundary turns both left and right somewhere.

    Collinear vertex triples are ignored.
    """

    points = as_points(poly)
    n = len(points)
    has_pos = has_neg = False
    for i in range(n):
        o = turn(points[i], points[(i + 1) % n], points[(i + 2) % n], tol)
        if o > 0:
            has_pos = True
        elif o < 0:
            has_neg = True
    return not (has_pos and has_neg)


def area_triangle(a: PointLike, b: PointLike, c: PointLike) -> float:
    return abs(orient(as_point(a), as_point(b), as_point(c))) / 2.0


def signed_area(poly: PolygonLike) -> float:
    """Shoelace area, positive for counter-clockwise vertex order."""

    return _shoelace(*_coords(poly))


def area_polygon(poly: PolygonLike) -> float:
    return abs(signed_area(poly))


def centroid_polygon(poly: PolygonLike, tol: Optional[Tolerance] = None) -> Vec2:
    """Center of mass of the polygon's area."""

    x, y = _coords(poly)
    area = _shoelace(x, y)
    # compare area relative to the squared extent
    extent = float(np.hypot(np.ptp(x), np.ptp(y))) if x.size else 0.0
    if x.size < 3 or is_zero(extent, tol) or is_zero(area / (extent * extent), tol):
        raise InvalidGeometry("zero-area", "centroid is undefined for a degenerate polygon")
    xn = np.roll(x, -1)
    yn = np.roll(y, -1)
    w = x * yn - xn * y
    scale = 6.0 * area
    return Vec2(float(np.dot(x + xn, w)) / scale, float(np.dot(y + yn, w)) / scale)


def point_in_polygon(poly: PolygonLike, q: PointLike) -> bool:
    """Ray-casting parity test with a rightward ray from ``q``.

    Each edge covers the half-open band ``min(y) <= q.y < max(y)``, so
    vertices are never counted twice. Boundary points follow from that
    band: points on bottom or left edges report inside, points on top or
    right edges report outside. Use :func:`on_polygon_boundary` to detect
    the boundary explicitly.
    """

    points = as_points(poly)
    q = as_point(q)
    inside = False
    n = len(points)
    for i in range(n):
        a = points[i]
        b = points[(i + 1) % n]
        if (a.y <= q.y < b.y) or (b.y <= q.y < a.y):
            x_cross = a.x + (b.x - a.x) * (q.y - a.y) / (b.y - a.y)
            if q.x < x_cross:
                inside = not inside
    return inside


def on_polygon_boundary(poly: PolygonLike, q: PointLike, tol: Optional[Tolerance] = None) -> bool:
    points = as_points(poly)
    q = as_point(q)
    n = len(points)
    return any(on_segment(points[i], points[(i + 1) % n], q, tol) for i in range(n))


__all__ = [
    "PolygonLike",
    "area_polygon",
    "area_triangle",
    "centroid_polygon",
    "is_convex",
    "on_polygon_boundary",
    "point_in_polygon",
    "signed_area",
]
