"""Orientation predicate and the containment tests built on it.

Classifications are scale-free: ``turn`` compares the sine of the angle at
``a`` with the tolerance, the same quantity ``line.are_parallel`` uses, and
``in_disk``/``is_perp`` compare the cosine.
"""

from __future__ import annotations

from typing import Optional

from .errors import InvalidGeometry
from .tolerance import Tolerance, is_zero, sign
from .vector import Vec2, cross, dot


def _angular_sign(value: float, len_a: float, len_b: float, tol: Optional[Tolerance]) -> int:
    # a zero-length side makes the angle undefined; report it as degenerate
    if is_zero(len_a, tol) or is_zero(len_b, tol):
        return 0
    return sign(value / (len_a * len_b), tol)


def orient(a: Vec2, b: Vec2, c: Vec2) -> float:
    """Twice the signed area of ``a, b, c``; positive for a counter-clockwise turn."""

    return cross(b - a, c - a)


def turn(a: Vec2, b: Vec2, c: Vec2, tol: Optional[Tolerance] = None) -> int:
    """Orientation of ``a, b, c`` as -1 (clockwise), 0 (collinear) or 1."""

    return _angular_sign(orient(a, b, c), abs(b - a), abs(c - a), tol)


def in_angle(a: Vec2, b: Vec2, c: Vec2, x: Vec2, tol: Optional[Tolerance] = None) -> bool:
    """Return ``True`` if ray ``a->x`` lies inside the short sector ``b, a, c``."""

    side = turn(a, b, c, tol)
    if side == 0:
        raise InvalidGeometry("collinear", "angle sector is undefined for collinear points")
    if side < 0:
        b, c = c, b
    return turn(a, b, x, tol) >= 0 and turn(a, c, x, tol) <= 0


def in_disk(a: Vec2, b: Vec2, p: Vec2, tol: Optional[Tolerance] = None) -> bool:
    """Return ``True`` if ``p`` lies in the closed disk of diameter ``ab``."""

    return _angular_sign(dot(a - p, b - p), abs(a - p), abs(b - p), tol) <= 0


def on_segment(a: Vec2, b: Vec2, p: Vec2, tol: Optional[Tolerance] = None) -> bool:
    return turn(a, b, p, tol) == 0 and in_disk(a, b, p, tol)


def is_perp(v: Vec2, w: Vec2, tol: Optional[Tolerance] = None) -> bool:
    return _angular_sign(dot(v, w), abs(v), abs(w), tol) == 0


__all__ = ["in_angle", "in_disk", "is_perp", "on_segment", "orient", "turn"]
