"""Segment intersection and distance queries; a segment is an endpoint pair."""

from __future__ import annotations

from typing import Optional

from .line import Line
from .predicates import on_segment, orient, turn
from .tolerance import Tolerance
from .vector import Vec2


def proper_inter(a: Vec2, b: Vec2, c: Vec2, d: Vec2, tol: Optional[Tolerance] = None) -> Optional[Vec2]:
    """Crossing point of ``ab`` and ``cd`` when it is interior to both segments."""

    oa = orient(c, d, a)
    ob = orient(c, d, b)
    oc = orient(a, b, c)
    od = orient(a, b, d)
    if turn(c, d, a, tol) * turn(c, d, b, tol) < 0 and turn(a, b, c, tol) * turn(a, b, d, tol) < 0:
        return (a * ob - b * oa) / (ob - oa)
    return None


def inters(a: Vec2, b: Vec2, c: Vec2, d: Vec2, tol: Optional[Tolerance] = None) -> bool:
    """``True`` if the closed segments ``ab`` and ``cd`` share at least one point."""

    if proper_inter(a, b, c, d, tol) is not None:
        return True
    return (
        on_segment(c, d, a, tol)
        or on_segment(c, d, b, tol)
        or on_segment(a, b, c, tol)
        or on_segment(a, b, d, tol)
    )


def seg_point(a: Vec2, b: Vec2, p: Vec2, tol: Optional[Tolerance] = None) -> float:
    """Distance from ``p`` to the segment ``ab``."""

    if not a.isclose(b, tol):
        support = Line.through(a, b)
        if support.cmp_proj(a, p, tol) and support.cmp_proj(p, b, tol):
            return support.dist(p)
    return min(abs(p - a), abs(p - b))


def seg_seg(a: Vec2, b: Vec2, c: Vec2, d: Vec2, tol: Optional[Tolerance] = None) -> float:
    """Distance between the segments ``ab`` and ``cd``."""

    if proper_inter(a, b, c, d, tol) is not None:
        return 0.0
    return min(
        seg_point(a, b, c, tol),
        seg_point(a, b, d, tol),
        seg_point(c, d, a, tol),
        seg_point(c, d, b, tol),
    )


__all__ = ["inters", "proper_inter", "seg_point", "seg_seg"]
