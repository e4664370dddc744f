"""Lines in direction/offset form: ``p`` is on the line iff ``cross(v, p) == c``."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .errors import InvalidGeometry
from .tolerance import Tolerance, is_zero, sign
from .vector import PointLike, Vec2, as_point, cross, dot, perp, sq


@dataclass(frozen=True)
class Line:
    """Oriented line with direction ``v`` and offset ``c``."""

    v: Vec2
    c: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "v", as_point(self.v))
        object.__setattr__(self, "c", float(self.c))
        if is_zero(abs(self.v)):
            raise InvalidGeometry("zero-direction", "line direction must be non-zero")

    @classmethod
    def through(cls, p: PointLike, q: PointLike) -> "Line":
        """Line from ``p`` towards ``q``."""

        p = as_point(p)
        q = as_point(q)
        v = q - p
        if is_zero(abs(v)):
            raise InvalidGeometry("zero-direction", f"cannot build a line through coincident points {p!r}")
        return cls(v, cross(v, p))

    @classmethod
    def from_equation(cls, a: float, b: float, c: float) -> "Line":
        """Line of points satisfying ``a*x + b*y == c``."""

        return cls(Vec2(b, -a), c)

    def side(self, p: Vec2) -> float:
        """Positive left of the direction, negative right, zero on the line."""

        return cross(self.v, p) - self.c

    def dist(self, p: Vec2) -> float:
        return abs(self.side(p)) / abs(self.v)

    def sq_dist(self, p: Vec2) -> float:
        s = self.side(p)
        return s * s / sq(self.v)

    def perp_through(self, p: Vec2) -> "Line":
        return Line.through(p, p + perp(self.v))

    def cmp_proj(self, p: Vec2, q: Vec2, tol: Optional[Tolerance] = None) -> bool:
        """``True`` if ``p`` projects strictly before ``q`` along the direction."""

        return sign((dot(self.v, q) - dot(self.v, p)) / abs(self.v), tol) > 0

    def translate(self, t: Vec2) -> "Line":
        return Line(self.v, self.c + cross(self.v, t))

    def shift_left(self, distance: float) -> "Line":
        return Line(self.v, self.c + distance * abs(self.v))

    def proj(self, p: Vec2) -> Vec2:
        return p - perp(self.v) * self.side(p) / sq(self.v)

    def refl(self, p: Vec2) -> Vec2:
        return p - perp(self.v) * 2 * self.side(p) / sq(self.v)

    def anchor(self) -> Vec2:
        """Point of the line closest to the origin."""

        return perp(self.v) * self.c / sq(self.v)

    def contains(self, p: Vec2, tol: Optional[Tolerance] = None) -> bool:
        return is_zero(self.dist(p), tol)


def _direction_sine(l1: Line, l2: Line) -> float:
    return cross(l1.v, l2.v) / (abs(l1.v) * abs(l2.v))


def are_parallel(l1: Line, l2: Line, tol: Optional[Tolerance] = None) -> bool:
    return is_zero(_direction_sine(l1, l2), tol)


def are_same(l1: Line, l2: Line, tol: Optional[Tolerance] = None) -> bool:
    return are_parallel(l1, l2, tol) and l2.contains(l1.anchor(), tol)


def inter(l1: Line, l2: Line, tol: Optional[Tolerance] = None) -> Optional[Vec2]:
    """Unique intersection point, or ``None`` for parallel or identical lines."""

    if are_parallel(l1, l2, tol):
        return None
    d = cross(l1.v, l2.v)
    return (l2.v * l1.c - l1.v * l2.c) / d


def int_bisector(l1: Line, l2: Line, interior: bool = True, tol: Optional[Tolerance] = None) -> Line:
    """Bisector of the angle between ``l1`` and ``l2``.

    With ``interior`` the bisector runs between the two direction vectors,
    otherwise it is the perpendicular (exterior) bisector.
    """

    if are_parallel(l1, l2, tol):
        raise InvalidGeometry("parallel", "bisector is undefined for parallel lines")
    s = 1.0 if interior else -1.0
    n1 = abs(l1.v)
    n2 = abs(l2.v)
    return Line(l2.v / n2 + l1.v * s / n1, l2.c / n2 + l1.c * s / n1)


__all__ = ["Line", "are_parallel", "are_same", "int_bisector", "inter"]
