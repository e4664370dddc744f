"""Two-dimensional point/vector value type and its algebra."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple, Union

import numpy as np

from .errors import InvalidGeometry
from .tolerance import Tolerance, is_zero

PointLike = Union["Vec2", Sequence[float], np.ndarray]


def _div(value: float, denom: float) -> float:
    # IEEE-754 semantics: x/0 -> +-inf, 0/0 -> nan
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.divide(np.float64(value), np.float64(denom)))


@dataclass(frozen=True, order=True)
class Vec2:
    """Immutable 2D point or displacement, ordered by ``(x, y)``."""

    x: float
    y: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    def __add__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> "Vec2":
        return Vec2(-self.x, -self.y)

    def __mul__(self, factor: float) -> "Vec2":
        return Vec2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __truediv__(self, denom: float) -> "Vec2":
        return Vec2(_div(self.x, denom), _div(self.y, denom))

    def __abs__(self) -> float:
        return math.hypot(self.x, self.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __repr__(self) -> str:
        return f"Vec2({self.x!r}, {self.y!r})"

    def isclose(self, other: "Vec2", tol: Optional[Tolerance] = None) -> bool:
        """Coordinate-wise equality within the active tolerance."""

        return is_zero(self.x - other.x, tol) and is_zero(self.y - other.y, tol)

    def unit(self, tol: Optional[Tolerance] = None) -> "Vec2":
        length = abs(self)
        if is_zero(length, tol):
            raise InvalidGeometry("zero-vector", "cannot normalize the zero vector")
        return self / length

    def to_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


def as_point(value: PointLike) -> Vec2:
    """Coerce ``value`` (``Vec2``, pair or length-2 array) into a ``Vec2``."""

    if isinstance(value, Vec2):
        return value
    arr = np.asarray(value, dtype=float)
    if arr.shape != (2,):
        raise ValueError(f"coordinate must be length-2, got shape {arr.shape}")
    return Vec2(float(arr[0]), float(arr[1]))


def as_points(values: Union[Iterable[PointLike], np.ndarray]) -> List[Vec2]:
    """Coerce an iterable of points or an ``(N, 2)`` array into ``Vec2`` values."""

    if isinstance(values, np.ndarray):
        arr = np.asarray(values, dtype=float)
        if arr.size == 0:
            return []
        if arr.ndim != 2 or arr.shape[1] != 2:
            raise ValueError(f"point array must have shape (N, 2), got {arr.shape}")
        return [Vec2(float(x), float(y)) for x, y in arr]
    return [as_point(value) for value in values]


def sq(p: Vec2) -> float:
    return p.x * p.x + p.y * p.y


def norm(p: Vec2) -> float:
    return abs(p)


def dot(v: Vec2, w: Vec2) -> float:
    return v.x * w.x + v.y * w.y


def cross(v: Vec2, w: Vec2) -> float:
    return v.x * w.y - v.y * w.x


def translate(v: Vec2, p: Vec2) -> Vec2:
    return p + v


def scale(c: Vec2, factor: float, p: Vec2) -> Vec2:
    """Homothety of ``p`` with center ``c`` and ratio ``factor``."""

    return c + (p - c) * factor


def rot(p: Vec2, angle: float) -> Vec2:
    """Rotate ``p`` counter-clockwise around the origin by ``angle`` radians."""

    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    return Vec2(p.x * cos_a - p.y * sin_a, p.x * sin_a + p.y * cos_a)


def perp(p: Vec2) -> Vec2:
    return Vec2(-p.y, p.x)


def small_angle(v: Vec2, w: Vec2, tol: Optional[Tolerance] = None) -> float:
    """Unsigned angle between ``v`` and ``w`` in ``[0, pi]``."""

    if is_zero(abs(v), tol) or is_zero(abs(w), tol):
        raise InvalidGeometry("zero-vector", "angle is undefined for a zero vector")
    cos_theta = max(-1.0, min(1.0, dot(v, w) / (abs(v) * abs(w))))
    return math.acos(cos_theta)


__all__ = [
    "PointLike",
    "Vec2",
    "as_point",
    "as_points",
    "cross",
    "dot",
    "norm",
    "perp",
    "rot",
    "scale",
    "small_angle",
    "sq",
    "translate",
]
