"""Epsilon-aware comparisons shared by every predicate."""

from __future__ import annotations

import copy
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Optional


@dataclass
class Tolerance:
    """Absolute tolerance used when classifying computed values."""

    eps: float = 1e-8

    def __post_init__(self) -> None:
        self.eps = float(self.eps)
        if self.eps < 0.0:
            raise ValueError("tolerance must be non-negative")


_TOLERANCE = Tolerance()


def get_tolerance() -> Tolerance:
    return copy.deepcopy(_TOLERANCE)


def set_tolerance(tol: Tolerance) -> None:
    global _TOLERANCE
    _TOLERANCE = copy.deepcopy(tol)


@contextmanager
def using_tolerance(eps: float) -> Iterator[Tolerance]:
    """Temporarily replace the default tolerance."""

    previous = get_tolerance()
    set_tolerance(Tolerance(eps))
    try:
        yield get_tolerance()
    finally:
        set_tolerance(previous)


def _eps(tol: Optional[Tolerance]) -> float:
    return (tol or _TOLERANCE).eps


def sign(value: float, tol: Optional[Tolerance] = None) -> int:
    """Return -1, 0 or 1, treating ``|value| <= eps`` as zero."""

    eps = _eps(tol)
    if value > eps:
        return 1
    if value < -eps:
        return -1
    return 0


def is_zero(value: float, tol: Optional[Tolerance] = None) -> bool:
    return sign(value, tol) == 0


def isclose(a: float, b: float, tol: Optional[Tolerance] = None) -> bool:
    return sign(a - b, tol) == 0


__all__ = [
    "Tolerance",
    "get_tolerance",
    "isclose",
    "is_zero",
    "set_tolerance",
    "sign",
    "using_tolerance",
]
