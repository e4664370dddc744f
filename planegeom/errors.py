from __future__ import annotations


class GeometryError(Exception):
    """Base class for errors raised by :mod:`planegeom`."""


class InvalidGeometry(GeometryError, ValueError):
    """Raised when a construction receives a degenerate configuration."""

    def __init__(self, kind: str, message: str):
        super().__init__(message)
        self.kind = kind
