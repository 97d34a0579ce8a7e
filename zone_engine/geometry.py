"""Immutable point/rect value types shared by the zone engine."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

Geometry = Tuple[float, float, float, float]


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


ORIGIN = Point(0.0, 0.0)


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle; the origin corner depends on the caller's space."""

    x: float
    y: float
    width: float
    height: float

    @classmethod
    def from_tuple(cls, geometry: Geometry) -> "Rect":
        x, y, width, height = geometry
        return cls(float(x), float(y), float(width), float(height))

    def as_tuple(self) -> Geometry:
        return (self.x, self.y, self.width, self.height)

    @property
    def min_x(self) -> float:
        return min(self.x, self.x + self.width)

    @property
    def max_x(self) -> float:
        return max(self.x, self.x + self.width)

    @property
    def min_y(self) -> float:
        return min(self.y, self.y + self.height)

    @property
    def max_y(self) -> float:
        return max(self.y, self.y + self.height)

    @property
    def is_empty(self) -> bool:
        return self.width == 0 or self.height == 0

    def contains(self, point: Point) -> bool:
        """Closed on the min edges, open on the max edges; empty rects contain nothing."""
        if self.is_empty:
            return False
        return self.min_x <= point.x < self.max_x and self.min_y <= point.y < self.max_y

    def inset_by(self, dx: float, dy: float) -> "Rect":
        """Shrink by ``dx``/``dy`` on each side; a collapsed axis keeps its centre."""
        x, width = _inset_axis(self.min_x, abs(self.width), dx)
        y, height = _inset_axis(self.min_y, abs(self.height), dy)
        return Rect(x, y, width, height)


def _inset_axis(origin: float, length: float, delta: float) -> Tuple[float, float]:
    new_length = length - 2.0 * delta
    if new_length < 0.0:
        return origin + length / 2.0, 0.0
    return origin + delta, new_length
