"""Point arithmetic and small numeric helpers for path planning."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, TypeVar

P = TypeVar("P")


@dataclass(frozen=True)
class Point:
    """A point in 3D space supporting vector arithmetic."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Point:
        return Point(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Point:
        return Point(self.x / scalar, self.y / scalar, self.z / scalar)

    def __neg__(self) -> Point:
        return Point(-self.x, -self.y, -self.z)


def _like(template: Any, x: float, y: float, z: float) -> Any:
    """Build a point of the same type as ``template``."""
    return type(template)(x, y, z)


def squared(x: float) -> float:
    """Square of a number."""
    return x * x


def interpolate(start: float, end: float, ratio: float) -> float:
    """Value between ``start`` (ratio 0) and ``end`` (ratio 1)."""
    return start + (end - start) * ratio


def interpolate_points(p1: P, p2: P, ratio: float) -> P:
    """Point between ``p1`` (ratio 0) and ``p2`` (ratio 1), of the type of ``p1``."""
    return _like(
        p1,
        interpolate(p1.x, p2.x, ratio),
        interpolate(p1.y, p2.y, ratio),
        interpolate(p1.z, p2.z, ratio),
    )


def middle_point(p1: P, p2: P) -> P:
    """Midpoint of the segment between ``p1`` and ``p2``."""
    return interpolate_points(p1, p2, 0.5)


def add_points(p1: P, p2: Any) -> P:
    """Coordinate-wise sum, of the type of ``p1``."""
    return _like(p1, p1.x + p2.x, p1.y + p2.y, p1.z + p2.z)


def subtract_points(p1: P, p2: Any) -> P:
    """Coordinate-wise difference ``p1 - p2``, of the type of ``p1``."""
    return _like(p1, p1.x - p2.x, p1.y - p2.y, p1.z - p2.z)


def scale_point(point: P, scalar: float) -> P:
    """The point with every coordinate multiplied by ``scalar``."""
    return _like(point, scalar * point.x, scalar * point.y, scalar * point.z)


def norm(point: Any) -> float:
    """Euclidean length of a point seen as a vector."""
    return math.sqrt(squared(point.x) + squared(point.y) + squared(point.z))


def distance(p1: Any, p2: Any) -> float:
    """Euclidean distance between two points."""
    return math.sqrt(
        squared(p2.x - p1.x) + squared(p2.y - p1.y) + squared(p2.z - p1.z)
    )


def angle_to_range(angle: float) -> float:
    """Wrap an angle in radians into [-pi, pi)."""
    angle += math.pi
    angle -= (2 * math.pi) * math.floor(angle / (2 * math.pi))
    angle -= math.pi
    return angle


def posterior(p: float, prior: float) -> float:
    """Combine two independent probabilities of the same event."""
    prob_obstacle = p * prior
    prob_free = (1 - p) * (1 - prior)
    return prob_obstacle / (prob_obstacle + prob_free + 0.0001)