"""Quadratic Bezier curves for smooth trajectories."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, TypeVar

from dronenav.geometry import distance, interpolate_points, middle_point

T = TypeVar("T")


@dataclass(frozen=True)
class BezierSegment:
    """A quadratic Bezier segment from ``prev`` to ``next`` via ``ctrl``."""

    prev: Any
    ctrl: Any
    next: Any
    duration: float


def quadratic_bezier(p0: T, p1: T, p2: T, t: float) -> T:
    """Point on the quadratic Bezier curve at ``t`` in [0, 1]."""
    return ((1 - t) * (1 - t) * p0) + 2 * ((1 - t) * t * p1) + (t * t * p2)


def quadratic_bezier_acc(p0: T, p1: T, p2: T, duration: float = 1.0) -> T:
    """Second derivative of the quadratic Bezier curve, which is constant in t."""
    return 2 * (p2 - 2 * p1 + p0) / duration * duration


def three_point_bezier(p0: Any, p1: Any, p2: Any, num_steps: int = 10) -> list:
    """``num_steps + 1`` points of the curve from ``p0`` to ``p2`` with control ``p1``."""
    make = type(p0)
    return [
        make(
            quadratic_bezier(p0.x, p1.x, p2.x, i / num_steps),
            quadratic_bezier(p0.y, p1.y, p2.y, i / num_steps),
            quadratic_bezier(p0.z, p1.z, p2.z, i / num_steps),
        )
        for i in range(num_steps + 1)
    ]


def bezier_from_two_points(
    start: Any, end: Any, acc: float, max_vel: float
) -> list[BezierSegment]:
    """Three segments: accelerate to ``max_vel``, cruise, decelerate to a halt."""
    total_dist = distance(start, end)

    acc_duration = max_vel / acc
    acc_dist = acc_duration * max_vel / 2
    # The acceleration phase cannot take more than half of the way.
    if total_dist == 0.0:
        acc_part = 0.5
    else:
        acc_part = min(0.5, acc_dist / total_dist)

    middle = middle_point(start, end)
    max_vel_point = interpolate_points(start, end, acc_part)
    decel_point = interpolate_points(end, start, acc_part)
    max_vel_duration = distance(max_vel_point, decel_point) / max_vel

    return [
        BezierSegment(start, start, max_vel_point, acc_duration),
        BezierSegment(max_vel_point, middle, decel_point, max_vel_duration),
        BezierSegment(decel_point, end, end, acc_duration),
    ]


def bezier_from_two_speeds(
    start: Any, end: Any, start_speed: float, end_speed: float
) -> BezierSegment:
    """Segment whose control point makes it go from ``start_speed`` to ``end_speed``."""
    total_speed = start_speed + end_speed
    if total_speed == 0:
        raise ValueError("start and end speed must not add up to zero")
    avg_speed = total_speed / 2.0
    duration = distance(start, end) / avg_speed
    ctrl = interpolate_points(start, end, start_speed / total_speed)
    return BezierSegment(start, ctrl, end, duration)


def duration_to_reach(p0: Any, p1: Any, acc: float) -> float:
    """Time to get from ``p0`` to ``p1`` from standstill at constant acceleration."""
    return math.sqrt(2 * distance(p0, p1) / acc)


def acceleration_magnitude(p0: Any, p1: Any, p2: Any, duration: float) -> float:
    """Magnitude of the constant acceleration along a quadratic Bezier segment."""
    dx = quadratic_bezier_acc(p0.x, p1.x, p2.x)
    dy = quadratic_bezier_acc(p0.y, p1.y, p2.y)
    dz = quadratic_bezier_acc(p0.z, p1.z, p2.z)
    return math.sqrt(dx * dx + dy * dy + dz * dz) / duration * duration