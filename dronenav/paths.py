"""Whole-path measures and smoothing of planned paths."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Sequence

from dronenav.bezier import three_point_bezier
from dronenav.common import Quaternion
from dronenav.geometry import Point, distance, middle_point


@dataclass(frozen=True)
class Pose:
    """A stamped pose: position, orientation and the frame it is given in."""

    position: Point = field(default_factory=Point)
    orientation: Quaternion = field(default_factory=Quaternion)
    frame_id: str = ""
    stamp: float = 0.0


@dataclass(frozen=True)
class ColorRGBA:
    """A colour with components in [0, 1]."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 1.0


def spectral_color(hue: float, alpha: float = 1.0) -> ColorRGBA:
    """Colour on a spectrum running from blue (0.0) over green to red (1.0)."""
    return ColorRGBA(
        r=max(0.0, 2 * hue - 1),
        g=1.0 - 2.0 * abs(hue - 0.5),
        b=max(0.0, 1.0 - 2 * hue),
        a=alpha,
    )


def has_same_yaw_and_altitude(a: Pose, b: Pose) -> bool:
    """Whether two poses share both altitude and yaw orientation."""
    return (
        a.orientation.z == b.orientation.z
        and a.orientation.w == b.orientation.w
        and a.position.z == b.position.z
    )


def _segments(poses: Sequence[Pose]):
    return zip(poses, poses[1:])


def path_length(poses: Sequence[Pose]) -> float:
    """Total length of the polyline through the poses."""
    return sum(distance(a.position, b.position) for a, b in _segments(poses))


def filter_path_corners(poses: Sequence[Pose]) -> list[Pose]:
    """The first and last pose and every pose where the direction changes."""
    if not poses:
        return []
    corners = [poses[0]]
    for last, curr, nxt in zip(poses, poses[1:], poses[2:]):
        p0, p1, p2 = last.position, curr.position, nxt.position
        straight = (
            (p2.x - p1.x) == (p1.x - p0.x)
            and (p2.y - p1.y) == (p1.y - p0.y)
            and (p2.z - p1.z) == (p1.z - p0.z)
        )
        if not straight:
            corners.append(curr)
    corners.append(poses[-1])
    return corners


def path_kinetic_energy(poses: Sequence[Pose]) -> float:
    """Sum of the changes in squared step velocity along the path, per axis."""
    if len(poses) < 3:
        return 0.0
    velocities = [
        (b.position.x - a.position.x, b.position.y - a.position.y, b.position.z - a.position.z)
        for a, b in _segments(poses)
    ]
    return sum(
        abs(v * v - u * u)
        for prev, curr in zip(velocities, velocities[1:])
        for u, v in zip(prev, curr)
    )


def path_energy(poses: Sequence[Pose], up_penalty: float) -> float:
    """Path length plus ``up_penalty`` times every gain in altitude."""
    return sum(
        distance(a.position, b.position)
        + max(0.0, up_penalty * (b.position.z - a.position.z))
        for a, b in _segments(poses)
    )


def smooth_path(poses: Sequence[Pose]) -> list[Pose]:
    """Path whose corners are replaced by quadratic Bezier curves.

    Each corner is rounded between the midpoints of its two edges. The new
    poses take their orientation and frame from the first pose.
    """
    if len(poses) < 3:
        return list(poses)
    template = poses[0]
    smoothed = [poses[0]]
    for a, b, c in zip(poses, poses[1:], poses[2:]):
        p1 = b.position
        p0 = middle_point(a.position, p1)
        p2 = middle_point(p1, c.position)
        smoothed.extend(
            replace(template, position=point)
            for point in three_point_bezier(p0, p1, p2)
        )
    smoothed.append(poses[-1])
    return smoothed


def three_point_bezier_path(poses: Sequence[Pose], num_steps: int = 10) -> list[Pose]:
    """Bezier curve from the first to the third of exactly three poses.

    Raises ValueError if the path does not hold exactly three poses.
    """
    if len(poses) != 3:
        raise ValueError(f"path must hold 3 poses, not {len(poses)}")
    template = poses[0]
    points = three_point_bezier(
        poses[0].position, poses[1].position, poses[2].position, num_steps
    )
    return [replace(template, position=point) for point in points]