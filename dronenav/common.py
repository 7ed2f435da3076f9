"""Polar geometry, angle helpers and setpoint messages for obstacle avoidance."""

from __future__ import annotations

import math
import time
from dataclasses import dataclass, field
from enum import Enum, IntEnum

DEG_TO_RAD = math.pi / 180.0
RAD_TO_DEG = 180.0 / math.pi

NAN = float("nan")


class MavState(IntEnum):
    """Companion process state as reported to the flight controller."""

    UNINIT = 0
    BOOT = 1
    CALIBRATING = 2
    STANDBY = 3
    ACTIVE = 4
    CRITICAL = 5
    EMERGENCY = 6
    POWEROFF = 7
    FLIGHT_TERMINATION = 8


class NavigationState(Enum):
    """Flight mode of the vehicle."""

    MISSION = "mission"
    AUTO_TAKEOFF = "auto_takeoff"
    AUTO_LAND = "auto_land"
    AUTO_RTL = "auto_rtl"
    AUTO_RTGS = "auto_rtgs"
    OFFBOARD = "offboard"
    NONE = "none"


@dataclass(frozen=True)
class Vector3:
    """A point or vector in cartesian space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vector3) -> Vector3:
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vector3:
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def norm(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)


@dataclass(frozen=True)
class Quaternion:
    """A rotation quaternion; defaults to the identity."""

    w: float = 1.0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass(frozen=True)
class PolarPoint:
    """A point given by elevation and azimuth in degrees and a radius."""

    e: float = 0.0
    z: float = 0.0
    r: float = 0.0


@dataclass(frozen=True)
class FOV:
    """Sensor field of view: current orientation and angular extents in degrees."""

    azimuth_deg: float = 0.0
    elevation_deg: float = 0.0
    h_fov_deg: float = 0.0
    v_fov_deg: float = 0.0


def _nan_vector() -> Vector3:
    return Vector3(NAN, NAN, NAN)


@dataclass(frozen=True)
class TrajectoryPoint:
    """One setpoint of a trajectory; unused fields hold NaN."""

    position: Vector3 = field(default_factory=_nan_vector)
    velocity: Vector3 = field(default_factory=_nan_vector)
    acceleration_or_force: Vector3 = field(default_factory=_nan_vector)
    yaw: float = NAN
    yaw_rate: float = NAN


@dataclass(frozen=True)
class Trajectory:
    """A waypoint trajectory of five setpoints, of which only some are valid."""

    stamp: float
    points: tuple[TrajectoryPoint, ...]
    time_horizon: tuple[float, ...] = (NAN,) * 5
    point_valid: tuple[bool, ...] = (True, False, False, False, False)
    type: int = 0  # waypoint representation


def _floor(value: float) -> float:
    # math.floor rejects inf and nan; let them propagate as floats instead.
    return float(math.floor(value)) if math.isfinite(value) else value


def wrap_angle_to_plus_minus_pi(angle: float) -> float:
    """Wrap an angle in radians into [-pi, pi)."""
    return angle - 2.0 * math.pi * _floor(angle / (2.0 * math.pi) + 0.5)


def wrap_angle_to_plus_minus_180(angle: float) -> float:
    """Wrap an angle in degrees into [-180, 180)."""
    return angle - 360.0 * _floor(angle / 360.0 + 0.5)


def point_inside_fov(fov: FOV, p_pol: PolarPoint) -> bool:
    """Return whether a polar point lies inside the field of view."""
    return (
        p_pol.z <= wrap_angle_to_plus_minus_180(fov.azimuth_deg + fov.h_fov_deg / 2.0)
        and p_pol.z >= wrap_angle_to_plus_minus_180(fov.azimuth_deg - fov.h_fov_deg / 2.0)
        and p_pol.e <= fov.elevation_deg + fov.v_fov_deg / 2.0
        and p_pol.e >= fov.elevation_deg - fov.v_fov_deg / 2.0
    )


def distance_2d_polar(p1: PolarPoint, p2: PolarPoint) -> float:
    """Euclidean distance between two points in the elevation/azimuth plane."""
    return math.hypot(p1.e - p2.e, p1.z - p2.z)


def polar_to_cartesian(p_pol: PolarPoint, pos: Vector3) -> Vector3:
    """Convert a polar point, taken relative to ``pos``, to cartesian coordinates."""
    e = p_pol.e * DEG_TO_RAD
    z = p_pol.z * DEG_TO_RAD
    return Vector3(
        pos.x + p_pol.r * math.cos(e) * math.sin(z),
        pos.y + p_pol.r * math.cos(e) * math.cos(z),
        pos.z + p_pol.r * math.sin(e),
    )


def index_angle_difference(a: float, b: float) -> float:
    """Smallest difference between two angles in degrees, allowing for a full turn."""
    return min(abs(a - b), abs(a - b - 360.0), abs(a - b + 360.0))


def histogram_index_to_polar(e: int, z: int, res: int, radius: float) -> PolarPoint:
    """Polar point at the centre of histogram cell (e, z) with the given resolution."""
    return PolarPoint(
        float(e * res + res // 2 - 90),
        float(z * res + res // 2 - 180),
        radius,
    )


def cartesian_to_polar(pos: Vector3, origin: Vector3) -> PolarPoint:
    """Polar coordinates of ``pos`` as seen from ``origin``.

    Azimuth is measured from the positive y-axis in (-180, 180], elevation
    in [-90, 90].
    """
    dx = pos.x - origin.x
    dy = pos.y - origin.y
    dz = pos.z - origin.z
    den = math.hypot(dx, dy)
    return PolarPoint(
        math.atan2(dz, den) * RAD_TO_DEG,
        math.atan2(dx, dy) * RAD_TO_DEG,
        math.sqrt(dx * dx + dy * dy + dz * dz),
    )


def wrap_polar(p_pol: PolarPoint) -> PolarPoint:
    """Return the point with elevation in [-90, 90] and azimuth in [-180, 180).

    When the elevation passes over a pole the azimuth turns by 180 degrees.
    """
    e = wrap_angle_to_plus_minus_180(p_pol.e)
    z = wrap_angle_to_plus_minus_180(p_pol.z)

    wrapped = False
    if e > 90.0:
        e = 180.0 - e
        wrapped = True
    elif e < -90.0:
        e = -(180.0 + e)
        wrapped = True
    if wrapped:
        z = z + 180.0 if z < 0.0 else z - 180.0
    return PolarPoint(e, z, p_pol.r)


def polar_to_histogram_index(p_pol: PolarPoint, res: int) -> tuple[int, int]:
    """Histogram cell of a polar point as ``(azimuth_index, elevation_index)``."""
    res = int(res)
    wrapped = wrap_polar(p_pol)
    elevation = math.floor(wrapped.e / res + 90.0 / res)
    azimuth = math.floor(wrapped.z / res + 180.0 / res)

    # clamp against floating point errors at the borders
    azimuth = max(0, min(azimuth, 360 // res - 1))
    elevation = max(0, min(elevation, 180 // res - 1))
    return azimuth, elevation


def next_yaw(u: Vector3, v: Vector3) -> float:
    """Yaw in radians of the direction from ``u`` to ``v``."""
    return math.atan2(v.y - u.y, v.x - u.x)


def create_pose(waypoint: Vector3, yaw: float) -> tuple[Vector3, Quaternion]:
    """Pose at ``waypoint`` with level attitude and the given yaw in radians."""
    half = yaw / 2.0
    return waypoint, Quaternion(math.cos(half), 0.0, 0.0, math.sin(half))


def _yaw_rad(q: Quaternion) -> float:
    siny_cosp = 2.0 * (q.w * q.z + q.x * q.y)
    cosy_cosp = 1.0 - 2.0 * (q.y * q.y + q.z * q.z)
    return math.atan2(siny_cosp, cosy_cosp)


def yaw_from_quaternion(q: Quaternion) -> float:
    """Yaw angle of a quaternion in degrees."""
    return _yaw_rad(q) * RAD_TO_DEG


def pitch_from_quaternion(q: Quaternion) -> float:
    """Pitch angle of a quaternion in degrees, saturated at +-90."""
    sinp = 2.0 * (q.w * q.y - q.z * q.x)
    if abs(sinp) >= 1.0:
        pitch = math.copysign(math.pi / 2.0, sinp)
    else:
        pitch = math.asin(sinp)
    return pitch * RAD_TO_DEG


def angular_velocity(desired_yaw: float, curr_yaw: float) -> float:
    """Scaled yaw rate in rad/s that turns the shorter way to ``desired_yaw``."""
    desired_yaw = wrap_angle_to_plus_minus_pi(desired_yaw)
    yaw_vel1 = desired_yaw - curr_yaw
    if yaw_vel1 > 0.0:
        yaw_vel2 = -(2.0 * math.pi - yaw_vel1)
    else:
        yaw_vel2 = 2.0 * math.pi + yaw_vel1
    vel = yaw_vel1 if abs(yaw_vel1) <= abs(yaw_vel2) else yaw_vel2
    return 0.5 * vel


def unused_trajectory_point() -> TrajectoryPoint:
    """A trajectory setpoint with every field set to NaN."""
    return TrajectoryPoint()


def _trajectory(first: TrajectoryPoint, stamp: float | None) -> Trajectory:
    return Trajectory(
        stamp=time.time() if stamp is None else stamp,
        points=(first,) + tuple(unused_trajectory_point() for _ in range(4)),
    )


def pose_to_trajectory(
    position: Vector3, orientation: Quaternion, stamp: float | None = None
) -> Trajectory:
    """Trajectory whose single valid setpoint is a position with a yaw."""
    first = TrajectoryPoint(position=position, yaw=_yaw_rad(orientation))
    return _trajectory(first, stamp)


def velocity_to_trajectory(
    linear: Vector3, angular: Vector3, stamp: float | None = None
) -> Trajectory:
    """Trajectory whose single valid setpoint is a velocity with a yaw rate."""
    first = TrajectoryPoint(velocity=linear, yaw_rate=-angular.z)
    return _trajectory(first, stamp)