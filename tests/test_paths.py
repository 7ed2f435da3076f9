import pytest

from dronenav.common import Quaternion
from dronenav.geometry import Point, distance, middle_point
from dronenav.paths import (
    ColorRGBA,
    Pose,
    filter_path_corners,
    has_same_yaw_and_altitude,
    path_energy,
    path_kinetic_energy,
    path_length,
    smooth_path,
    spectral_color,
    three_point_bezier_path,
)


def _pose(x, y, z, frame_id="world"):
    return Pose(Point(x, y, z), Quaternion(), frame_id=frame_id)


def _path(*coords):
    return [_pose(*c) for c in coords]


@pytest.mark.parametrize("hue", [0.0, 0.1, 0.25, 0.5, 0.7, 1.0])
def test_spectral_color_components_sum_to_one(hue):
    color = spectral_color(hue)
    assert color.r + color.g + color.b == pytest.approx(1.0)
    assert color.a == 1.0


def test_spectral_color_is_symmetric():
    for hue in (0.0, 0.2, 0.4):
        low, high = spectral_color(hue), spectral_color(1.0 - hue)
        assert low.b == pytest.approx(high.r)
        assert low.g == pytest.approx(high.g)


def test_spectral_color_ends():
    assert spectral_color(0.0, 0.5) == ColorRGBA(0.0, 0.0, 1.0, 0.5)
    assert spectral_color(0.5).g == pytest.approx(1.0)


def test_same_yaw_and_altitude():
    a = _pose(0.0, 0.0, 3.0)
    b = _pose(5.0, -2.0, 3.0)
    c = _pose(0.0, 0.0, 4.0)
    assert has_same_yaw_and_altitude(a, b)
    assert not has_same_yaw_and_altitude(a, c)
    turned = Pose(Point(0.0, 0.0, 3.0), Quaternion(w=0.0, z=1.0))
    assert not has_same_yaw_and_altitude(a, turned)


def test_path_length_straight_line_equals_end_distance():
    poses = _path((0, 0, 0), (1, 2, 2), (2, 4, 4), (3, 6, 6))
    assert path_length(poses) == pytest.approx(
        distance(poses[0].position, poses[-1].position)
    )


def test_path_length_trivial():
    assert path_length([]) == 0.0
    assert path_length([_pose(1, 2, 3)]) == 0.0


def test_filter_corners_straight_line():
    poses = _path((0, 0, 0), (1, 0, 0), (2, 0, 0), (3, 0, 0))
    assert filter_path_corners(poses) == [poses[0], poses[-1]]


def test_filter_corners_keeps_turn():
    poses = _path((0, 0, 0), (1, 0, 0), (2, 0, 0), (2, 1, 0), (2, 2, 0))
    assert filter_path_corners(poses) == [poses[0], poses[2], poses[-1]]


def test_filter_corners_empty():
    assert filter_path_corners([]) == []


def test_kinetic_energy_constant_velocity_is_zero():
    poses = _path((0, 0, 0), (1, 1, 0), (2, 2, 0), (3, 3, 0))
    assert path_kinetic_energy(poses) == 0.0
    assert path_kinetic_energy(poses[:2]) == 0.0


def test_kinetic_energy_reverse_invariant():
    poses = _path((0, 0, 0), (1, 0, 0), (3, 1, 0), (3, 4, 2))
    energy = path_kinetic_energy(poses)
    assert energy > 0.0
    assert path_kinetic_energy(list(reversed(poses))) == pytest.approx(energy)


def test_path_energy_without_climb_is_length():
    poses = _path((0, 0, 5), (1, 1, 4), (3, 1, 2))
    assert path_energy(poses, 10.0) == pytest.approx(path_length(poses))
    assert path_energy(poses, 0.0) == pytest.approx(path_length(poses))


def test_path_energy_penalises_climb():
    poses = _path((0, 0, 0), (0, 0, 2))
    up = path_energy(poses, 3.0)
    down = path_energy(list(reversed(poses)), 3.0)
    assert up > down
    assert down == pytest.approx(path_length(poses))


def test_smooth_path_short_unchanged():
    poses = _path((0, 0, 0), (1, 0, 0))
    assert smooth_path(poses) == poses


def test_smooth_path_shape():
    poses = _path((0, 0, 1), (2, 0, 1), (2, 2, 1), (4, 2, 1))
    poses[1] = _pose(2, 0, 1, frame_id="other")
    smoothed = smooth_path(poses)
    assert len(smoothed) == 2 + 11 * (len(poses) - 2)
    assert smoothed[0] == poses[0]
    assert smoothed[-1] == poses[-1]
    assert all(p.frame_id == "world" for p in smoothed[1:-1])
    first_curve_start = smoothed[1].position
    expected = middle_point(poses[0].position, poses[1].position)
    assert first_curve_start.x == pytest.approx(expected.x)
    assert first_curve_start.y == pytest.approx(expected.y)
    assert all(p.position.z == pytest.approx(1.0) for p in smoothed)


def test_three_point_bezier_path():
    poses = _path((0, 0, 0), (1, 1, 0), (2, 0, 0))
    curve = three_point_bezier_path(poses, 4)
    assert len(curve) == 5
    assert curve[0].position == poses[0].position
    assert curve[-1].position.x == pytest.approx(poses[2].position.x)
    assert curve[-1].position.y == pytest.approx(poses[2].position.y)
    assert all(p.orientation == poses[0].orientation for p in curve)


def test_three_point_bezier_path_wrong_size():
    with pytest.raises(ValueError):
        three_point_bezier_path(_path((0, 0, 0), (1, 1, 1)))