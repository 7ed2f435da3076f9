# dronenav

Building blocks for drone obstacle avoidance and path planning:
polar-coordinate geometry, an obstacle-distance histogram, a companion-process
failsafe monitor, a YAML world-description loader for visualisation markers,
quadratic Bezier helpers and path metrics.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `dronenav.common`: the `Vector3`, `Quaternion`, `PolarPoint` and `FOV`
  value types; polar/cartesian conversion (`cartesian_to_polar`,
  `polar_to_cartesian`); histogram indexing (`polar_to_histogram_index`,
  which returns `(azimuth_index, elevation_index)`, and
  `histogram_index_to_polar`); angle wrapping (`wrap_angle_to_plus_minus_pi`,
  `wrap_angle_to_plus_minus_180`, `wrap_polar`); `point_inside_fov`;
  `next_yaw`, `create_pose`, `yaw_from_quaternion`, `pitch_from_quaternion`
  and `angular_velocity`; the `MavState` and `NavigationState` enums; and
  trajectory setpoints (`Trajectory`, `TrajectoryPoint`, `pose_to_trajectory`,
  `velocity_to_trajectory`, `unused_trajectory_point`).
- `dronenav.histogram`: `Histogram`, a grid of obstacle distances addressed as
  `hist[e, z]` (elevation index first). Reading wraps indices around the
  grid; writing out of range raises `IndexError`. `upsample` and
  `downsample` switch between `ALPHA_RES` and twice that resolution and raise
  `RuntimeError` when called at the wrong resolution; `set_zero` and
  `is_empty` reset and inspect the grid.
- `dronenav.failsafe`: `AvoidanceNode`, which holds the current `MavState`,
  decides from elapsed times whether to hover, go critical or terminate
  (`check_failsafe`), and sends `CompanionStatus` messages through a callback
  you supply (`publish_system_status`).
- `dronenav.world_loader`: reads a YAML list of world objects into `Marker`
  objects (`world_markers`, `parse_world_object`), builds the vehicle marker
  (`drone_marker`) and resolves `model://` URIs against a colon-separated
  model search path and `<home>/.gazebo/models` (`resolve_uri`). Failures
  raise `WorldLoadError`. `WorldVisualizer` calls your publish callbacks from
  `on_timer` and `on_position`.
- `dronenav.geometry`: `Point` with vector arithmetic and helpers
  (`interpolate`, `interpolate_points`, `middle_point`, `add_points`,
  `subtract_points`, `scale_point`, `norm`, `distance`, `angle_to_range`,
  `posterior`).
- `dronenav.bezier`: `quadratic_bezier`, `quadratic_bezier_acc`,
  `three_point_bezier`, trajectory segments (`BezierSegment`,
  `bezier_from_two_points`, `bezier_from_two_speeds`), `duration_to_reach`
  and `acceleration_magnitude`.
- `dronenav.paths`: `Pose` and `ColorRGBA`, `spectral_color`,
  `has_same_yaw_and_altitude`, and metrics and smoothing for sequences of
  poses (`path_length`, `path_energy`, `path_kinetic_energy`,
  `filter_path_corners`, `smooth_path`, `three_point_bezier_path`).

## Examples

```python
from dronenav.common import Vector3, cartesian_to_polar, polar_to_histogram_index
from dronenav.histogram import Histogram

origin = Vector3(0.0, 0.0, 0.0)
p = cartesian_to_polar(Vector3(1.0, 2.0, 0.5), origin)
x, y = polar_to_histogram_index(p, 6)

hist = Histogram(6)
hist[y, x] = p.r
print(hist.is_empty())  # False
```

```python
from dronenav.geometry import Point
from dronenav.bezier import three_point_bezier

curve = three_point_bezier(Point(0, 0, 0), Point(1, 1, 0), Point(2, 0, 0), 10)
print(len(curve))  # 11
```

```python
from dronenav.common import MavState
from dronenav.failsafe import AvoidanceNode

sent = []
node = AvoidanceNode(sent.append)
hover = node.check_failsafe(since_last_cloud=1.0, since_start=10.0, hover=False)
print(hover, node.state is MavState.CRITICAL)  # True True
node.publish_system_status()
print(sent[-1].component)  # 196
```

## What this package does not do

It is a library only: there is no command to run, no running node and no
message transport. Status messages, markers and trajectories are plain
objects handed to callbacks you provide or returned to you. It contains no
occupancy map and no grid search planner; the path functions measure and
smooth paths you already have.