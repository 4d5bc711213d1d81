# reachguard

Building blocks for run-time safety monitoring of a small car driven by a
learned controller. The car is modelled as a kinematic bicycle with state
`(x, y, speed, yaw)`. A reachability computation produces hyper-rectangles
that over-approximate where the car can be over a short look-ahead
horizon; `reachguard` supplies the boxes, the callbacks such a computation
calls on each reached box, the collision checks against obstacles and
other vehicles' reach tubes, and helpers to write or display the result.

The package uses only the standard library.

## Modules

### `reachguard.geometry`

- `Interval(min, max)` with `width()` and `expanded(amount)`.
- `HyperRectangle(dims)`, one `Interval` per dimension, with the `x` and
  `y` properties, `bloated(dx, dy)` (a copy grown in the first two
  dimensions) and `HyperRectangle.from_bounds([(lo, hi), ...])`.
- `point_box(point)`: the degenerate box around a single state.

### `reachguard.safety`

- `check_safety(rect, box)`: `True` when `rect` and an obstacle
  `((x_min, x_max), (y_min, y_max))` do not overlap in x/y. Boxes that only
  touch along an edge count as safe. A malformed box raises `ValueError`.
- `ObstacleSet(boxes)`: a collection of obstacle boxes with `add(box)`,
  `is_safe(rect)`, `describe()` (a text listing of the intervals),
  iteration and `len()`.

### `reachguard.monitors`

- `should_stop(state, sim_time, max_time=2.0)`: simulation cut-off.
- `LiftingSettings` and `make_settings(start, sim_time, wall_time_ms,
  intermediate, final, restarted=None)`: settings for a reachability run
  starting from the point `start`, with an initial step of a tenth of
  `sim_time` and a maximum box width of 100.
- `ObstacleMonitor(obstacles, wall_check=None)`: its `intermediate_state`
  and `final_state` bloat each box by the car's half-length (0.25 m) and
  half-width (0.15 m) and check it against an `ObstacleSet` and, if given,
  a wall-check callable.
- `StateRecorder(max_states)`: keeps up to `max_states` reached boxes in
  `states`, counts all of them in `total`, accepts every box, and clears
  both on `restarted()`.

### `reachguard.plots`

- `Style` (`INITIAL`, `INTERMEDIATE`, `FINAL`) and `format_rect(rect,
  style)`: the gnuplot command drawing a box's x/y projection.
- `GnuplotRecorder(directory=".", max_states=2000)`: writes
  `bicycle_initial.gnuplot.txt`, `bicycle_intermediate.gnuplot.txt` and
  `bicycle_final.gnuplot.txt` in `directory`. Use it as a context manager
  or call `open()` / `close()`. `write_initial(rect)` draws the start;
  `intermediate_state` records and accepts a box; `final_state` records
  only the first final hull and returns `False`; `restarted()` truncates
  the intermediate and final files and forgets recorded boxes.
- `RunArguments` and `parse_run_arguments(argv)`: reads the eight run
  parameters (runtime in ms, reach time, x, y, speed, heading, throttle,
  steering). Numbers are read leniently as a leading numeric prefix; a
  wrong argument count raises `ValueError` carrying the usage text. A
  negative runtime is reported by `split_count`.

### `reachguard.obstacle_check`

- `ReachTube(intervals)`: another vehicle's swept boxes, with `count()`
  and `ReachTube.from_rectangles(rects)`.
- `check_obstacle_safety(tube, states, rect_count)`: `True` when none of
  the first `rect_count` boxes, bloated to the car's footprint, overlaps
  the tube.
- `check_all(tubes, states, rect_count, max_rects)`: checks every
  non-empty tube, stopping at the first unsafe one.

### `reachguard.tube`

- `build_reach_tube(states, rect_count, max_rects, bloat=True)`: a
  `ReachTube` of the recorded boxes, leaving out the last one.
- `obstacle_marker_indices(rect_count, display_max, max_rects)`: indices
  spread so that about `display_max` boxes are shown.

### `reachguard.odometry`

- `quaternion_to_rpy(x, y, z, w)`: roll, pitch and yaw in radians; a zero
  quaternion raises `ValueError`.
- `linear_speed(linear_x)`: the length of `(linear_x, linear_x, 0)`.
- `VehicleState` and `state_from_odometry(position, orientation,
  linear_x)`.
- `NodeArguments` and `parse_hardware_args(argv)`: wall time, sim time and
  display max (required), then an optional debug flag and the first
  obstacle, second obstacle (default `racecar3`) and ego vehicle (default
  `racecar2`) names, with the topic names derived from them.

### `reachguard.markers`

- `Marker`, `box_marker(rect, marker_id, ...)`: a flat cube over a box,
  bloated to the car's footprint by default.
- `display_increment(rect_count, display_max)` and `topic_color(n)`
  (0 blue, 1 green, anything else red).
- `param_markers(states, rect_count, display_max, ...)` and
  `reachset_markers(states, display_max=10, ...)`: markers for a
  thinned-out selection of the reach set.

## Example

```python
from reachguard.geometry import point_box
from reachguard.safety import ObstacleSet, check_safety

# a cone occupying x in [2.0, 2.4] and y in [-0.2, 0.2]
cone = [[2.0, 2.4], [-0.2, 0.2]]

car = point_box([0.0, 0.0, 1.0, 0.0]).bloated(0.25, 0.15)
print(check_safety(car, cone))        # True: the boxes do not overlap

obstacles = ObstacleSet([cone])
near = point_box([2.1, 0.0, 1.0, 0.0]).bloated(0.25, 0.15)
print(obstacles.is_safe(near))        # False: the car would hit the cone
```

## What the package does not do

- It does not compute reachable sets or simulate the vehicle. It builds
  the settings and supplies the per-state callbacks; the computation that
  produces the boxes must come from elsewhere.
- It has no command-line program and no message transport: there is
  nothing that subscribes to odometry, publishes commands or draws
  markers on a screen. `Marker` objects and `ReachTube`s are plain data
  for the caller to send on.
- It does not choose between a learned controller and a safety
  controller, and it does not keep timing statistics or benchmark files.

## Requirements

Python 3.10 or later. The tests use pytest (`pip install .[test]`).