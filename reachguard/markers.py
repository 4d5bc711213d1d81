"""Display markers for reachable boxes, thinned out to a chosen number."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Sequence

from reachguard.geometry import HyperRectangle
from reachguard.monitors import CAR_HALF_LENGTH, CAR_HALF_WIDTH

FRAME_ID = "/map"
MARKER_HEIGHT = 0.05
MARKER_LIFETIME = 0.1
PARAM_MARKER_Z = 0.5
REACHSET_MARKER_Z = 0.0
DEFAULT_DISPLAY_MAX = 10.0
DEFAULT_MAX_RECTS = 2000
IDENTITY_ORIENTATION = (0.0, 0.0, 0.0, 1.0)

BLUE = (0.0, 0.0, 0.8)
GREEN = (0.0, 0.8, 0.0)
RED = (0.8, 0.0, 0.0)
BRIGHT_GREEN = (0.0, 1.0, 0.0)
BRIGHT_BLUE = (0.0, 0.0, 1.0)

Color = tuple[float, float, float]
Quaternion = tuple[float, float, float, float]


@dataclass(frozen=True)
class Marker:
    """A flat cube drawn over the x/y extent of one reachable box."""

    marker_id: int
    x: float
    y: float
    z: float
    scale_x: float
    scale_y: float
    scale_z: float
    orientation: Quaternion
    color: Color
    alpha: float = 1.0
    lifetime: float = MARKER_LIFETIME
    frame_id: str = FRAME_ID


def _quaternion(orientation: Sequence[float]) -> Quaternion:
    if len(orientation) != 4:
        raise ValueError("orientation must be a quaternion (x, y, z, w)")
    qx, qy, qz, qw = (float(v) for v in orientation)
    return (qx, qy, qz, qw)


def box_marker(
    rect: HyperRectangle,
    marker_id: int,
    z: float = 0.0,
    orientation: Sequence[float] = IDENTITY_ORIENTATION,
    color: Sequence[float] = BLUE,
    lifetime: float = MARKER_LIFETIME,
    bloat: bool = True,
) -> Marker:
    """Marker covering ``rect``, optionally bloated to the car's footprint."""
    if bloat:
        rect = rect.bloated(CAR_HALF_LENGTH, CAR_HALF_WIDTH)
    if len(color) != 3:
        raise ValueError("color must be (r, g, b)")
    x, y = rect.dims[0], rect.dims[1]
    r, g, b = (float(c) for c in color)
    return Marker(
        marker_id=marker_id,
        x=(x.max + x.min) / 2.0,
        y=(y.max + y.min) / 2.0,
        z=float(z),
        scale_x=x.max - x.min,
        scale_y=y.max - y.min,
        scale_z=MARKER_HEIGHT,
        orientation=_quaternion(orientation),
        color=(r, g, b),
        lifetime=float(lifetime),
    )


def display_increment(rect_count: int, display_max: float) -> float:
    """Index step that shows about ``display_max`` of ``rect_count`` boxes."""
    if display_max <= 0:
        raise ValueError("display_max must be positive")
    return rect_count / display_max


def topic_color(color_topic: int) -> Color:
    """Marker colour chosen by a small integer: 0 blue, 1 green, anything else red."""
    if color_topic == 0:
        return BLUE
    if color_topic == 1:
        return GREEN
    return RED


def _strided(limit: int, increment: float) -> Iterator[int]:
    # Indices advance by the (possibly fractional) increment, truncated;
    # a step that would not move forward moves by one instead.
    index = 0
    while index < limit:
        yield index
        following = int(index + increment)
        index = following if following > index else index + 1


def param_markers(
    states: Sequence[HyperRectangle],
    rect_count: int,
    display_max: float,
    orientation: Sequence[float] = IDENTITY_ORIENTATION,
    color_topic: int = 0,
    max_rects: int = DEFAULT_MAX_RECTS,
) -> list[Marker]:
    """Markers for a thinned-out selection of the recorded states.

    The last recorded box is left out, and no more than ``max_rects - 1``
    boxes are considered.
    """
    increment = display_increment(rect_count, display_max)
    limit = min(max_rects - 1, rect_count - 1, len(states))
    color = topic_color(color_topic)
    quat = _quaternion(orientation)
    return [
        box_marker(states[i], i, PARAM_MARKER_Z, quat, color, MARKER_LIFETIME, True)
        for i in _strided(limit, increment)
    ]


def reachset_markers(
    states: Sequence[HyperRectangle],
    display_max: float = DEFAULT_DISPLAY_MAX,
    orientation: Sequence[float] = IDENTITY_ORIENTATION,
) -> list[Marker]:
    """Markers for a thinned-out selection of all states, alternating green and blue."""
    count = len(states)
    increment = display_increment(count, display_max)
    quat = _quaternion(orientation)
    return [
        box_marker(
            states[i],
            i,
            REACHSET_MARKER_Z,
            quat,
            BRIGHT_GREEN if shown % 2 == 0 else BRIGHT_BLUE,
            MARKER_LIFETIME,
            True,
        )
        for shown, i in enumerate(_strided(count, increment))
    ]