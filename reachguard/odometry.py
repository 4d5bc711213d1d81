"""Vehicle state from odometry readings, and the arguments of the hardware nodes."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Sequence

DEFAULT_SECOND_OBSTACLE = "racecar3"
DEFAULT_EGO_VEHICLE = "racecar2"

_MISSING_MESSAGES = (
    "Please give the walltime 10",
    "Please give the sim time (e.g) 2",
    "Please give the display max(e.g) 100",
)


def quaternion_to_rpy(x: float, y: float, z: float, w: float) -> tuple[float, float, float]:
    """Roll, pitch and yaw (radians) of the rotation given by a quaternion.

    The quaternion need not be normalised, but it must not be zero.
    """
    norm_sq = x * x + y * y + z * z + w * w
    if norm_sq == 0.0:
        raise ValueError("quaternion must not be zero")
    s = 2.0 / norm_sq
    xs, ys, zs = x * s, y * s, z * s
    wx, wy, wz = w * xs, w * ys, w * zs
    xx, xy, xz = x * xs, x * ys, x * zs
    yy, yz, zz = y * ys, y * zs, z * zs

    m00 = 1.0 - (yy + zz)
    m01 = xy - wz
    m02 = xz + wy
    m10 = xy + wz
    m20 = xz - wy
    m21 = yz + wx
    m22 = 1.0 - (xx + yy)

    if abs(m20) >= 1.0:
        yaw = 0.0
        if m20 < 0.0:
            pitch = math.pi / 2.0
            roll = math.atan2(m01, m02)
        else:
            pitch = -math.pi / 2.0
            roll = math.atan2(-m01, -m02)
        return roll, pitch, yaw

    pitch = -math.asin(m20)
    cos_pitch = math.cos(pitch)
    roll = math.atan2(m21 / cos_pitch, m22 / cos_pitch)
    yaw = math.atan2(m10 / cos_pitch, m00 / cos_pitch)
    return roll, pitch, yaw


def linear_speed(linear_x: float) -> float:
    """Speed estimate used by the nodes: the length of ``(linear_x, linear_x, 0)``."""
    return math.hypot(linear_x, linear_x)


@dataclass(frozen=True)
class VehicleState:
    """Bicycle-model state: position, speed and heading."""

    x: float
    y: float
    speed: float
    yaw: float

    def as_tuple(self) -> tuple[float, float, float, float]:
        """The state in the order the reachability run expects."""
        return (self.x, self.y, self.speed, self.yaw)


def state_from_odometry(
    position: Sequence[float], orientation: Sequence[float], linear_x: float
) -> VehicleState:
    """Build the vehicle state from a pose position, an ``(x, y, z, w)``
    orientation quaternion and the forward linear velocity."""
    if len(position) < 2:
        raise ValueError("position needs at least x and y")
    if len(orientation) != 4:
        raise ValueError("orientation must be a quaternion (x, y, z, w)")
    _, _, yaw = quaternion_to_rpy(*(float(v) for v in orientation))
    return VehicleState(
        x=float(position[0]),
        y=float(position[1]),
        speed=linear_speed(float(linear_x)),
        yaw=yaw,
    )


_INT_PREFIX = re.compile(r"\s*[+-]?\d+")
_FLOAT_PREFIX = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def _atoi(text: str) -> int:
    match = _INT_PREFIX.match(text)
    return int(match.group()) if match else 0


def _atof(text: str) -> float:
    match = _FLOAT_PREFIX.match(text)
    return float(match.group()) if match else 0.0


@dataclass(frozen=True)
class NodeArguments:
    """Command-line settings of a hardware reachability node."""

    wall_time_ms: int
    sim_time: float
    display_max: float
    debug: bool = False
    obstacle_vehicle: str = ""
    second_obstacle: str = DEFAULT_SECOND_OBSTACLE
    ego_vehicle: str = DEFAULT_EGO_VEHICLE

    @property
    def odom_topic(self) -> str:
        return f"{self.ego_vehicle}/odom"

    @property
    def velocity_topic(self) -> str:
        return f"{self.ego_vehicle}/velocity_msg"

    @property
    def angle_topic(self) -> str:
        return f"{self.ego_vehicle}/angle_msg"

    @property
    def ttc_topic(self) -> str:
        return f"{self.ego_vehicle}/ttc"

    @property
    def hull_topic(self) -> str:
        return f"{self.ego_vehicle}/reach_hull_param"

    @property
    def obstacle_tube_topics(self) -> tuple[str, str]:
        return (
            f"{self.obstacle_vehicle}/reach_tube",
            f"{self.second_obstacle}/reach_tube",
        )


def parse_hardware_args(argv: Sequence[str]) -> NodeArguments:
    """Parse the arguments that follow the program name.

    In order: wall time (ms), sim time (s), display max, debug flag, first
    obstacle vehicle, second obstacle vehicle, ego vehicle. The first three
    are required. Numbers are read leniently, as a leading numeric prefix.
    """
    args = list(argv)
    for index, message in enumerate(_MISSING_MESSAGES):
        if len(args) <= index:
            raise ValueError(message)

    def optional(index: int, default: str) -> str:
        return args[index] if len(args) > index else default

    return NodeArguments(
        wall_time_ms=_atoi(args[0]),
        sim_time=_atof(args[1]),
        display_max=_atof(args[2]),
        debug=bool(_atoi(args[3])) if len(args) > 3 else False,
        obstacle_vehicle=optional(4, ""),
        second_obstacle=optional(5, DEFAULT_SECOND_OBSTACLE),
        ego_vehicle=optional(6, DEFAULT_EGO_VEHICLE),
    )