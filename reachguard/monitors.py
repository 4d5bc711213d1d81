"""Settings and state callbacks for the bicycle-model reachability run."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from reachguard.geometry import HyperRectangle, point_box
from reachguard.safety import ObstacleSet

# Half of the car's footprint: 0.5 m long in x, 0.3 m wide in y.
CAR_HALF_LENGTH = 0.25
CAR_HALF_WIDTH = 0.15

DEFAULT_MAX_TIME = 2.0
STEP_FRACTION = 0.10
MAX_RECT_WIDTH_BEFORE_ERROR = 100

StateCheck = Callable[[HyperRectangle], bool]


def should_stop(state: Sequence[float], sim_time: float, max_time: float = DEFAULT_MAX_TIME) -> bool:
    """True once the simulation has run for ``max_time`` seconds."""
    return sim_time >= max_time


@dataclass
class LiftingSettings:
    """Parameters and callbacks for a face-lifting reachability computation."""

    init: HyperRectangle
    reach_time: float
    max_runtime_ms: float
    initial_step_size: float
    max_rect_width_before_error: float
    reached_at_intermediate_time: StateCheck
    reached_at_final_time: StateCheck
    restarted_computation: Optional[Callable[[], None]] = None


def make_settings(
    start: Sequence[float],
    sim_time: float,
    wall_time_ms: float,
    intermediate: StateCheck,
    final: StateCheck,
    restarted: Optional[Callable[[], None]] = None,
) -> LiftingSettings:
    """Build settings starting from the point ``start``."""
    return LiftingSettings(
        init=point_box(start),
        reach_time=sim_time,
        max_runtime_ms=wall_time_ms,
        initial_step_size=sim_time * STEP_FRACTION,
        max_rect_width_before_error=MAX_RECT_WIDTH_BEFORE_ERROR,
        reached_at_intermediate_time=intermediate,
        reached_at_final_time=final,
        restarted_computation=restarted,
    )


class ObstacleMonitor:
    """Checks each reached state, bloated to the car's size, against obstacles and walls."""

    def __init__(self, obstacles: ObstacleSet, wall_check: Optional[StateCheck] = None) -> None:
        self.obstacles = obstacles
        self.wall_check = wall_check

    def intermediate_state(self, rect: HyperRectangle) -> bool:
        footprint = rect.bloated(CAR_HALF_LENGTH, CAR_HALF_WIDTH)
        allowed = self.obstacles.is_safe(footprint)
        if allowed and self.wall_check is not None:
            allowed = bool(self.wall_check(footprint))
        return allowed

    def final_state(self, rect: HyperRectangle) -> bool:
        return self.intermediate_state(rect)


class StateRecorder:
    """Keeps up to ``max_states`` reached states and counts all of them."""

    def __init__(self, max_states: int) -> None:
        if max_states < 0:
            raise ValueError("max_states must not be negative")
        self.max_states = max_states
        self.states: list[HyperRectangle] = []
        self.total = 0

    def restarted(self) -> None:
        self.states.clear()
        self.total = 0

    def _record(self, rect: HyperRectangle) -> bool:
        if self.total < self.max_states:
            self.states.append(rect)
        self.total += 1
        return True

    def intermediate_state(self, rect: HyperRectangle) -> bool:
        return self._record(rect)

    def final_state(self, rect: HyperRectangle) -> bool:
        return self._record(rect)