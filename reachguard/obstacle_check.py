"""Checking a vehicle's reachable boxes against other vehicles' reach tubes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from reachguard.geometry import HyperRectangle
from reachguard.monitors import CAR_HALF_LENGTH, CAR_HALF_WIDTH
from reachguard.safety import check_safety

Box = tuple[tuple[float, float], tuple[float, float]]


def _to_box(item) -> Box:
    (x_min, x_max), (y_min, y_max) = item
    return ((float(x_min), float(x_max)), (float(y_min), float(y_max)))


@dataclass(frozen=True)
class ReachTube:
    """Obstacle boxes ``((x_min, x_max), (y_min, y_max))`` swept by another vehicle."""

    intervals: tuple[Box, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "intervals", tuple(_to_box(i) for i in self.intervals))

    @classmethod
    def from_rectangles(cls, rects: Iterable[HyperRectangle]) -> ReachTube:
        """Tube made of the x/y projections of ``rects``."""
        return cls(
            tuple(((r.dims[0].min, r.dims[0].max), (r.dims[1].min, r.dims[1].max)) for r in rects)
        )

    def count(self) -> int:
        """Number of boxes in the tube."""
        return len(self.intervals)


def check_obstacle_safety(
    tube: ReachTube, states: Sequence[HyperRectangle], rect_count: int
) -> bool:
    """True when none of the first ``rect_count`` states, bloated to the car's
    footprint, overlaps a box of ``tube``."""
    footprints = [
        rect.bloated(CAR_HALF_LENGTH, CAR_HALF_WIDTH) for rect in states[: max(rect_count, 0)]
    ]
    return all(
        check_safety(footprint, box) for box in tube.intervals for footprint in footprints
    )


def check_all(
    tubes: Iterable[ReachTube],
    states: Sequence[HyperRectangle],
    rect_count: int,
    max_rects: int,
) -> bool:
    """Check every non-empty tube in turn, stopping at the first unsafe one."""
    limit = min(max_rects, rect_count)
    return all(
        check_obstacle_safety(tube, states, limit) for tube in tubes if tube.count() > 0
    )