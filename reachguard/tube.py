"""Publishing an obstacle's reachable boxes as a reach tube."""

from __future__ import annotations

from typing import Sequence

from reachguard.geometry import HyperRectangle
from reachguard.monitors import CAR_HALF_LENGTH, CAR_HALF_WIDTH
from reachguard.obstacle_check import ReachTube


def _limit(rect_count: int, max_rects: int) -> int:
    # The last recorded box is left out, as the publishing node does.
    return max(min(max_rects, rect_count - 1), 0)


def build_reach_tube(
    states: Sequence[HyperRectangle], rect_count: int, max_rects: int, bloat: bool = True
) -> ReachTube:
    """Reach tube of the recorded states, optionally bloated to the car's footprint."""
    rects = states[: _limit(rect_count, max_rects)]
    if bloat:
        rects = [r.bloated(CAR_HALF_LENGTH, CAR_HALF_WIDTH) for r in rects]
    return ReachTube.from_rectangles(rects)


def obstacle_marker_indices(rect_count: int, display_max: float, max_rects: int) -> list[int]:
    """Indices of the states to show, spread so that about ``display_max`` are drawn."""
    if display_max == 0:
        raise ValueError("display_max must not be zero")
    step = max(1, round(rect_count / display_max))
    return list(range(0, _limit(rect_count, max_rects), step))