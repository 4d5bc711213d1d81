"""Collision checks between reachable boxes and obstacle boxes."""

from __future__ import annotations

from typing import Iterable, Sequence

from reachguard.geometry import HyperRectangle

Box = tuple[tuple[float, float], tuple[float, float]]


def _as_box(box: Sequence[Sequence[float]]) -> Box:
    try:
        (x_min, x_max), (y_min, y_max) = box
    except (TypeError, ValueError) as exc:
        raise ValueError("obstacle box must be ((x_min, x_max), (y_min, y_max))") from exc
    return ((float(x_min), float(x_max)), (float(y_min), float(y_max)))


def check_safety(rect: HyperRectangle, box: Sequence[Sequence[float]]) -> bool:
    """True when ``rect`` and the obstacle ``box`` do not overlap in x/y.

    Boxes that only touch along an edge count as safe.
    """
    (x_min, x_max), (y_min, y_max) = _as_box(box)
    x, y = rect.dims[0], rect.dims[1]
    if x.min >= x_max or x_min >= x.max:
        return True
    if y.max <= y_min or y_max <= y.min:
        return True
    return False


class ObstacleSet:
    """A collection of obstacle boxes checked against reachable states."""

    def __init__(self, boxes: Iterable[Sequence[Sequence[float]]] = ()) -> None:
        self._boxes: list[Box] = [_as_box(b) for b in boxes]

    def add(self, box: Sequence[Sequence[float]]) -> None:
        """Append one obstacle box."""
        self._boxes.append(_as_box(box))

    def is_safe(self, rect: HyperRectangle) -> bool:
        """True when ``rect`` overlaps none of the obstacles."""
        return all(check_safety(rect, box) for box in self._boxes)

    def describe(self) -> str:
        """A text listing of the obstacle intervals."""
        lines = ["interval list of obstacles: "]
        lines.extend(
            f"[{x0:f},{x1:f}], [{y0:f},{y1:f}]" for (x0, x1), (y0, y1) in self._boxes
        )
        return "\n".join(lines) + "\n\n"

    def __iter__(self):
        return iter(self._boxes)

    def __len__(self) -> int:
        return len(self._boxes)