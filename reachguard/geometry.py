"""Intervals and axis-aligned hyper-rectangles used by the reachability checks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True)
class Interval:
    """A closed interval ``[min, max]`` along one state dimension."""

    min: float
    max: float

    def width(self) -> float:
        """Length of the interval."""
        return self.max - self.min

    def expanded(self, amount: float) -> Interval:
        """Return the interval grown by ``amount`` on both sides."""
        return Interval(self.min - amount, self.max + amount)


@dataclass(frozen=True)
class HyperRectangle:
    """A box in state space, one interval per dimension."""

    dims: tuple[Interval, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "dims", tuple(self.dims))

    @property
    def x(self) -> Interval:
        return self.dims[0]

    @property
    def y(self) -> Interval:
        return self.dims[1]

    def bloated(self, dx: float, dy: float) -> HyperRectangle:
        """Return a copy grown by ``dx`` in the first and ``dy`` in the second dimension."""
        if len(self.dims) < 2:
            raise ValueError("bloating needs at least two dimensions")
        return HyperRectangle(
            (self.dims[0].expanded(dx), self.dims[1].expanded(dy), *self.dims[2:])
        )

    @classmethod
    def from_bounds(cls, bounds: Iterable[tuple[float, float]]) -> HyperRectangle:
        """Build a box from ``(min, max)`` pairs."""
        return cls(tuple(Interval(float(lo), float(hi)) for lo, hi in bounds))


def point_box(point: Iterable[float]) -> HyperRectangle:
    """A degenerate box whose every interval is a single point."""
    return HyperRectangle(tuple(Interval(float(v), float(v)) for v in point))