"""Gnuplot output of reached states and parsing of the plotting run's arguments."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path
from typing import IO, Optional, Sequence, Union

from reachguard.geometry import HyperRectangle

INITIAL_FILE = "bicycle_initial.gnuplot.txt"
INTERMEDIATE_FILE = "bicycle_intermediate.gnuplot.txt"
FINAL_FILE = "bicycle_final.gnuplot.txt"

USAGE = (
    "Usage: rt_reach (milliseconds-runtime) (seconds-reachtime) (x) (y) "
    "(linear velocity) (heading) (throttle control input) (heading control input)\n"
    "If milliseconds is negative, it will split a fixed number of times"
)


class Style(IntEnum):
    """How a box is drawn in the gnuplot script."""

    INITIAL = 0
    INTERMEDIATE = 1
    FINAL = 2


def format_rect(rect: HyperRectangle, style: Union[Style, int]) -> str:
    """Gnuplot command drawing the x/y projection of ``rect``."""
    style = Style(style)
    x, y = rect.dims[0], rect.dims[1]
    if style is Style.INITIAL:
        return (
            f"set label ' Init' at {x.min:f}, {y.min:f} point pointtype 3 "
            "lc rgb 'blue' tc rgb 'blue'"
        )
    if style is Style.INTERMEDIATE:
        return (
            f"set obj rect from {x.min:f}, {y.min:f} to {x.max:f}, {y.max:f} "
            "fc rgbcolor 'dark-green' fs solid 0.2 \n"
        )
    return (
        f"set obj rect from {x.min:f}, {y.min:f} to {x.max:f}, {y.max:f} "
        "fc rgbcolor 'red' fs solid 0.3\n"
    )


class GnuplotRecorder:
    """Writes reached states to gnuplot files and keeps them for display.

    Intermediate states are accepted; reaching a final state reports failure so
    the computation keeps refining, while only the first final hull is stored.
    """

    def __init__(self, directory: Union[str, Path] = ".", max_states: int = 2000) -> None:
        if max_states < 0:
            raise ValueError("max_states must not be negative")
        self.directory = Path(directory)
        self.max_states = max_states
        self.states: list[HyperRectangle] = []
        self.total = 0
        self.final_hull = False
        self._initial: Optional[IO[str]] = None
        self._intermediate: Optional[IO[str]] = None
        self._final: Optional[IO[str]] = None

    @property
    def initial_path(self) -> Path:
        return self.directory / INITIAL_FILE

    @property
    def intermediate_path(self) -> Path:
        return self.directory / INTERMEDIATE_FILE

    @property
    def final_path(self) -> Path:
        return self.directory / FINAL_FILE

    def open(self, open_initial: bool = True) -> None:
        """Open (and truncate) the output files."""
        try:
            if open_initial:
                self._initial = open(self.initial_path, "w", encoding="utf-8")
            self._intermediate = open(self.intermediate_path, "w", encoding="utf-8")
            self._final = open(self.final_path, "w", encoding="utf-8")
        except OSError as exc:
            self.close(True)
            raise OSError("error opening files") from exc

    def close(self, close_initial: bool = True) -> None:
        """Close the output files; the initial one only if asked to."""
        if close_initial and self._initial is not None:
            self._initial.close()
            self._initial = None
        if self._intermediate is not None:
            self._intermediate.close()
            self._intermediate = None
        if self._final is not None:
            self._final.close()
            self._final = None

    def restarted(self) -> None:
        """Clear the intermediate and final files and forget recorded states."""
        self.close(False)
        self.open(False)
        self.states.clear()
        self.total = 0
        self.final_hull = False

    def write_initial(self, rect: HyperRectangle) -> None:
        if self._initial is not None:
            self._initial.write(format_rect(rect, Style.INITIAL))

    def intermediate_state(self, rect: HyperRectangle) -> bool:
        if self._intermediate is not None:
            self._intermediate.write(format_rect(rect, Style.INTERMEDIATE))
        if len(self.states) < self.max_states:
            self.states.append(rect)
        self.total += 1
        return True

    def final_state(self, rect: HyperRectangle) -> bool:
        if self._final is not None:
            self._final.write(format_rect(rect, Style.FINAL))
        if len(self.states) < self.max_states and not self.final_hull:
            self.states.append(rect)
        self.final_hull = True
        self.total += 1
        return False

    def __enter__(self) -> GnuplotRecorder:
        self.open(True)
        return self

    def __exit__(self, *args) -> None:
        self.close(True)


_INT_PREFIX = re.compile(r"\s*[+-]?\d+")
_FLOAT_PREFIX = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def _atoi(text: str) -> int:
    match = _INT_PREFIX.match(text)
    return int(match.group()) if match else 0


def _atof(text: str) -> float:
    match = _FLOAT_PREFIX.match(text)
    return float(match.group()) if match else 0.0


@dataclass(frozen=True)
class RunArguments:
    """Command-line settings of a plotted reachability run."""

    runtime_ms: int
    reach_time: float
    start: tuple[float, float, float, float]
    throttle: float
    heading: float

    @property
    def split_count(self) -> Optional[int]:
        """Fixed number of step splits when the runtime is negative, else None."""
        return -self.runtime_ms if self.runtime_ms < 0 else None


def parse_run_arguments(argv: Sequence[str]) -> RunArguments:
    """Parse the eight arguments that follow the program name.

    Numbers are read leniently: a leading numeric prefix is used and text
    without one reads as zero.
    """
    args = list(argv)
    if len(args) != 8:
        raise ValueError(USAGE)
    return RunArguments(
        runtime_ms=_atoi(args[0]),
        reach_time=_atof(args[1]),
        start=(_atof(args[2]), _atof(args[3]), _atof(args[4]), _atof(args[5])),
        throttle=_atof(args[6]),
        heading=_atof(args[7]),
    )