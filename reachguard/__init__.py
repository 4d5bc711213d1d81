"""Boxes, collision checks, state callbacks and display helpers for bicycle-model reachability monitoring."""

__version__ = "0.1.0"

__all__ = [
    "geometry",
    "safety",
    "monitors",
    "plots",
    "obstacle_check",
    "tube",
    "odometry",
    "markers",
]