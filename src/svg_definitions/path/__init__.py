"""Path-data builder for the SVG ``d`` attribute."""

from .builder import (
    CommandType,
    PathCommand,
    PathData,
    Point2D,
)

__all__ = [
    "CommandType",
    "PathCommand",
    "PathData",
    "Point2D",
]
