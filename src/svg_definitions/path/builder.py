"""Builder for SVG path-data strings (the ``d`` attribute).

``PathData`` accumulates drawing commands in call order and renders them to
the path micro-grammar: a command letter followed by its operands, control
point pairs separated by ``", "`` and commands separated by a single space.
Uppercase letters are absolute commands, lowercase letters are relative.

Example:
    >>> triangle = (
    ...     PathData()
    ...     .move_to((0, 0))
    ...     .line_to((10, 0))
    ...     .line_to((0, 10))
    ...     .close_path()
    ... )
    >>> str(triangle)
    'M 0.00 0.00 L 10.00 0.00 L 0.00 10.00 Z'

No geometric validation is done; the builder only records commands.
"""

import math
from dataclasses import dataclass, replace
from enum import Enum
from numbers import Real
from typing import Dict, Iterator, Optional, Sequence, Tuple

from svg_definitions.shared import PathConfig, format_number
from svg_definitions.tree.values import RawString

Point2D = Tuple[float, float]


class CommandType(Enum):
    """Path command kinds, valued by their absolute command letter."""

    MOVE_TO = "M"
    LINE_TO = "L"
    HORIZONTAL_LINE_TO = "H"
    VERTICAL_LINE_TO = "V"
    CURVE_TO = "C"
    SMOOTH_CURVE_TO = "S"
    QUAD_CURVE_TO = "Q"
    SMOOTH_QUAD_CURVE_TO = "T"
    ARC_TO = "A"
    CLOSE_PATH = "Z"


_OPERAND_COUNTS: Dict[CommandType, int] = {
    CommandType.MOVE_TO: 2,
    CommandType.LINE_TO: 2,
    CommandType.HORIZONTAL_LINE_TO: 1,
    CommandType.VERTICAL_LINE_TO: 1,
    CommandType.CURVE_TO: 6,
    CommandType.SMOOTH_CURVE_TO: 4,
    CommandType.QUAD_CURVE_TO: 4,
    CommandType.SMOOTH_QUAD_CURVE_TO: 2,
    CommandType.ARC_TO: 5,
    CommandType.CLOSE_PATH: 0,
}


@dataclass(frozen=True)
class PathCommand:
    """One drawing command with operands in path-data order.

    Arc commands store ``(rx, ry, x_axis_rotation, x, y)`` as operands and
    ``(large_arc, sweep)`` as flags.
    """

    command: CommandType
    operands: Tuple[float, ...] = ()
    relative: bool = False
    flags: Tuple[bool, ...] = ()

    def __post_init__(self) -> None:
        """Validate operand count and values."""
        expected = _OPERAND_COUNTS[self.command]
        if len(self.operands) != expected:
            raise ValueError(
                f"{self.command.name} takes {expected} operands, "
                f"got {len(self.operands)}"
            )
        for operand in self.operands:
            if isinstance(operand, bool) or not isinstance(operand, Real):
                raise TypeError("Path operands must be numbers")
            if not math.isfinite(operand):
                raise ValueError("Path operands must be finite")
        object.__setattr__(self, "operands", tuple(float(op) for op in self.operands))

        expected_flags = 2 if self.command is CommandType.ARC_TO else 0
        if len(self.flags) != expected_flags:
            raise ValueError(
                f"{self.command.name} takes {expected_flags} flags, "
                f"got {len(self.flags)}"
            )
        if self.relative and self.command is CommandType.CLOSE_PATH:
            raise ValueError("CLOSE_PATH has no relative form")

    @property
    def letter(self) -> str:
        """Command letter, lowercase for relative commands."""
        letter = self.command.value
        return letter.lower() if self.relative else letter

    def render(self, precision: Optional[int] = 2) -> str:
        """Render this command as a path-data token."""
        def fmt(value: float) -> str:
            return format_number(value, precision, trim=precision is None)

        if self.command is CommandType.CLOSE_PATH:
            return self.letter

        if self.command is CommandType.ARC_TO:
            rx, ry, rotation, x, y = self.operands
            large_arc, sweep = self.flags
            parts = [
                fmt(rx), fmt(ry), fmt(rotation),
                "1" if large_arc else "0",
                "1" if sweep else "0",
                fmt(x), fmt(y),
            ]
            return f"{self.letter} {' '.join(parts)}"

        if self.command in (
            CommandType.HORIZONTAL_LINE_TO, CommandType.VERTICAL_LINE_TO
        ):
            return f"{self.letter} {fmt(self.operands[0])}"

        pairs = [
            f"{fmt(self.operands[i])} {fmt(self.operands[i + 1])}"
            for i in range(0, len(self.operands), 2)
        ]
        return f"{self.letter} {', '.join(pairs)}"


def _point(point: Sequence[float]) -> Tuple[float, float]:
    if len(point) != 2:
        raise ValueError("Points must have exactly two coordinates")
    return point[0], point[1]


@dataclass(frozen=True)
class PathData:
    """Ordered sequence of path commands.

    Every command method returns a new ``PathData``; the receiver is left
    unchanged. ``precision`` sets the number of decimals operands are rendered
    with; ``None`` renders the shortest exact form instead.
    """

    commands: Tuple[PathCommand, ...] = ()
    precision: Optional[int] = 2

    def __post_init__(self) -> None:
        if self.precision is not None and self.precision < 0:
            raise ValueError("precision must be >= 0 or None")
        object.__setattr__(self, "commands", tuple(self.commands))

    @classmethod
    def from_config(cls, config: PathConfig) -> "PathData":
        """Create an empty path using the precision from ``config``."""
        return cls(precision=config.precision)

    def _extend(self, command: PathCommand) -> "PathData":
        return replace(self, commands=self.commands + (command,))

    def _add(
        self,
        command: CommandType,
        operands: Tuple[float, ...],
        relative: bool
    ) -> "PathData":
        return self._extend(PathCommand(command, operands, relative))

    # Line commands

    def move_to(self, point: Point2D) -> "PathData":
        """Start a new sub-path at ``point``."""
        return self._add(CommandType.MOVE_TO, _point(point), False)

    def r_move_to(self, delta: Point2D) -> "PathData":
        """Start a new sub-path offset by ``delta`` from the current point."""
        return self._add(CommandType.MOVE_TO, _point(delta), True)

    def line_to(self, point: Point2D) -> "PathData":
        """Draw a straight line to ``point``."""
        return self._add(CommandType.LINE_TO, _point(point), False)

    def r_line_to(self, delta: Point2D) -> "PathData":
        return self._add(CommandType.LINE_TO, _point(delta), True)

    def horizontal_line_to(self, x: float) -> "PathData":
        """Draw a horizontal line to the x coordinate ``x``."""
        return self._add(CommandType.HORIZONTAL_LINE_TO, (x,), False)

    def r_horizontal_line_to(self, dx: float) -> "PathData":
        return self._add(CommandType.HORIZONTAL_LINE_TO, (dx,), True)

    def vertical_line_to(self, y: float) -> "PathData":
        """Draw a vertical line to the y coordinate ``y``."""
        return self._add(CommandType.VERTICAL_LINE_TO, (y,), False)

    def r_vertical_line_to(self, dy: float) -> "PathData":
        return self._add(CommandType.VERTICAL_LINE_TO, (dy,), True)

    # Curve commands

    def curve_to(
        self,
        point: Point2D,
        control_1: Point2D,
        control_2: Point2D
    ) -> "PathData":
        """Draw a cubic Bezier curve to ``point``.

        Rendered in path-data order: ``C c1x c1y, c2x c2y, x y``.
        """
        return self._add(
            CommandType.CURVE_TO,
            _point(control_1) + _point(control_2) + _point(point),
            False,
        )

    def r_curve_to(
        self,
        delta: Point2D,
        control_1: Point2D,
        control_2: Point2D
    ) -> "PathData":
        return self._add(
            CommandType.CURVE_TO,
            _point(control_1) + _point(control_2) + _point(delta),
            True,
        )

    def smooth_curve_to(self, point: Point2D, control_2: Point2D) -> "PathData":
        """Draw a cubic Bezier curve whose first control point mirrors the last one."""
        return self._add(
            CommandType.SMOOTH_CURVE_TO, _point(control_2) + _point(point), False
        )

    def r_smooth_curve_to(self, delta: Point2D, control_2: Point2D) -> "PathData":
        return self._add(
            CommandType.SMOOTH_CURVE_TO, _point(control_2) + _point(delta), True
        )

    def quad_curve_to(self, point: Point2D, control_1: Point2D) -> "PathData":
        """Draw a quadratic Bezier curve to ``point``."""
        return self._add(
            CommandType.QUAD_CURVE_TO, _point(control_1) + _point(point), False
        )

    def r_quad_curve_to(self, delta: Point2D, control_1: Point2D) -> "PathData":
        return self._add(
            CommandType.QUAD_CURVE_TO, _point(control_1) + _point(delta), True
        )

    def quad_string_to(self, point: Point2D) -> "PathData":
        """Continue a quadratic Bezier chain to ``point``."""
        return self._add(CommandType.SMOOTH_QUAD_CURVE_TO, _point(point), False)

    def r_quad_string_to(self, delta: Point2D) -> "PathData":
        return self._add(CommandType.SMOOTH_QUAD_CURVE_TO, _point(delta), True)

    # Arc commands

    def arc_to(
        self,
        point: Point2D,
        radii: Tuple[float, float],
        x_axis_rotation: float,
        large_arc: bool,
        sweep: bool
    ) -> "PathData":
        """Draw an elliptical arc to ``point``."""
        return self._extend(PathCommand(
            CommandType.ARC_TO,
            _point(radii) + (x_axis_rotation,) + _point(point),
            False,
            (bool(large_arc), bool(sweep)),
        ))

    def r_arc_to(
        self,
        delta: Point2D,
        radii: Tuple[float, float],
        x_axis_rotation: float,
        large_arc: bool,
        sweep: bool
    ) -> "PathData":
        return self._extend(PathCommand(
            CommandType.ARC_TO,
            _point(radii) + (x_axis_rotation,) + _point(delta),
            True,
            (bool(large_arc), bool(sweep)),
        ))

    def close_path(self) -> "PathData":
        """Close the current sub-path."""
        return self._add(CommandType.CLOSE_PATH, (), False)

    # Output

    def to_string(self) -> str:
        """Render all commands in emission order."""
        return " ".join(command.render(self.precision) for command in self.commands)

    def matches(self, text: str) -> bool:
        """Check whether the rendered path equals ``text``."""
        return self.to_string() == text

    def finalize(self) -> RawString:
        """Render the path as a ``RawString`` attribute value."""
        return RawString(self.to_string())

    def to_attribute_value(self) -> RawString:
        """Hook used by ``SVGElement.set`` to accept a path directly."""
        return self.finalize()

    def __str__(self) -> str:
        return self.to_string()

    def __len__(self) -> int:
        return len(self.commands)

    def __iter__(self) -> Iterator[PathCommand]:
        return iter(self.commands)
