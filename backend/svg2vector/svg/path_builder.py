"""Fluent builder for path-command strings (the pathData mini-language).

Purely syntactic: values are formatted, never validated.
"""

from __future__ import annotations

import math


def format_number(value: float) -> str:
    """Format a coordinate the way the target format expects.

    Integral values drop the decimal part (``10.0`` → ``"10"``, ``-0.0`` →
    ``"0"``); everything else uses the shortest round-tripping repr.
    """
    if isinstance(value, bool):
        value = int(value)
    if isinstance(value, int):
        return str(value)
    if math.isfinite(value) and value == int(value):
        return str(int(value))
    return repr(float(value))


def arc_flags(large_arc: bool, sweep: bool, clockwise: bool) -> tuple[int, int]:
    """Return ``(large_arc_flag, sweep_flag)`` for a relative arc.

    The sweep flag is set when ``sweep`` and ``clockwise`` agree.
    """
    large_arc_flag = 1 if large_arc else 0
    sweep_flag = 1 if (sweep and clockwise) or (not sweep and not clockwise) else 0
    return large_arc_flag, sweep_flag


class PathBuilder:
    """Append-only path command builder; every command method returns ``self``."""

    def __init__(self) -> None:
        self._commands: list[str] = []

    def _point(self, command: str, x: float, y: float) -> PathBuilder:
        self._commands.append(f"{command}{format_number(x)},{format_number(y)}")
        return self

    def absolute_move_to(self, x: float, y: float) -> PathBuilder:
        return self._point("M", x, y)

    def relative_move_to(self, x: float, y: float) -> PathBuilder:
        return self._point("m", x, y)

    def absolute_line_to(self, x: float, y: float) -> PathBuilder:
        return self._point("L", x, y)

    def relative_line_to(self, x: float, y: float) -> PathBuilder:
        return self._point("l", x, y)

    def relative_horizontal_to(self, x: float) -> PathBuilder:
        self._commands.append(f"h{format_number(x)}")
        return self

    def relative_vertical_to(self, y: float) -> PathBuilder:
        self._commands.append(f"v{format_number(y)}")
        return self

    def relative_arc_to(
        self,
        rx: float,
        ry: float,
        large_arc: bool,
        sweep: bool,
        clockwise: bool,
        x: float,
        y: float,
    ) -> PathBuilder:
        large_arc_flag, sweep_flag = arc_flags(large_arc, sweep, clockwise)
        self._commands.append(
            f"a{format_number(rx)},{format_number(ry)} 0 {large_arc_flag},{sweep_flag} "
            f"{format_number(x)},{format_number(y)}"
        )
        return self

    def relative_close(self) -> PathBuilder:
        self._commands.append("z")
        return self

    def render(self) -> str:
        return " ".join(self._commands)

    def reset(self) -> PathBuilder:
        self._commands = []
        return self

    def __str__(self) -> str:
        return self.render()

    def __len__(self) -> int:
        return len(self._commands)
