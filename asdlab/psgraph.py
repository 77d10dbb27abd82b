"""Turtle graphics that write a PostScript drawing."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TextIO

_MM_PER_POINT = 0.352777778
_START_X = 2 * 72
_START_Y = 7 * 72


@dataclass(frozen=True)
class TurtleState:
    """Position (in points) and heading (in radians) of the turtle."""

    x: float
    y: float
    direction: float


class PSGraph:
    """A PostScript drawing driven by a turtle that starts facing right.

    Lengths are given in millimetres and angles in degrees; positive
    angles turn clockwise.
    """

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._owns_stream = False
        self._closed = False
        self._x = float(_START_X)
        self._y = float(_START_Y)
        self._dir = 0.0
        stream.write("%!PS-Adobe-2.0\n")
        self._emit("moveto")

    @classmethod
    def open(cls, path: str) -> PSGraph:
        """Start a drawing saved to the file at ``path``."""
        stream = open(path, "w", encoding="utf-8")
        graph = cls(stream)
        graph._owns_stream = True
        return graph

    def _emit(self, op: str) -> None:
        if self._closed:
            raise ValueError("graph is closed")
        self._stream.write(f"{int(self._x)} {int(self._y)} {op}\n")

    def _advance(self, length: float) -> None:
        points = length / _MM_PER_POINT
        self._x += points * math.cos(self._dir)
        self._y += points * math.sin(self._dir)

    def draw(self, length: float) -> None:
        """Draw a segment ``length`` millimetres long."""
        if self._closed:
            raise ValueError("graph is closed")
        self._advance(length)
        self._emit("lineto")

    def move(self, length: float) -> None:
        """Move ``length`` millimetres without drawing."""
        if self._closed:
            raise ValueError("graph is closed")
        self._advance(length)
        self._emit("moveto")

    def turn(self, angle: float) -> None:
        """Turn clockwise by ``angle`` degrees (counter-clockwise if negative)."""
        self._dir -= math.pi * angle / 180.0

    def set_color(self, r: float, g: float, b: float) -> None:
        """Set the stroke colour; each component is in [0, 1]."""
        if self._closed:
            raise ValueError("graph is closed")
        self._stream.write(f"stroke\n{r:f} {g:f} {b:f} setrgbcolor\n")
        self.move(0)

    def save_state(self) -> TurtleState:
        """Return the current position and heading."""
        return TurtleState(self._x, self._y, self._dir)

    def restore_state(self, state: TurtleState) -> None:
        """Return the turtle to a previously saved position and heading."""
        self._x, self._y, self._dir = state.x, state.y, state.direction
        self._emit("moveto")

    def close(self) -> None:
        """Finish the drawing; closes the file if this graph opened it."""
        if self._closed:
            return
        self._stream.write("stroke\nshowpage\n")
        self._closed = True
        if self._owns_stream:
            self._stream.close()

    def __enter__(self) -> PSGraph:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()