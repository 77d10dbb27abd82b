"""Koch curve and Koch snowflake drawn with turtle graphics."""

from __future__ import annotations

import sys

from asdlab.psgraph import PSGraph


def koch(graph: PSGraph, x: float, n: int) -> None:
    """Draw the Koch curve of order ``n`` whose base is ``x`` millimetres."""
    if n == 0:
        graph.draw(x)
        return
    third = x / 3
    koch(graph, third, n - 1)
    graph.turn(-60)
    koch(graph, third, n - 1)
    graph.turn(120)
    koch(graph, third, n - 1)
    graph.turn(-60)
    koch(graph, third, n - 1)


def snowflake(graph: PSGraph, x: float, n: int) -> None:
    """Draw the Koch snowflake: a triangle whose sides are Koch curves."""
    for _ in range(3):
        koch(graph, x, n)
        graph.turn(120)


def main(argv: list[str] | None = None) -> int:
    """Write an order-4 snowflake of side 100 mm to ``koch.ps`` (or the given path)."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) > 1:
        print("Usage: koch [outputfile]", file=sys.stderr)
        return 1
    path = args[0] if args else "koch.ps"
    try:
        graph = PSGraph.open(path)
    except OSError:
        print(f"Can not open {path}. Stop", file=sys.stderr)
        return 1
    with graph:
        snowflake(graph, 100, 4)
    return 0