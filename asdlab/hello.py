"""Greet a name given on the command line."""

from __future__ import annotations

import sys


def greeting(name: str) -> str:
    """Return the greeting for ``name``."""
    return f"Hello, {name}!"


def say_hello(name: str) -> None:
    """Print the greeting for ``name``."""
    print(greeting(name))


def main(argv: list[str] | None = None) -> int:
    """Greet the single name given as argument."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 1:
        print("Usage: hello nome", file=sys.stderr)
        return 1
    say_hello(args[0])
    return 0