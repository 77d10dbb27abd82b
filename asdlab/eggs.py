"""Fibonacci's egg basket puzzle."""

from __future__ import annotations

import itertools
import sys


def _fits(n: int) -> bool:
    return all(n % d == 1 for d in range(2, 7)) and n % 7 == 0


def smallest_egg_count() -> int:
    """Return the smallest n > 0 leaving 1 when counted by 2..6 and 0 by 7."""
    return next(n for n in itertools.count(1) if _fits(n))


def main(argv: list[str] | None = None) -> int:
    """Solve the puzzle and print the answer; command-line arguments are ignored."""
    count = smallest_egg_count()
    sys.stdout.write(f"Il numero minimo di uova è: {count}\n ")
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())