"""Recursive merge sort of integer lists, checked against the built-in sort."""

from __future__ import annotations

import random
import sys
import time
from collections.abc import Sequence


def merge(values: list[int], p: int, q: int, r: int) -> None:
    """Merge the sorted slices ``values[p..q]`` and ``values[q+1..r]`` in place.

    Both bounds are inclusive.
    """
    merged: list[int] = []
    i, j = p, q + 1
    while i <= q and j <= r:
        if values[i] < values[j]:
            merged.append(values[i])
            i += 1
        else:
            merged.append(values[j])
            j += 1
    merged.extend(values[i:q + 1])
    merged.extend(values[j:r + 1])
    values[p:r + 1] = merged


def merge_sort(values: list[int], p: int, r: int) -> None:
    """Sort ``values[p..r]`` (bounds inclusive) in place."""
    if p < r:
        q = (p + r) // 2
        merge_sort(values, p, q)
        merge_sort(values, q + 1, r)
        merge(values, p, q, r)


def sort(values: list[int]) -> None:
    """Sort the whole list in place with merge sort."""
    merge_sort(values, 0, len(values) - 1)


def random_shuffle(values: list[int], rng: random.Random | None = None) -> None:
    """Shuffle ``values`` in place, swapping each slot with a later random one."""
    rng = rng if rng is not None else random.Random()
    n = len(values)
    for i in range(n - 1):
        j = rng.randint(i, n - 1)
        values[i], values[j] = values[j], values[i]


def first_difference(first: Sequence[int], second: Sequence[int]) -> int | None:
    """Return the first index where the sequences differ, or None if they match."""
    if len(first) != len(second):
        raise ValueError("sequences have different lengths")
    return next((i for i, (a, b) in enumerate(zip(first, second)) if a != b), None)


def check_sort(values: list[int]) -> bool:
    """Sort ``values`` in place, compare with the built-in sort and report."""
    expected = sorted(values)
    start = time.process_time()
    sort(values)
    elapsed = time.process_time() - start
    diff = first_difference(values, expected)
    if diff is None:
        print(f"Test OK ({elapsed:f} seconds)")
        return True
    print(f"Test FALLITO: v[{diff}]={values[diff]}, atteso={expected[diff]}")
    return False


def main(argv: list[str] | None = None) -> int:
    """Run the built-in sample checks."""
    samples = [
        [0, 8, 1, 7, 2, 6, 3, 5, 4],
        [0, 1, 0, 6, 10, 10, 0, 0, 1, 2, 5, 10, 9, 6, 2, 3, 3, 1, 7],
        [-1, -3, -2],
        [2, 2, 2],
    ]
    for sample in samples:
        check_sort(sample)
    return 0


if __name__ == "__main__":
    sys.exit(main())