"""Binary min-heap of (key, priority) pairs with bounded integer keys."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterator
from dataclasses import dataclass


@dataclass
class _Elem:
    key: int
    prio: float


class MinHeap:
    """Min-heap holding at most ``size`` pairs whose keys lie in ``0 .. size-1``.

    Each key appears at most once; the pair with the smallest priority is on top.
    """

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ValueError("heap size must be positive")
        self.size = size
        self._heap: list[_Elem] = []
        self._pos: list[int | None] = [None] * size

    def clear(self) -> None:
        """Remove every pair."""
        self._heap.clear()
        self._pos = [None] * self.size

    def is_empty(self) -> bool:
        return not self._heap

    def is_full(self) -> bool:
        return len(self._heap) == self.size

    def __len__(self) -> int:
        return len(self._heap)

    def min(self) -> int:
        """Return the key with the smallest priority without removing it."""
        if self.is_empty():
            raise IndexError("heap is empty")
        return self._heap[0].key

    def insert(self, key: int, prio: float) -> None:
        """Add ``key`` with priority ``prio``."""
        if self.is_full():
            raise IndexError("heap is full")
        self._check_key(key)
        if self._pos[key] is not None:
            raise ValueError(f"key {key} is already in the heap")
        self._heap.append(_Elem(key, prio))
        self._pos[key] = len(self._heap) - 1
        self._move_up(len(self._heap) - 1)

    def delete_min(self) -> int:
        """Remove the pair with the smallest priority and return its key."""
        if self.is_empty():
            raise IndexError("heap is empty")
        top = self._heap[0]
        last = self._heap.pop()
        self._pos[top.key] = None
        if self._heap:
            self._heap[0] = last
            self._pos[last.key] = 0
            self._move_down(0)
        return top.key

    def change_prio(self, key: int, new_prio: float) -> None:
        """Set the priority of ``key``, which must be in the heap."""
        self._check_key(key)
        i = self._pos[key]
        if i is None:
            raise KeyError(key)
        self._heap[i].prio = new_prio
        if self._move_up(i) == i:
            self._move_down(i)

    def format(self) -> str:
        """Return a level-by-level dump of the heap contents."""
        lines = [
            "",
            "** Contenuto dello heap:",
            "",
            f"n={len(self._heap)} size={self.size}",
            "Contenuto dell'array heap[] (stampato a livelli):",
        ]
        start, width = 0, 1
        while start < len(self._heap):
            level = self._heap[start:start + width]
            lines.append("".join(
                f"h[{start + j:2d}]=({e.key:2d}, {e.prio:6.2f}) "
                for j, e in enumerate(level)
            ))
            start += width
            width *= 2
        lines.extend(["", "", "** Fine contenuto dello heap", "", ""])
        return "\n".join(lines)

    def _check_key(self, key: int) -> None:
        if not 0 <= key < self.size:
            raise ValueError(f"key {key} out of range 0..{self.size - 1}")

    def _swap(self, i: int, j: int) -> None:
        heap = self._heap
        heap[i], heap[j] = heap[j], heap[i]
        self._pos[heap[i].key] = i
        self._pos[heap[j].key] = j

    def _min_child(self, i: int) -> int | None:
        n = len(self._heap)
        left, right = 2 * i + 1, 2 * i + 2
        if left >= n:
            return None
        if right < n and self._heap[right].prio < self._heap[left].prio:
            return right
        return left

    def _move_up(self, i: int) -> int:
        while i > 0:
            parent = (i + 1) // 2 - 1
            if not self._heap[i].prio < self._heap[parent].prio:
                break
            self._swap(i, parent)
            i = parent
        return i

    def _move_down(self, i: int) -> int:
        child = self._min_child(i)
        while child is not None and self._heap[i].prio > self._heap[child].prio:
            self._swap(i, child)
            i = child
            child = self._min_child(i)
        return i


_INT = re.compile(r"\s*([+-]?\d+)")
_FLOAT = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


class _Scanner:
    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def _match(self, pattern: re.Pattern[str], what: str) -> str:
        m = pattern.match(self._text, self._pos)
        if m is None:
            raise ValueError(f"expected {what}")
        self._pos = m.end()
        return m.group(1)

    def integer(self) -> int:
        return int(self._match(_INT, "an integer"))

    def real(self) -> float:
        return float(self._match(_FLOAT, "a number"))

    def char(self) -> str | None:
        rest = self._text[self._pos:]
        stripped = rest.lstrip()
        if not stripped:
            self._pos = len(self._text)
            return None
        self._pos += len(rest) - len(stripped) + 1
        return stripped[0]


def run_commands(text: str) -> Iterator[str]:
    """Run a heap command script, yielding the output text of each step.

    The script starts with the heap size, followed by commands:
    ``+ key prio``, ``-``, ``?``, ``c key prio``, ``s`` and ``p``.
    Raises ValueError on a missing size or an unknown command.
    """
    scanner = _Scanner(text)
    try:
        size = scanner.integer()
    except ValueError:
        raise ValueError("Missing size") from None
    yield f"minheap_create({size})\n"
    heap = MinHeap(size)

    while (op := scanner.char()) is not None:
        if op == "+":
            key, prio = scanner.integer(), scanner.real()
            yield f"minheap_insert(h, {key}, {prio:f})\n"
            heap.insert(key, prio)
        elif op == "-":
            yield f"minheap_delete_min(h) = {heap.delete_min()}\n"
        elif op == "?":
            yield f"minheap_min(h) = {heap.min()}\n"
        elif op == "c":
            key, prio = scanner.integer(), scanner.real()
            yield f"minheap_change_prio(h, {key}, {prio:f})\n"
            heap.change_prio(key, prio)
        elif op == "s":
            yield f"minheap_get_n(h) = {len(heap)}\n"
        elif op == "p":
            yield heap.format()
        else:
            raise ValueError(f"Unknown command {op}")


def main(argv: list[str] | None = None) -> int:
    """Run the command script named on the command line ("-" for stdin)."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 1:
        print("Usage: minheap inputfile", file=sys.stderr)
        return 1
    source = args[0]
    if source == "-":
        text = sys.stdin.read()
    else:
        try:
            with open(source, encoding="utf-8") as fh:
                text = fh.read()
        except OSError:
            print(f"Can not open {source}", file=sys.stderr)
            return 1
    try:
        for chunk in run_commands(text):
            sys.stdout.write(chunk)
    except (ValueError, IndexError, KeyError) as exc:
        sys.stdout.flush()
        print(exc.args[0] if exc.args else exc, file=sys.stderr)
        return 1
    return 0