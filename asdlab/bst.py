"""Unbalanced binary search tree of integer keys, with a command-script driver."""

from __future__ import annotations

import random
import re
import sys
from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass(eq=False)
class BSTNode:
    """A tree node; ``parent`` is None for the root."""

    key: int
    parent: BSTNode | None = field(default=None, repr=False)
    left: BSTNode | None = field(default=None, repr=False)
    right: BSTNode | None = field(default=None, repr=False)


class BST:
    """Binary search tree without duplicate keys.

    Keys in a node's left subtree are smaller than the node's key and
    keys in its right subtree are larger.
    """

    def __init__(self) -> None:
        self.root: BSTNode | None = None
        self._size = 0

    def clear(self) -> None:
        """Remove every node."""
        self.root = None
        self._size = 0

    def insert(self, key: int) -> bool:
        """Insert ``key``; return False if it was already present."""
        parent: BSTNode | None = None
        node = self.root
        while node is not None:
            if key == node.key:
                return False
            parent = node
            node = node.right if node.key < key else node.left
        new = BSTNode(key, parent=parent)
        if parent is None:
            self.root = new
        elif parent.key < key:
            parent.right = new
        else:
            parent.left = new
        self._size += 1
        return True

    def search(self, key: int) -> BSTNode | None:
        """Return the node holding ``key``, or None if there is none."""
        node = self.root
        while node is not None and node.key != key:
            node = node.right if node.key < key else node.left
        return node

    def delete(self, node: BSTNode) -> None:
        """Remove ``node``, which must belong to this tree.

        A node with two children takes the smallest key of its right
        subtree, and the node that held that key is removed instead.
        """
        top = node
        while top.parent is not None:
            top = top.parent
        if top is not self.root:
            raise ValueError("node does not belong to this tree")

        if node.left is not None and node.right is not None:
            successor = node.right
            while successor.left is not None:
                successor = successor.left
            node.key = successor.key
            node = successor

        child = node.left if node.left is not None else node.right
        parent = node.parent
        if parent is None:
            self.root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child
        if child is not None:
            child.parent = parent
        node.parent = node.left = node.right = None
        self._size -= 1

    def __len__(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self.root is None

    def height(self) -> int:
        """Return the number of edges on the longest root-to-leaf path (-1 if empty)."""

        def rec(node: BSTNode | None) -> int:
            if node is None:
                return -1
            return max(rec(node.left), rec(node.right)) + 1

        return rec(self.root)

    def format(self) -> str:
        """Return the tree as nested ``(key left right)`` groups; ``()`` is empty."""

        def rec(node: BSTNode | None) -> str:
            if node is None:
                return "()"
            return f"({node.key} {rec(node.left)} {rec(node.right)})"

        return rec(self.root)

    def pretty_format(self) -> str:
        """Return the tree rotated 90 degrees, one key per line, 3 spaces per level."""
        lines: list[str] = []

        def rec(node: BSTNode | None, depth: int) -> None:
            if node is None:
                return
            rec(node.right, depth + 1)
            lines.append(" " * (3 * depth) + f"{node.key}\n")
            rec(node.left, depth + 1)

        rec(self.root, 0)
        return "".join(lines)


_PROB_INS = 44
_PROB_DEL = 24
_PROB_SEA = 20
_PROB_HEI = 5
_PROB_SIZ = 5


def generate_input(nops: int) -> Iterator[str]:
    """Yield ``nops`` random command lines seeded by ``nops``, then a final ``s``."""
    rng = random.Random(nops)
    for _ in range(nops):
        coin = rng.randint(0, 99)
        val = rng.randint(0, 99)
        if coin < _PROB_INS:
            yield f"+ {val}"
        elif coin < _PROB_INS + _PROB_DEL:
            yield f"- {val}"
        elif coin < _PROB_INS + _PROB_DEL + _PROB_SEA:
            yield f"? {val}"
        elif coin < _PROB_INS + _PROB_DEL + _PROB_SEA + _PROB_HEI:
            yield "h"
        elif coin < _PROB_INS + _PROB_DEL + _PROB_SEA + _PROB_HEI + _PROB_SIZ:
            yield "s"
        else:
            yield "p"
    yield "s"


_INT = re.compile(r"\s*([+-]?\d+)")


def _tokens(text: str) -> Iterator[tuple[str, int | None]]:
    """Yield (command, argument) pairs; the argument is None for h, s and p."""
    pos = 0
    length = len(text)
    while True:
        while pos < length and text[pos].isspace():
            pos += 1
        if pos >= length:
            return
        op = text[pos]
        pos += 1
        if op in "+-?":
            m = _INT.match(text, pos)
            if m is None:
                raise ValueError(f"missing key after {op}")
            pos = m.end()
            yield op, int(m.group(1))
        else:
            yield op, None


def run_commands(text: str) -> Iterator[str]:
    """Run a tree command script on an empty tree, yielding each step's output.

    Commands: ``+ k``, ``- k``, ``? k``, ``h``, ``s`` and ``p``.
    Raises ValueError on an unknown command.
    """
    tree = BST()
    for op, key in _tokens(text):
        if op == "+":
            result = "OK" if tree.insert(key) else "ALREADY PRESENT"
            yield f"bst_insert(T, {key}) = {result}\n"
        elif op == "-":
            node = tree.search(key)
            if node is not None:
                tree.delete(node)
                result = "OK"
            else:
                result = "NOT FOUND"
            yield f"bst_delete(T, {key}) = {result}\n"
        elif op == "?":
            result = "FOUND" if tree.search(key) is not None else "NOT FOUND"
            yield f"bst_search(T, {key}) = {result}\n"
        elif op == "h":
            yield f"bst_height(T) = {tree.height()}\n"
        elif op == "s":
            yield f"bst_size(T) = {len(tree)}\n"
        elif op == "p":
            yield tree.pretty_format()
        else:
            raise ValueError(f"Unknown command {op}")


def main(argv: list[str] | None = None) -> int:
    """Run a command script (``-`` for stdin), or ``inputgen N`` to print a random one."""
    args = sys.argv[1:] if argv is None else argv
    if not 1 <= len(args) <= 2:
        print("Usage: bst filename", file=sys.stderr)
        return 1

    if args[0] == "inputgen":
        try:
            nops = int(args[1])
        except (IndexError, ValueError):
            print("Usage: bst inputgen nops", file=sys.stderr)
            return 1
        for line in generate_input(nops):
            print(line)
        return 0

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
    except ValueError as exc:
        print(exc)
        return 1
    return 0