"""Classic data-structure and algorithm exercises: min-heap, binary search tree, merge sort and Koch curves."""

__version__ = "0.1.0"