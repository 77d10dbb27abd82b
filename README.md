# asdlab

A small collection of classic algorithms and data-structure exercises:

- `asdlab.minheap` – `MinHeap`, a binary min-heap of `(key, prio)` pairs
  with a fixed capacity. Keys are the integers `0 .. size-1`, each present
  at most once, and priorities are arbitrary real numbers. Supports
  insertion, removal of the minimum and changing the priority of a key.
- `asdlab.bst` – `BST`, an unbalanced binary search tree of integer keys
  without duplicates: insertion, search, deletion, size, height and
  printing.
- `asdlab.merge_sort` – recursive merge sort of integer lists, with a check
  against the built-in `sorted`.
- `asdlab.psgraph` – `PSGraph`, a tiny turtle-graphics library that writes
  PostScript.
- `asdlab.koch` – the Koch curve and Koch snowflake drawn with `PSGraph`.
- `asdlab.hello` – a greeting.
- `asdlab.eggs` – Fibonacci's egg-basket puzzle from *Liber Abbaci*.

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Commands

### Min-heap

```
asdlab-minheap FILE
```

Reads a command script from `FILE` (`-` reads standard input). The first
value is the capacity of the heap; then each command is one of:

| Command       | Meaning                                   |
|---------------|-------------------------------------------|
| `+ key prio`  | insert `key` with priority `prio`         |
| `-`           | remove the pair with minimum priority     |
| `?`           | show the key with minimum priority        |
| `c key prio`  | change the priority of `key`              |
| `s`           | show the number of elements               |
| `p`           | print the heap contents level by level    |

Each step is echoed, for example `minheap_insert(h, 3, 2.500000)` or
`minheap_delete_min(h) = 3`. A missing size, an unknown command, or an
operation the heap refuses (full or empty heap, bad or duplicate key)
stops the run with a message on standard error and exit status 1.

### Binary search tree

```
asdlab-bst FILE
asdlab-bst inputgen N
```

Reads a command script from `FILE` (`-` reads standard input), or with
`inputgen` prints a random command script of `N` operations followed by a
final `s`. The random script is seeded by `N`, so the same `N` always
gives the same script.

| Command | Meaning                          |
|---------|----------------------------------|
| `+ k`   | insert `k` if not present        |
| `- k`   | delete `k` if present            |
| `? k`   | tell whether `k` is present      |
| `s`     | show the number of nodes         |
| `h`     | show the height of the tree      |
| `p`     | pretty-print the tree            |

Output lines look like `bst_insert(T, 5) = OK`,
`bst_insert(T, 5) = ALREADY PRESENT`, `bst_search(T, 7) = NOT FOUND`.
An unknown command prints `Unknown command X` and exits with status 1.

The pretty printer rotates the tree by 90 degrees, right subtree on top,
indenting three spaces per level:

```
   55
12
      9
   5
      -3
```

### Koch snowflake

```
asdlab-koch [OUTPUT]
```

Writes a Koch snowflake of order 4 with sides of 100 mm as PostScript to
`OUTPUT`, or to `koch.ps` in the current directory if no path is given.
The drawing is only written to a file; viewing or printing it is left to
a PostScript viewer.

### Others

```
asdlab-hello NAME        # prints "Hello, NAME!"
asdlab-eggs              # prints the smallest number of eggs in the basket
asdlab-merge-sort        # merge-sorts sample lists and reports "Test OK" or the first mismatch
```

## Library use

### Min-heap

```python
from asdlab.minheap import MinHeap

heap = MinHeap(8)
heap.insert(3, 2.5)
heap.insert(5, -1.0)
heap.change_prio(3, -4.0)
print(heap.min())         # 3
print(heap.delete_min())  # 3
print(len(heap))          # 1
```

`MinHeap` also has `clear()`, `is_empty()`, `is_full()` and `format()`,
which returns a level-by-level dump of the heap. `min()` and
`delete_min()` on an empty heap, and `insert()` on a full one, raise
`IndexError`; a key outside `0 .. size-1` or a key already present raises
`ValueError`; `change_prio()` on a key not in the heap raises `KeyError`.

`asdlab.minheap.run_commands(text)` runs a command script given as a
string and yields the output of each step.

### Binary search tree

```python
from asdlab.bst import BST

tree = BST()
for key in (12, 5, 55, -3, 9):
    tree.insert(key)        # True if inserted, False if already present
node = tree.search(5)       # a BSTNode, or None
if node is not None:
    tree.delete(node)
print(len(tree), tree.height())
print(tree.format())        # nested "(key left right)" groups
print(tree.pretty_format())
```

The height of an empty tree is `-1` and of a single node `0`. Deleting a
node with two children moves the smallest key of its right subtree into
it. `delete()` raises `ValueError` for a node that does not belong to the
tree. `asdlab.bst.generate_input(nops)` yields the lines of a random
command script and `asdlab.bst.run_commands(text)` runs one.

### Merge sort

```python
from asdlab.merge_sort import sort, first_difference

values = [0, 8, 1, 7, 2, 6, 3, 5, 4]
sort(values)                                   # sorts in place
print(first_difference(values, sorted(values)))  # None
```

`merge(values, p, q, r)` and `merge_sort(values, p, r)` work on inclusive
index ranges, `random_shuffle(values, rng)` shuffles in place, and
`check_sort(values)` sorts, compares with `sorted` and prints the result.

### Turtle graphics and Koch curves

```python
from asdlab.psgraph import PSGraph
from asdlab.koch import koch, snowflake

with PSGraph.open("snowflake.ps") as graph:
    snowflake(graph, 50, 3)
```

`PSGraph` can also be built on any open text stream: `PSGraph(stream)`.
The turtle starts facing right; `draw` and `move` take lengths in
millimetres and `turn` turns clockwise by the given angle in degrees
(counter-clockwise if negative). `set_color(r, g, b)` takes components in
`[0, 1]`. `save_state()` returns a `TurtleState` that `restore_state()`
returns to. `close()` (or leaving the `with` block) finishes the page and
closes the file if the graph opened it.

`koch(graph, x, n)` draws a Koch curve of order `n` with base `x`
millimetres; `snowflake(graph, x, n)` draws three of them as a triangle.

### Others

```python
from asdlab.hello import greeting
from asdlab.eggs import smallest_egg_count

print(greeting("world"))      # Hello, world!
print(smallest_egg_count())
```