[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "asdlab"
version = "0.1.0"
description = "Classic data-structure and algorithm exercises: a binary min-heap, a binary search tree, merge sort, Koch curves in PostScript and small warm-up programs"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data structures",
    "min-heap",
    "binary search tree",
    "merge sort",
    "koch snowflake",
    "turtle graphics",
    "postscript",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
asdlab-minheap = "asdlab.minheap:main"
asdlab-bst = "asdlab.bst:main"
asdlab-koch = "asdlab.koch:main"
asdlab-hello = "asdlab.hello:main"
asdlab-eggs = "asdlab.eggs:main"
asdlab-merge-sort = "asdlab.merge_sort:main"

[tool.hatch.build.targets.wheel]
packages = ["asdlab"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
