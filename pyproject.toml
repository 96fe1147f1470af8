[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "adtlab"
version = "1.0.0"
description = "Classic abstract data types (queue, stack, circular list, graph, ring buffer) with small command-line exercises built on them"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data structures",
    "queue",
    "stack",
    "linked list",
    "circular list",
    "ring buffer",
    "graph",
    "depth-first search",
    "breadth-first search",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
adtlab-delivery = "adtlab.delivery:main"
adtlab-search = "adtlab.search:main"
adtlab-grades = "adtlab.grades:main"

[tool.hatch.build.targets.wheel]
packages = ["adtlab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
