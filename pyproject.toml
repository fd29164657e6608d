[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minesolve"
version = "0.1.0"
description = "Minesweeper board solver that finds mine placements by backtracking and replays the search step by step"
requires-python = ">=3.10"
dependencies = []
keywords = ["minesweeper", "backtracking", "solver", "puzzle"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
minesolve = "minesolve.app:main"

[tool.hatch.build.targets.wheel]
packages = ["minesolve"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
