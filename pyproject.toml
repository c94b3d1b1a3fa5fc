[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "puzzlesolve"
version = "0.1.0"
description = "Backtracking solvers for Wordle-style word patterns and worker shift scheduling"
requires-python = ">=3.10"
dependencies = []
keywords = ["wordle", "backtracking", "scheduling", "puzzle", "solver"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
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
puzzlesolve-wordle = "puzzlesolve.wordle:main"
puzzlesolve-schedwork = "puzzlesolve.schedwork:main"

[tool.hatch.build.targets.wheel]
packages = ["puzzlesolve"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
