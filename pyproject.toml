[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "advent2024"
version = "0.1.0"
description = "Solvers for Advent of Code 2024 puzzles, days 1 to 15"
requires-python = ">=3.10"
keywords = ["advent-of-code", "puzzles", "aoc2024"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: Developers",
    "Topic :: Games/Entertainment :: Puzzle Games",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["advent2024"]

[tool.pytest.ini_options]
addopts = "-ra"
