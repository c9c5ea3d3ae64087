[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aoc2024"
version = "1.0.0"
description = "Solvers for the 2024 Advent of Code puzzles, days 1 to 19."
requires-python = ">=3.10"
dependencies = []
keywords = ["advent-of-code", "puzzles", "aoc", "2024"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Intended Audience :: Developers",
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
aoc2024-day01 = "aoc2024.day01:main"
aoc2024-day02 = "aoc2024.day02:main"
aoc2024-day03 = "aoc2024.day03:main"
aoc2024-day04 = "aoc2024.day04:main"
aoc2024-day05 = "aoc2024.day05:main"
aoc2024-day06 = "aoc2024.day06:main"
aoc2024-day07 = "aoc2024.day07:main"
aoc2024-day08 = "aoc2024.day08:main"
aoc2024-day09 = "aoc2024.day09:main"
aoc2024-day10 = "aoc2024.day10:main"
aoc2024-day11 = "aoc2024.day11:main"
aoc2024-day12 = "aoc2024.day12:main"
aoc2024-day13 = "aoc2024.day13:main"
aoc2024-day14 = "aoc2024.day14:main"
aoc2024-day15 = "aoc2024.day15:main"
aoc2024-day16 = "aoc2024.day16:main"
aoc2024-day17 = "aoc2024.day17:main"
aoc2024-day18 = "aoc2024.day18:main"
aoc2024-day19 = "aoc2024.day19:main"

[tool.hatch.build.targets.wheel]
packages = ["aoc2024"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
