"""Day 10: score and rate hiking trails on a topographic map."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field
from pathlib import Path

Pos = tuple[int, int]
Step = tuple[Pos, int]

_DIRS = ((0, 1), (1, 0), (0, -1), (-1, 0))
_IMPASSABLE = -1


@dataclass
class Trail:
    """Every step reachable from one trailhead, and the summits reached."""

    head: Step
    tails: list[Step] = field(default_factory=list)
    steps: list[Step] = field(default_factory=list)


def parse(text: str) -> list[list[int]]:
    """Parse the height map; a non-digit cell can never be climbed onto."""
    return [
        [int(cell) if cell.isdigit() else _IMPASSABLE for cell in line]
        for line in text.splitlines()
        if line
    ]


def construct_steps(
    grid: list[list[int]], head: Pos, distinct: bool
) -> tuple[list[Step], list[Step]]:
    """Walk uphill one level at a time from ``head``.

    With ``distinct`` a step already explored is not explored again, so each
    summit counts once; otherwise every distinct path to a summit counts.
    """
    height, width = len(grid), len(grid[0])
    steps: list[Step] = []
    tails: list[Step] = []
    explored: set[Step] = set()
    stack: list[Step] = [(head, 0)]
    while stack:
        current = stack.pop()
        steps.append(current)
        explored.add(current)
        (x, y), level = current
        for dx, dy in _DIRS:
            nx, ny = x + dx, y + dy
            if 0 <= nx < width and 0 <= ny < height and grid[ny][nx] == level + 1:
                step = ((nx, ny), level + 1)
                if distinct and step in explored:
                    continue
                stack.append(step)
                if step[1] == 9:
                    tails.append(step)
    return steps, tails


def trail_tracks(grid: list[list[int]], distinct: bool) -> list[Trail]:
    """One trail per cell of height zero, in reading order."""
    trails = []
    for y, row in enumerate(grid):
        for x, level in enumerate(row):
            if level == 0:
                steps, tails = construct_steps(grid, (x, y), distinct)
                trails.append(Trail(steps[0], tails, steps))
    return trails


def part_one(grid: list[list[int]]) -> int:
    """Sum of trailhead scores: distinct summits reachable."""
    return sum(len(trail.tails) for trail in trail_tracks(grid, True))


def part_two(grid: list[list[int]]) -> int:
    """Sum of trailhead ratings: distinct paths to a summit."""
    return sum(len(trail.tails) for trail in trail_tracks(grid, False))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Solve day 10.")
    parser.add_argument("input", nargs="?", default="input", help="puzzle input file")
    args = parser.parse_args(argv)
    try:
        text = Path(args.input).read_text()
    except FileNotFoundError:
        print(f"file not found: {args.input}", file=sys.stderr)
        return 1
    grid = parse(text)
    print(f"res gray star : {part_one(grid)}")
    print(f"res gold star : {part_two(grid)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())