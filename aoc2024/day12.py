"""Day 12: price the fences around garden regions."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

Pos = tuple[int, int]

_DIRS = ((0, 1), (1, 0), (0, -1), (-1, 0))


def _add(pos: Pos, delta: Pos) -> Pos:
    return pos[0] + delta[0], pos[1] + delta[1]


def parse(text: str) -> list[str]:
    """Return the non-empty rows of the garden."""
    return [line for line in text.splitlines() if line]


def regions(grid: list[str]) -> list[list[Pos]]:
    """Connected areas of the same plant, each in discovery order."""
    height = len(grid)
    seen: set[Pos] = set()
    found = []
    for y, row in enumerate(grid):
        for x, plant in enumerate(row):
            if (x, y) in seen:
                continue
            seen.add((x, y))
            region = [(x, y)]
            stack = [(x, y)]
            while stack:
                current = stack.pop()
                for delta in _DIRS:
                    nx, ny = _add(current, delta)
                    if (
                        0 <= ny < height
                        and 0 <= nx < len(grid[ny])
                        and (nx, ny) not in seen
                        and grid[ny][nx] == plant
                    ):
                        seen.add((nx, ny))
                        region.append((nx, ny))
                        stack.append((nx, ny))
            found.append(region)
    return found


def perimeter(region: list[Pos]) -> int:
    """Number of plot edges that face outside the region."""
    cells = set(region)
    return sum(_add(plot, delta) not in cells for plot in region for delta in _DIRS)


def borders(region: list[Pos]) -> list[tuple[Pos, list[Pos]]]:
    """The straight sides of a region.

    Each side is given by the direction it faces and the plots along it.
    """
    cells = set(region)
    processed: set[tuple[Pos, Pos]] = set()
    found = []
    for plot in region:
        for delta in _DIRS:
            if _add(plot, delta) in cells or (plot, delta) in processed:
                continue
            plots = []
            stack = [plot]
            while stack:
                current = stack.pop()
                if (current, delta) in processed:
                    continue
                if _add(current, delta) not in cells:
                    for normal in ((-delta[1], delta[0]), (delta[1], -delta[0])):
                        neighbour = _add(current, normal)
                        if neighbour in cells:
                            stack.append(neighbour)
                    plots.append(current)
                processed.add((current, delta))
            found.append((delta, plots))
    return found


def part_one(grid: list[str]) -> int:
    """Fence price by area times perimeter."""
    return sum(len(region) * perimeter(region) for region in regions(grid))


def part_two(grid: list[str]) -> int:
    """Fence price by area times number of sides."""
    return sum(len(region) * len(borders(region)) for region in regions(grid))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Solve day 12.")
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