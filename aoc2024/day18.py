"""Day 18: escape a memory space where bytes keep falling."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from dataclasses import dataclass, replace
from pathlib import Path

Pos = tuple[int, int]

WIDTH = 71
HEIGHT = 71
THRESHOLD = 1024

_DIRS = ((0, 1), (1, 0), (0, -1), (-1, 0))
_START: Pos = (0, 0)


@dataclass(frozen=True)
class MemorySpace:
    """The grid, the bytes already fallen and those still to fall, in order."""

    width: int
    height: int
    walls: frozenset[Pos]
    falling: tuple[Pos, ...] = ()

    def in_bounds(self, pos: Pos) -> bool:
        x, y = pos
        return 0 <= x < self.width and 0 <= y < self.height


def parse(
    text: str, width: int = WIDTH, height: int = HEIGHT, threshold: int = THRESHOLD
) -> MemorySpace:
    """Parse ``x,y`` lines; the first ``threshold`` bytes have already fallen."""
    coords: list[Pos] = []
    for line in text.splitlines():
        if not line:
            continue
        parts = line.split(",")
        if len(parts) < 2:
            raise ValueError(f"not a coordinate: {line!r}")
        x, y = int(parts[0]), int(parts[1])
        if not (0 <= x < width and 0 <= y < height):
            raise ValueError(f"coordinate {(x, y)} outside the {width}x{height} space")
        coords.append((x, y))
    return MemorySpace(
        width=width,
        height=height,
        walls=frozenset(coords[:threshold]),
        falling=tuple(coords[threshold:]),
    )


def shortest_path(space: MemorySpace) -> list[Pos]:
    """A shortest path from the top-left to the bottom-right corner.

    The cells are listed from the exit back, without the start; the list is
    empty when the exit cannot be reached.
    """
    target = (space.width - 1, space.height - 1)
    previous: dict[Pos, Pos | None] = {_START: None}
    queue = deque([_START])
    while queue:
        pos = queue.popleft()
        if pos == target:
            break
        for dx, dy in _DIRS:
            ahead = (pos[0] + dx, pos[1] + dy)
            if space.in_bounds(ahead) and ahead not in previous and ahead not in space.walls:
                previous[ahead] = pos
                queue.append(ahead)
    if target not in previous:
        return []
    path = []
    cell: Pos | None = target
    while cell is not None and cell != _START:
        path.append(cell)
        cell = previous[cell]
    return path


def part_one(space: MemorySpace) -> int:
    """Fewest steps to the exit, or 0 if it cannot be reached."""
    return len(shortest_path(space))


def part_two(space: MemorySpace) -> Pos:
    """The first falling byte that cuts the exit off, or ``(0, 0)`` if none does."""
    walls = set(space.walls)
    path = set(shortest_path(space))
    for pos in space.falling:
        walls.add(pos)
        if pos in path:
            path = set(shortest_path(replace(space, walls=frozenset(walls))))
            if not path:
                return pos
    return _START


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Solve day 18.")
    parser.add_argument("input", nargs="?", default="input", help="puzzle input file")
    parser.add_argument("--width", type=int, default=WIDTH)
    parser.add_argument("--height", type=int, default=HEIGHT)
    parser.add_argument("--threshold", type=int, default=THRESHOLD)
    args = parser.parse_args(argv)
    try:
        text = Path(args.input).read_text()
    except FileNotFoundError:
        print(f"file not found: {args.input}", file=sys.stderr)
        return 1
    space = parse(text, args.width, args.height, args.threshold)
    print(f"res gray star : {part_one(space)}")
    x, y = part_two(space)
    print(f"res gold star : [{x},{y}]")
    return 0


if __name__ == "__main__":
    sys.exit(main())