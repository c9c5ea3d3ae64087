"""Day 14: predict where the bathroom security robots end up."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Iterable
from dataclasses import dataclass, replace
from pathlib import Path

Pos = tuple[int, int]

WIDTH = 101
HEIGHT = 103
BLOB_SIZE = 100
ITERATIONS = 10_000

_ROBOT = re.compile(r"p=(-?\d+),(-?\d+)\s+v=(-?\d+),(-?\d+)")
_DIRS = ((0, 1), (1, 0), (0, -1), (-1, 0))


@dataclass(frozen=True)
class Robot:
    """A robot's position and its velocity per second."""

    pos: Pos
    vel: Pos

    def moved(self, steps: int, width: int = WIDTH, height: int = HEIGHT) -> Robot:
        """The robot after ``steps`` seconds, wrapping around the edges."""
        x = (self.pos[0] + self.vel[0] * steps) % width
        y = (self.pos[1] + self.vel[1] * steps) % height
        return replace(self, pos=(x, y))


def parse(text: str) -> list[Robot]:
    """Parse ``p=x,y v=dx,dy`` lines."""
    robots = []
    for line in text.splitlines():
        if not line:
            continue
        match = _ROBOT.search(line)
        if match is None:
            raise ValueError(f"not a robot: {line!r}")
        px, py, vx, vy = (int(group) for group in match.groups())
        robots.append(Robot((px, py), (vx, vy)))
    return robots


def has_big_blob(occupied: Iterable[Pos], width: int = WIDTH, height: int = HEIGHT) -> bool:
    """Whether some connected group of occupied cells holds at least 100 cells."""
    remaining = {(x, y) for x, y in occupied if 0 <= x < width and 0 <= y < height}
    while remaining:
        stack = [remaining.pop()]
        size = 0
        while stack:
            x, y = stack.pop()
            size += 1
            for dx, dy in _DIRS:
                neighbour = (x + dx, y + dy)
                if neighbour in remaining:
                    remaining.remove(neighbour)
                    stack.append(neighbour)
        if size >= BLOB_SIZE:
            return True
    return False


def part_one(robots: list[Robot], width: int = WIDTH, height: int = HEIGHT) -> int:
    """Safety factor after 100 seconds: product of the robot counts per quadrant."""
    mid_x, mid_y = width // 2, height // 2
    quadrants = [0, 0, 0, 0]
    for robot in robots:
        x, y = robot.moved(100, width, height).pos
        if x == mid_x or y == mid_y:
            continue
        quadrants[(x > mid_x) + 2 * (y > mid_y)] += 1
    first, second, third, fourth = quadrants
    return first * second * third * fourth


def part_two(
    robots: list[Robot],
    width: int = WIDTH,
    height: int = HEIGHT,
    iterations: int = ITERATIONS,
) -> int:
    """First second at which the robots form a big blob, or 0 if none does."""
    current = list(robots)
    for second in range(1, iterations + 1):
        current = [robot.moved(1, width, height) for robot in current]
        if has_big_blob((robot.pos for robot in current), width, height):
            return second
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Solve day 14.")
    parser.add_argument("input", nargs="?", default="input", help="puzzle input file")
    parser.add_argument("--width", type=int, default=WIDTH)
    parser.add_argument("--height", type=int, default=HEIGHT)
    args = parser.parse_args(argv)
    try:
        text = Path(args.input).read_text()
    except FileNotFoundError:
        print(f"file not found: {args.input}", file=sys.stderr)
        return 1
    robots = parse(text)
    print(f"res gray star : {part_one(robots, args.width, args.height)}")
    print(f"res gold star : {part_two(robots, args.width, args.height)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())