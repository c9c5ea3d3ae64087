"""Day 6: follow the lab guard's patrol."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

Pos = tuple[int, int]


class Direction(Enum):
    """Heading of the guard, valued by its unit step."""

    LEFT = (-1, 0)
    RIGHT = (1, 0)
    UP = (0, -1)
    DOWN = (0, 1)

    def turn_right(self) -> Direction:
        """The heading after a quarter turn clockwise."""
        return _TURNS[self]


_TURNS = {
    Direction.LEFT: Direction.UP,
    Direction.UP: Direction.RIGHT,
    Direction.RIGHT: Direction.DOWN,
    Direction.DOWN: Direction.LEFT,
}

_GUARD = {
    "<": Direction.LEFT,
    "^": Direction.UP,
    ">": Direction.RIGHT,
    "v": Direction.DOWN,
}


@dataclass(frozen=True)
class Lab:
    """The lab floor, its obstacles and the guard's starting state."""

    width: int
    height: int
    obstacles: frozenset[Pos]
    guard: Pos
    direction: Direction

    def in_bounds(self, pos: Pos) -> bool:
        x, y = pos
        return 0 <= x < self.width and 0 <= y < self.height


def parse(text: str) -> Lab:
    """Parse the map; ``#`` is an obstacle and an arrow marks the guard."""
    rows = [line for line in text.splitlines() if line]
    obstacles = set()
    guard: tuple[Pos, Direction] | None = None
    for y, row in enumerate(rows):
        for x, cell in enumerate(row):
            if cell == "#":
                obstacles.add((x, y))
            elif cell in _GUARD:
                guard = ((x, y), _GUARD[cell])
            elif cell != ".":
                raise ValueError(f"unexpected map cell {cell!r} at {(x, y)}")
    if guard is None:
        raise ValueError("no guard on the map")
    return Lab(
        width=len(rows[0]),
        height=len(rows),
        obstacles=frozenset(obstacles),
        guard=guard[0],
        direction=guard[1],
    )


def _step(pos: Pos, direction: Direction) -> Pos:
    dx, dy = direction.value
    return pos[0] + dx, pos[1] + dy


def guard_path(lab: Lab) -> set[Pos]:
    """Every cell the guard visits before leaving the map."""
    pos, direction = lab.guard, lab.direction
    visited = {pos}
    states = {(pos, direction)}
    while True:
        ahead = _step(pos, direction)
        if not lab.in_bounds(ahead):
            return visited
        if ahead in lab.obstacles:
            direction = direction.turn_right()
        else:
            pos = ahead
            visited.add(pos)
        state = (pos, direction)
        if state in states:
            raise ValueError("the guard never leaves the map")
        states.add(state)


def is_looping(lab: Lab, obstacle: Pos) -> bool:
    """Whether one extra obstacle traps the guard in a loop."""
    obstacles = lab.obstacles | {obstacle}
    pos, direction = lab.guard, lab.direction
    traversed: dict[Pos, Direction] = {}
    turns = 0
    while True:
        ahead = _step(pos, direction)
        if not lab.in_bounds(ahead):
            return False
        if ahead in obstacles:
            direction = direction.turn_right()
            turns += 1
            if turns == 4:
                return True
            continue
        turns = 0
        pos = ahead
        if traversed.get(pos) is direction:
            return True
        traversed[pos] = direction


def part_one(lab: Lab) -> int:
    """Number of distinct cells the guard visits."""
    return len(guard_path(lab))


def part_two(lab: Lab) -> int:
    """Number of positions where one new obstacle makes the guard loop."""
    candidates = guard_path(lab) - {lab.guard}
    return sum(is_looping(lab, pos) for pos in candidates)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Solve day 6.")
    parser.add_argument("input", nargs="?", default="input", help="puzzle input file")
    args = parser.parse_args(argv)
    try:
        text = Path(args.input).read_text()
    except FileNotFoundError:
        print(f"file not found: {args.input}", file=sys.stderr)
        return 1
    lab = parse(text)
    print(f"res gray star : {part_one(lab)}")
    print(f"res gold star : {part_two(lab)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())