"""Day 15: a robot pushing boxes around a warehouse."""

from __future__ import annotations

import argparse
import copy
import sys
from dataclasses import dataclass, field
from pathlib import Path

Pos = tuple[int, int]

WALL = "#"
BOX = "O"
EMPTY = "."
BOX_LEFT = "["
BOX_RIGHT = "]"
ROBOT = "@"

_MOVES: dict[str, Pos] = {"^": (0, -1), ">": (1, 0), "v": (0, 1), "<": (-1, 0)}
_WIDE: dict[str, str] = {WALL: WALL * 2, BOX: BOX_LEFT + BOX_RIGHT, EMPTY: EMPTY * 2}


def _add(pos: Pos, delta: Pos) -> Pos:
    return pos[0] + delta[0], pos[1] + delta[1]


def _is_horizontal(direction: Pos) -> bool:
    return direction in ((1, 0), (-1, 0))


class _Grid:
    grid: list[list[str]]

    def _in_bounds(self, pos: Pos) -> bool:
        x, y = pos
        return 0 <= y < len(self.grid) and 0 <= x < len(self.grid[0])

    def _cell(self, pos: Pos) -> str:
        return self.grid[pos[1]][pos[0]]

    def _set(self, pos: Pos, value: str) -> None:
        self.grid[pos[1]][pos[0]] = value

    def _gps(self, marker: str) -> int:
        return sum(
            100 * y + x
            for y, row in enumerate(self.grid)
            for x, cell in enumerate(row)
            if cell == marker
        )


@dataclass
class Warehouse(_Grid):
    """Warehouse with single-cell boxes."""

    grid: list[list[str]]
    robot: Pos
    commands: list[Pos] = field(default_factory=list)

    def apply(self, direction: Pos) -> None:
        """Move the robot one step, pushing any row of boxes ahead of it."""
        ahead = _add(self.robot, direction)
        if not self._in_bounds(ahead):
            return
        cell = self._cell(ahead)
        if cell == BOX:
            if not self._push(ahead, direction):
                return
            self._set(ahead, EMPTY)
        elif cell != EMPTY:
            return
        self.robot = ahead

    def _push(self, pos: Pos, direction: Pos) -> bool:
        while True:
            pos = _add(pos, direction)
            if not self._in_bounds(pos) or self._cell(pos) == WALL:
                return False
            if self._cell(pos) == EMPTY:
                self._set(pos, BOX)
                return True

    def gps_sum(self) -> int:
        """Sum of ``100 * row + column`` over every box."""
        return self._gps(BOX)


@dataclass
class WideWarehouse(_Grid):
    """Warehouse twice as wide, with two-cell boxes."""

    grid: list[list[str]]
    robot: Pos
    commands: list[Pos] = field(default_factory=list)

    def _partner(self, pos: Pos) -> Pos:
        offset = 1 if self._cell(pos) == BOX_LEFT else -1
        return pos[0] + offset, pos[1]

    def apply(self, direction: Pos) -> None:
        """Move the robot one step, pushing every box it would hit."""
        ahead = _add(self.robot, direction)
        if not self._in_bounds(ahead):
            return
        cell = self._cell(ahead)
        if cell in (BOX_LEFT, BOX_RIGHT):
            if _is_horizontal(direction):
                if not self.can_move(ahead, direction):
                    return
                self.move_all(ahead, direction)
            else:
                partner = self._partner(ahead)
                if not (self.can_move(ahead, direction) and self.can_move(partner, direction)):
                    return
                self.move_all(ahead, direction)
                self.move_all(partner, direction)
            self._set(ahead, EMPTY)
        elif cell != EMPTY:
            return
        self.robot = ahead

    def can_move(self, pos: Pos, direction: Pos) -> bool:
        """Whether the content of ``pos`` can shift one step."""
        ahead = _add(pos, direction)
        if not self._in_bounds(ahead):
            return False
        cell = self._cell(ahead)
        if cell == EMPTY:
            return True
        if cell not in (BOX_LEFT, BOX_RIGHT):
            return False
        if _is_horizontal(direction):
            return self.can_move(ahead, direction)
        return self.can_move(ahead, direction) and self.can_move(self._partner(ahead), direction)

    def move_all(self, pos: Pos, direction: Pos) -> None:
        """Shift the content of ``pos`` one step, pushing what lies ahead."""
        ahead = _add(pos, direction)
        if not self._in_bounds(ahead):
            return
        cell = self._cell(ahead)
        if _is_horizontal(direction):
            if cell != EMPTY:
                self.move_all(ahead, direction)
        elif cell in (BOX_LEFT, BOX_RIGHT):
            partner = self._partner(ahead)
            self.move_all(ahead, direction)
            self.move_all(partner, direction)
        self._set(ahead, self._cell(pos))
        self._set(pos, EMPTY)

    def gps_sum(self) -> int:
        """Sum of ``100 * row + column`` over the left edge of every box."""
        return self._gps(BOX_LEFT)


def _sections(text: str) -> tuple[list[str], list[Pos]]:
    rows: list[str] = []
    commands: list[Pos] = []
    in_commands = False
    for line in text.splitlines():
        if not line:
            in_commands = True
        elif in_commands:
            commands.extend(_MOVES[char] for char in line if char in _MOVES)
        else:
            rows.append(line)
    return rows, commands


def parse(text: str) -> Warehouse:
    """Parse the map and the robot's moves."""
    rows, commands = _sections(text)
    grid: list[list[str]] = []
    robot: Pos | None = None
    for y, line in enumerate(rows):
        row = []
        for x, char in enumerate(line):
            if char == ROBOT:
                robot = (x, y)
                row.append(EMPTY)
            elif char in (WALL, BOX, EMPTY):
                row.append(char)
        grid.append(row)
    if robot is None:
        raise ValueError("no robot on the map")
    return Warehouse(grid, robot, commands)


def parse_wide(text: str) -> WideWarehouse:
    """Parse the map with every cell doubled in width."""
    rows, commands = _sections(text)
    grid: list[list[str]] = []
    robot: Pos | None = None
    for y, line in enumerate(rows):
        row = []
        for x, char in enumerate(line):
            if char == ROBOT:
                robot = (x * 2, y)
                row.extend(EMPTY * 2)
            elif char in _WIDE:
                row.extend(_WIDE[char])
        grid.append(row)
    if robot is None:
        raise ValueError("no robot on the map")
    return WideWarehouse(grid, robot, commands)


def part_one(warehouse: Warehouse) -> int:
    """GPS sum after every move; the given warehouse is left untouched."""
    state = copy.deepcopy(warehouse)
    for direction in state.commands:
        state.apply(direction)
    return state.gps_sum()


def part_two(warehouse: WideWarehouse) -> int:
    """GPS sum of the wide warehouse after every move."""
    state = copy.deepcopy(warehouse)
    for direction in state.commands:
        state.apply(direction)
    return state.gps_sum()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Solve day 15.")
    parser.add_argument("input", nargs="?", default="input", help="puzzle input file")
    args = parser.parse_args(argv)
    try:
        text = Path(args.input).read_text()
    except FileNotFoundError:
        print(f"file not found: {args.input}", file=sys.stderr)
        return 1
    print(f"res gray star : {part_one(parse(text))}")
    print(f"res gold star : {part_two(parse_wide(text))}")
    return 0


if __name__ == "__main__":
    sys.exit(main())