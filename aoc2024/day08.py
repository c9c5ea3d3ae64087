"""Day 8: locate the antinodes of resonant antennas."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field
from itertools import combinations
from pathlib import Path

Pos = tuple[int, int]


@dataclass
class AntennaMap:
    """Antenna positions by frequency, and the size of the map."""

    width: int
    height: int
    antennas: dict[str, list[Pos]] = field(default_factory=dict)

    def in_bounds(self, pos: Pos) -> bool:
        x, y = pos
        return 0 <= x < self.width and 0 <= y < self.height


def parse(text: str) -> AntennaMap:
    """Parse the map; any character other than ``.`` is an antenna."""
    rows = [line for line in text.splitlines() if line]
    antenna_map = AntennaMap(width=len(rows[0]) if rows else 0, height=len(rows))
    for y, row in enumerate(rows):
        for x, cell in enumerate(row):
            if cell != ".":
                antenna_map.antennas.setdefault(cell, []).append((x, y))
    return antenna_map


def _pairs(antenna_map: AntennaMap):
    for positions in antenna_map.antennas.values():
        for a, b in combinations(positions, 2):
            yield a, b, (a[0] - b[0], a[1] - b[1])


def antinodes(antenna_map: AntennaMap) -> set[Pos]:
    """Cells lying one spacing beyond each pair of like antennas."""
    found = set()
    for a, b, (dx, dy) in _pairs(antenna_map):
        for node in ((a[0] + dx, a[1] + dy), (b[0] - dx, b[1] - dy)):
            if antenna_map.in_bounds(node):
                found.add(node)
    return found


def resonant_antinodes(antenna_map: AntennaMap) -> set[Pos]:
    """Cells at any whole number of spacings along each pair's line."""
    found = set()
    for a, b, (dx, dy) in _pairs(antenna_map):
        for start, sign in ((a, 1), (b, -1)):
            node = start
            while antenna_map.in_bounds(node):
                found.add(node)
                node = (node[0] + sign * dx, node[1] + sign * dy)
    return found


def part_one(antenna_map: AntennaMap) -> int:
    """Number of cells holding an antinode."""
    return len(antinodes(antenna_map))


def part_two(antenna_map: AntennaMap) -> int:
    """Number of cells holding a resonant antinode."""
    return len(resonant_antinodes(antenna_map))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Solve day 8.")
    parser.add_argument("input", nargs="?", default="input", help="puzzle input file")
    args = parser.parse_args(argv)
    try:
        text = Path(args.input).read_text()
    except FileNotFoundError:
        print(f"file not found: {args.input}", file=sys.stderr)
        return 1
    antenna_map = parse(text)
    print(f"res gray star : {part_one(antenna_map)}")
    print(f"res gold star : {part_two(antenna_map)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())