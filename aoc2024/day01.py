"""Day 1: compare two lists of location identifiers."""

from __future__ import annotations

import argparse
import sys
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class LocationLists:
    """The left and right columns of the puzzle input."""

    first: list[int] = field(default_factory=list)
    second: list[int] = field(default_factory=list)


def parse_line(line: str) -> tuple[int, int]:
    """Parse one line holding exactly two integers."""
    values = [int(token) for token in line.split()]
    if len(values) != 2:
        raise ValueError(f"expected 2 values on a line, got {len(values)}: {line!r}")
    return values[0], values[1]


def parse(text: str) -> LocationLists:
    """Parse the puzzle input into two lists."""
    lists = LocationLists()
    for line in text.splitlines():
        if line:
            left, right = parse_line(line)
            lists.first.append(left)
            lists.second.append(right)
    return lists


def part_one(lists: LocationLists) -> int:
    """Total distance between the sorted lists (0 if their lengths differ)."""
    if len(lists.first) != len(lists.second):
        return 0
    return sum(abs(a - b) for a, b in zip(sorted(lists.first), sorted(lists.second)))


def part_two(lists: LocationLists) -> int:
    """Similarity score: each left value times its count in the right list."""
    counts = Counter(lists.second)
    return sum(value * counts[value] for value in lists.first)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Solve day 1.")
    parser.add_argument("input", nargs="?", default="input", help="puzzle input file")
    args = parser.parse_args(argv)
    try:
        text = Path(args.input).read_text()
    except FileNotFoundError:
        print(f"file not found: {args.input}", file=sys.stderr)
        return 1
    lists = parse(text)
    print(f"res gray star : {part_one(lists)}")
    print(f"res gold star : {part_two(lists)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())