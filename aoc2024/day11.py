"""Day 11: count the stones after repeated blinks."""

from __future__ import annotations

import argparse
import sys
from collections import Counter
from pathlib import Path


def parse(text: str) -> list[int]:
    """Parse the space separated stone numbers."""
    return [int(token) for token in text.split()]


def _change(stone: int) -> list[int]:
    if stone == 0:
        return [1]
    digits = str(stone)
    if len(digits) % 2 == 0:
        half = len(digits) // 2
        return [int(digits[:half]), int(digits[half:])]
    return [stone * 2024]


def mutate(stones: list[int]) -> list[int]:
    """The stones after one blink, in order."""
    return [new for stone in stones for new in _change(stone)]


def count_after(stones: list[int], blinks: int) -> int:
    """How many stones there are after ``blinks`` blinks."""
    counts = Counter(stones)
    for _ in range(blinks):
        following: Counter[int] = Counter()
        for stone, count in counts.items():
            for new in _change(stone):
                following[new] += count
        counts = following
    return sum(counts.values())


def part_one(stones: list[int]) -> int:
    """Stone count after 25 blinks."""
    return count_after(stones, 25)


def part_two(stones: list[int]) -> int:
    """Stone count after 75 blinks."""
    return count_after(stones, 75)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Solve day 11.")
    parser.add_argument("input", nargs="?", default="input", help="puzzle input file")
    args = parser.parse_args(argv)
    try:
        text = Path(args.input).read_text()
    except FileNotFoundError:
        print(f"file not found: {args.input}", file=sys.stderr)
        return 1
    stones = parse(text)
    print(f"res gray star : {part_one(stones)}")
    print(f"res gold star : {part_two(stones)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())