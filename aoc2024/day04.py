"""Day 4: word search for XMAS."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator
from pathlib import Path

_WORD = "XMAS"


class XmasFinder:
    """Streaming matcher that reports each completed ``XMAS``."""

    def __init__(self) -> None:
        self.current = ""

    def reset(self) -> None:
        self.current = ""

    def check(self, letter: str) -> bool:
        """Feed one letter; return True when it completes the word."""
        if letter == "X":
            self.current = "X"
        elif self.current == "X" and letter == "M":
            self.current = "M"
        elif self.current == "M" and letter == "A":
            self.current = "A"
        elif self.current == "A" and letter == "S":
            self.current = ""
            return True
        else:
            self.current = ""
        return False


def parse(text: str) -> list[str]:
    """Return the non-empty rows of the grid."""
    return [line for line in text.splitlines() if line]


def _count(lines: Iterable[str]) -> int:
    finder = XmasFinder()
    total = 0
    for line in lines:
        for sequence in (line, line[::-1]):
            finder.reset()
            total += sum(finder.check(letter) for letter in sequence)
    return total


def _width(grid: list[str]) -> int:
    return len(grid[0]) if grid else 0


def horizontal_search(grid: list[str]) -> int:
    """Count XMAS along rows, both directions."""
    return _count(grid)


def vertical_search(grid: list[str]) -> int:
    """Count XMAS along columns, both directions."""
    columns = ("".join(row[col] for row in grid) for col in range(_width(grid)))
    return _count(columns)


def _main_diagonals(grid: list[str]) -> Iterator[str]:
    height, width = len(grid), _width(grid)
    for offset in range(-(height - 1), width):
        yield "".join(
            grid[row][row + offset] for row in range(height) if 0 <= row + offset < width
        )


def _secondary_diagonals(grid: list[str]) -> Iterator[str]:
    height, width = len(grid), _width(grid)
    for total in range(height + width - 1):
        yield "".join(
            grid[row][total - row]
            for row in range(height - 1, -1, -1)
            if 0 <= total - row < width
        )


def main_diagonal_search(grid: list[str]) -> int:
    """Count XMAS along top-left to bottom-right diagonals, both directions."""
    return _count(_main_diagonals(grid))


def secondary_diagonal_search(grid: list[str]) -> int:
    """Count XMAS along bottom-left to top-right diagonals, both directions."""
    return _count(_secondary_diagonals(grid))


def part_one(grid: list[str]) -> int:
    """Count XMAS in every direction."""
    return (
        horizontal_search(grid)
        + vertical_search(grid)
        + main_diagonal_search(grid)
        + secondary_diagonal_search(grid)
    )


def _is_mas(a: str, b: str) -> bool:
    return {a, b} == {"M", "S"}


def part_two(grid: list[str]) -> int:
    """Count the A cells crossed by two diagonal MAS words."""
    total = 0
    for i in range(1, len(grid) - 1):
        for j in range(1, len(grid[i]) - 1):
            if grid[i][j] != "A":
                continue
            main = _is_mas(grid[i + 1][j + 1], grid[i - 1][j - 1])
            secondary = _is_mas(grid[i - 1][j + 1], grid[i + 1][j - 1])
            if main and secondary:
                total += 1
    return total


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Solve day 4.")
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