"""Day 2: check which reactor reports are safe."""

from __future__ import annotations

import argparse
import sys
from enum import Enum, auto
from pathlib import Path


class _Direction(Enum):
    UNDEF = auto()
    INC = auto()
    DEC = auto()


def parse(text: str) -> list[list[int]]:
    """Parse one report of integers per non-empty line."""
    return [[int(token) for token in line.split()] for line in text.splitlines() if line]


def _step_ok(a: int, b: int) -> bool:
    return 1 <= abs(b - a) <= 3


def is_safe(report: list[int]) -> bool:
    """A report is safe if it strictly moves one way by steps of 1 to 3."""
    diffs = [b - a for a, b in zip(report, report[1:])]
    if not all(1 <= abs(d) <= 3 for d in diffs):
        return False
    return all(d > 0 for d in diffs) or all(d < 0 for d in diffs)


def count_irregularities(analysis: list[bool]) -> tuple[int, int]:
    """Return the number of failed steps and the index of the first one.

    The index equals ``len(analysis)`` when no step failed.
    """
    failures = analysis.count(False)
    first = next((i for i, ok in enumerate(analysis) if not ok), len(analysis))
    return failures, first


def _analyse(report: list[int]) -> list[bool]:
    direction = _Direction.UNDEF
    analysis = []
    for a, b in zip(report, report[1:]):
        ok = _step_ok(a, b)
        if direction is _Direction.UNDEF:
            analysis.append(ok)
            if a != b:
                direction = _Direction.INC if a < b else _Direction.DEC
        elif direction is _Direction.INC:
            analysis.append(ok and not a > b)
        else:
            analysis.append(ok and not a < b)
    return analysis


def is_safe_with_margin(report: list[int], first_analysis: bool = True) -> bool:
    """Safety check tolerating the removal of one level near the first fault."""
    failures, first = count_irregularities(_analyse(report))
    if failures == 0:
        return True
    if not first_analysis:
        return False
    return any(
        is_safe_with_margin(report[:index] + report[index + 1 :], False)
        for index in (first - 1, first, first + 1)
        if 0 <= index < len(report)
    )


def part_one(reports: list[list[int]]) -> int:
    """Count the strictly safe reports."""
    return sum(is_safe(report) for report in reports)


def part_two(reports: list[list[int]]) -> int:
    """Count the reports that are safe with one level removed."""
    return sum(is_safe_with_margin(report, True) for report in reports)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Solve day 2.")
    parser.add_argument("input", nargs="?", default="input", help="puzzle input file")
    args = parser.parse_args(argv)
    try:
        text = Path(args.input).read_text()
    except FileNotFoundError:
        print(f"file not found: {args.input}", file=sys.stderr)
        return 1
    reports = parse(text)
    print(f"res gray star : {part_one(reports)}")
    print(f"res gold star : {part_two(reports)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())