"""Day 13: win prizes on the claw machines for the fewest tokens."""

from __future__ import annotations

import argparse
import math
import re
import sys
from dataclasses import dataclass, replace
from pathlib import Path

Pos = tuple[int, int]

PRIZE_OFFSET = 10_000_000_000_000
_TOLERANCE = 0.00015
_COORDS = re.compile(r"X[+=](-?\d+),\s*Y[+=](-?\d+)")


@dataclass(frozen=True)
class Machine:
    """The moves of buttons A and B and the location of the prize."""

    a: Pos
    b: Pos
    prize: Pos


def parse(text: str) -> list[Machine]:
    """Parse blocks of ``Button A``, ``Button B`` and ``Prize`` lines.

    An incomplete machine at the end of the input is ignored.
    """
    coords = []
    for line in text.splitlines():
        if not line:
            continue
        match = _COORDS.search(line)
        if match is None:
            raise ValueError(f"no coordinates in {line!r}")
        coords.append((int(match.group(1)), int(match.group(2))))
    rows = iter(coords)
    return [Machine(a, b, prize) for a, b, prize in zip(rows, rows, rows)]


def _presses(prize: Pos, button: Pos, other: Pos) -> float:
    px, py = prize
    bx, by = button
    ox, oy = other
    return (py / oy - px / ox) / (by / oy - bx / ox)


def _is_whole(value: float) -> bool:
    return math.isfinite(value) and abs(value - round(value)) <= _TOLERANCE


def compute_cost(machine: Machine) -> int:
    """Tokens needed to win the prize: 3 per A press, 1 per B press.

    Returns 0 when no whole, non-negative number of presses reaches it.
    """
    try:
        a_presses = _presses(machine.prize, machine.a, machine.b)
        b_presses = _presses(machine.prize, machine.b, machine.a)
    except ZeroDivisionError:
        return 0
    if not (_is_whole(a_presses) and _is_whole(b_presses)):
        return 0
    a_count, b_count = round(a_presses), round(b_presses)
    if a_count < 0 or b_count < 0:
        return 0
    return a_count * 3 + b_count


def part_one(machines: list[Machine]) -> int:
    """Fewest tokens to win every winnable prize."""
    return sum(compute_cost(machine) for machine in machines)


def part_two(machines: list[Machine]) -> int:
    """Fewest tokens once every prize is moved by the large offset."""
    return sum(
        compute_cost(
            replace(
                machine,
                prize=(machine.prize[0] + PRIZE_OFFSET, machine.prize[1] + PRIZE_OFFSET),
            )
        )
        for machine in machines
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Solve day 13.")
    parser.add_argument("input", nargs="?", default="input", help="puzzle input file")
    args = parser.parse_args(argv)
    try:
        text = Path(args.input).read_text()
    except FileNotFoundError:
        print(f"file not found: {args.input}", file=sys.stderr)
        return 1
    machines = parse(text)
    print(f"res gray star : {part_one(machines)}")
    print(f"res gold star : {part_two(machines)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())