"""Day 3: evaluate the multiplications hidden in corrupted memory."""

from __future__ import annotations

import argparse
import re
import sys
from dataclasses import dataclass
from pathlib import Path

_OPERATION = re.compile(r"mul\((\d{1,3}),(\d{1,3})\)|do\(\)|don't\(\)")


@dataclass(frozen=True)
class Operation:
    """One recognised instruction: ``mul``, ``do`` or ``don't``."""

    kind: str
    first: int = 0
    second: int = 0

    def value(self) -> int:
        """The product for ``mul``, zero for anything else."""
        if self.kind == "mul":
            return self.first * self.second
        return 0


def parse(text: str) -> list[str]:
    """Return the non-empty lines of the input."""
    return [line for line in text.splitlines() if line]


def extract_values(text: str, kind: str) -> list[int]:
    """Read the two arguments of ``kind(a,b)``; empty if the name differs."""
    name, sep, rest = text.partition("(")
    if not sep or name != kind:
        return []
    first, _, rest = rest.partition(",")
    second = rest.partition(")")[0]
    return [int(first), int(second)]


def parse_operations(line: str) -> list[Operation]:
    """Find every valid instruction in a line, in order."""
    operations = []
    for match in _OPERATION.finditer(line):
        text = match.group(0)
        if text.startswith("m"):
            first, second = extract_values(text, "mul")
            operations.append(Operation("mul", first, second))
        elif text == "don't()":
            operations.append(Operation("don't"))
        else:
            operations.append(Operation("do"))
    return operations


def part_one(lines: list[str]) -> int:
    """Sum of every multiplication."""
    return sum(op.value() for line in lines for op in parse_operations(line))


def part_two(lines: list[str]) -> int:
    """Sum of multiplications enabled by the latest ``do``/``don't``."""
    total = 0
    enabled = True
    for line in lines:
        for op in parse_operations(line):
            if op.kind == "don't":
                enabled = False
            elif op.kind == "do":
                enabled = True
            elif enabled:
                total += op.value()
    return total


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Solve day 3.")
    parser.add_argument("input", nargs="?", default="input", help="puzzle input file")
    args = parser.parse_args(argv)
    try:
        text = Path(args.input).read_text()
    except FileNotFoundError:
        print(f"file not found: {args.input}", file=sys.stderr)
        return 1
    lines = parse(text)
    print(f"res gray star : {part_one(lines)}")
    print(f"res gold star : {part_two(lines)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())