"""Day 19: arrange towel patterns into the requested designs."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path


@dataclass
class Towels:
    """Available towel patterns and the designs to build from them."""

    patterns: list[str] = field(default_factory=list)
    designs: list[str] = field(default_factory=list)
    design_max_size: int = 0


def parse(text: str) -> Towels:
    """Parse the comma separated patterns, a blank line, then one design per line."""
    towels = Towels()
    in_designs = False
    for line in text.splitlines():
        if not line:
            in_designs = True
        elif in_designs:
            towels.designs.append(line)
            towels.design_max_size = max(towels.design_max_size, len(line))
        else:
            towels.patterns.extend(part.strip() for part in line.split(","))
    return towels


def fits(design: str, patterns: list[str]) -> bool:
    """Whether the design can be made by laying patterns end to end."""
    usable = tuple(patterns)

    @lru_cache(maxsize=None)
    def _fits(rest: str) -> bool:
        if not rest:
            return True
        return any(
            rest.startswith(pattern) and _fits(rest[len(pattern) :])
            for pattern in usable
            if pattern
        )

    return _fits(design)


def count_arrangements(
    design: str, patterns: list[str], memory: dict[str, int] | None = None
) -> int:
    """Number of distinct ways to make the design; ``memory`` caches suffixes."""
    if memory is None:
        memory = {}
    if not design:
        return 1
    if design in memory:
        return memory[design]
    count = 0
    for pattern in patterns:
        if pattern and design.startswith(pattern):
            rest = design[len(pattern) :]
            sub_count = count_arrangements(rest, patterns, memory)
            memory.setdefault(rest, sub_count)
            count += sub_count
    return count


def part_one(towels: Towels) -> int:
    """Number of designs that can be made."""
    return sum(fits(design, towels.patterns) for design in towels.designs)


def part_two(towels: Towels) -> int:
    """Total number of ways to make every design."""
    memory: dict[str, int] = {}
    return sum(count_arrangements(design, towels.patterns, memory) for design in towels.designs)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Solve day 19.")
    parser.add_argument("input", nargs="?", default="input", help="puzzle input file")
    args = parser.parse_args(argv)
    try:
        text = Path(args.input).read_text()
    except FileNotFoundError:
        print(f"file not found: {args.input}", file=sys.stderr)
        return 1
    towels = parse(text)
    print(f"res gray star : {part_one(towels)}")
    print(f"res gold star : {part_two(towels)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())