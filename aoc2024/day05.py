"""Day 5: check and repair the page order of safety manual updates."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class Manual:
    """Ordering rules and the updates they apply to."""

    rules: list[tuple[int, int]] = field(default_factory=list)
    updates: list[list[int]] = field(default_factory=list)


def parse_rule(line: str) -> tuple[int, int]:
    """Parse a ``before|after`` rule."""
    before, sep, after = line.partition("|")
    if not sep:
        raise ValueError(f"not a rule: {line!r}")
    return int(before), int(after)


def parse_update(line: str) -> list[int]:
    """Parse a comma separated list of pages."""
    return [int(page) for page in line.split(",")]


def parse(text: str) -> Manual:
    """Parse the rules section and the updates section."""
    manual = Manual()
    for line in text.splitlines():
        if not line:
            continue
        if "|" in line:
            manual.rules.append(parse_rule(line))
        elif "," in line:
            manual.updates.append(parse_update(line))
    return manual


def check_rules(rules: list[tuple[int, int]], update: list[int]) -> int:
    """Return the position of the first page breaking a rule.

    The result is ``len(update)`` when every rule is respected.
    """
    positions = {page: index for index, page in enumerate(update)}
    for before, after in rules:
        first = positions.get(before, -1)
        second = positions.get(after, -1)
        if first != -1 and second != -1 and first > second:
            return first
    return len(update)


def reorder(rules: list[tuple[int, int]], update: list[int]) -> list[int]:
    """Move offending pages forward until the update respects every rule."""
    pages = list(update)
    while (index := check_rules(rules, pages)) != len(pages):
        value = pages.pop(index)
        positions = [pages.index(after) for _, after in rules if after in pages]
        if not positions:
            raise ValueError(f"cannot reorder update {update!r}")
        pages.insert(min(positions), value)
    return pages


def _middle(pages: list[int]) -> int:
    return pages[len(pages) // 2]


def part_one(manual: Manual) -> int:
    """Sum of the middle pages of the correctly ordered updates."""
    return sum(
        _middle(update)
        for update in manual.updates
        if check_rules(manual.rules, update) == len(update)
    )


def part_two(manual: Manual) -> int:
    """Sum of the middle pages of the badly ordered updates, once repaired."""
    return sum(
        _middle(reorder(manual.rules, update))
        for update in manual.updates
        if check_rules(manual.rules, update) != len(update)
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Solve day 5.")
    parser.add_argument("input", nargs="?", default="input", help="puzzle input file")
    args = parser.parse_args(argv)
    try:
        text = Path(args.input).read_text()
    except FileNotFoundError:
        print(f"file not found: {args.input}", file=sys.stderr)
        return 1
    manual = parse(text)
    print(f"res gray star : {part_one(manual)}")
    print(f"res gold star : {part_two(manual)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())