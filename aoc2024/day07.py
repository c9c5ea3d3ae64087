"""Day 7: find operators that make calibration equations true."""

from __future__ import annotations

import argparse
import itertools
import sys
from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class Operator(Enum):
    """Binary operators evaluated strictly left to right."""

    MUL = "*"
    ADD = "+"
    CONC = "||"

    def apply(self, left: int, right: int) -> int:
        if self is Operator.MUL:
            return left * right
        if self is Operator.ADD:
            return left + right
        return int(f"{left}{right}")


@dataclass(frozen=True)
class Equation:
    """A target value and the numbers that should combine into it."""

    total: int
    numbers: tuple[int, ...]


Combos = dict[int, list[tuple[Operator, ...]]]


def parse(text: str) -> list[Equation]:
    """Parse ``total: a b c`` lines."""
    equations = []
    for line in text.splitlines():
        if not line:
            continue
        total, sep, rest = line.partition(":")
        if not sep:
            raise ValueError(f"missing ':' in {line!r}")
        equations.append(Equation(int(total), tuple(int(n) for n in rest.split())))
    return equations


def operator_combos(operators: list[Operator], n: int) -> Combos:
    """Every sequence of 1 to ``n`` operators, keyed by its length."""
    return {
        length: list(itertools.product(operators, repeat=length))
        for length in range(1, n + 1)
    }


def max_size(equations: list[Equation]) -> int:
    """The largest count of numbers in any equation."""
    return max((len(eq.numbers) for eq in equations), default=0)


def _evaluate(numbers: tuple[int, ...], combo: tuple[Operator, ...]) -> int:
    total = numbers[0]
    for operator, number in zip(combo, numbers[1:]):
        total = operator.apply(total, number)
    return total


def solvable(equation: Equation, combos: Combos) -> bool:
    """Whether some operator sequence reaches the equation's total.

    Equations for which no sequence length is available never count.
    """
    candidates = combos.get(len(equation.numbers) - 1)
    if candidates is None:
        return False
    return any(_evaluate(equation.numbers, combo) == equation.total for combo in candidates)


def _calibration(equations: list[Equation], operators: list[Operator]) -> int:
    combos = operator_combos(operators, max_size(equations) - 1)
    return sum(eq.total for eq in equations if solvable(eq, combos))


def part_one(equations: list[Equation]) -> int:
    """Total of the equations solvable with addition and multiplication."""
    return _calibration(equations, [Operator.ADD, Operator.MUL])


def part_two(equations: list[Equation]) -> int:
    """Total of the equations solvable once concatenation is allowed."""
    return _calibration(equations, [Operator.ADD, Operator.MUL, Operator.CONC])


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Solve day 7.")
    parser.add_argument("input", nargs="?", default="input", help="puzzle input file")
    args = parser.parse_args(argv)
    try:
        text = Path(args.input).read_text()
    except FileNotFoundError:
        print(f"file not found: {args.input}", file=sys.stderr)
        return 1
    equations = parse(text)
    print(f"res gray star : {part_one(equations)}")
    print(f"res gold star : {part_two(equations)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())