"""Day 17: run the chronospatial computer and find the program's quine input."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field
from enum import IntEnum
from pathlib import Path


class Instruction(IntEnum):
    """The eight opcodes of the computer."""

    ADV = 0
    BXL = 1
    BST = 2
    JNZ = 3
    BXC = 4
    OUT = 5
    BDV = 6
    CDV = 7


@dataclass
class Computer:
    """Register values and the program, both decoded and as raw numbers."""

    a: int = 0
    b: int = 0
    c: int = 0
    commands: list[tuple[Instruction, int]] = field(default_factory=list)
    raw: list[int] = field(default_factory=list)


def _register_value(line: str) -> int:
    tokens = line.split()
    if len(tokens) < 3:
        raise ValueError(f"not a register line: {line!r}")
    return int(tokens[2])


def parse(text: str) -> Computer:
    """Parse the three register lines followed by the program line."""
    computer = Computer()
    lines = [line for line in text.splitlines() if line]
    for status, line in enumerate(lines[:4]):
        if status == 0:
            computer.a = _register_value(line)
        elif status == 1:
            computer.b = _register_value(line)
        elif status == 2:
            computer.c = _register_value(line)
        else:
            _, _, rest = line.partition(" ")
            computer.raw = [int(value) for value in rest.split(",")]
            computer.commands = [
                (Instruction(opcode), operand)
                for opcode, operand in zip(computer.raw[::2], computer.raw[1::2])
            ]
    return computer


def run_program(computer: Computer) -> str:
    """Run the decoded program and return its comma separated output.

    The instruction pointer counts instruction/operand pairs, and a jump
    moves it to the pair whose index is the operand.
    """
    a, b, c = computer.a, computer.b, computer.c
    output: list[int] = []
    pointer = 0
    while 0 <= pointer < len(computer.commands):
        instruction, operand = computer.commands[pointer]
        combo = {4: a, 5: b, 6: c}.get(operand, operand)
        pointer += 1
        if instruction is Instruction.ADV:
            a >>= combo
        elif instruction is Instruction.BXL:
            b ^= operand
        elif instruction is Instruction.BST:
            b = combo % 8
        elif instruction is Instruction.JNZ:
            if a != 0:
                pointer = operand
        elif instruction is Instruction.BXC:
            b ^= c
        elif instruction is Instruction.OUT:
            output.append(combo % 8)
        elif instruction is Instruction.BDV:
            b = a >> combo
        else:
            c = a >> combo
    return ",".join(str(value) for value in output)


def run_short(computer: Computer, value: int = 0) -> list[int]:
    """The output of the puzzle program, unrolled into one loop, for ``A = value``."""
    a = value
    output = []
    while True:
        shift = (a % 8) ^ 5
        b = ((a % 8) ^ 5 ^ 6) ^ (a >> shift)
        a >>= 3
        output.append(b % 8)
        if a == 0:
            return output


def reverse_program(computer: Computer, value: int, index: int) -> int | None:
    """Find an ``A`` whose output is the program, building it three bits at a time.

    Returns ``None`` when no such value exists below ``value``'s prefix.
    """
    expected = computer.raw[index:]
    for digit in range(8):
        candidate = value * 8 + digit
        if run_short(computer, candidate) == expected:
            if index == 0:
                return candidate
            found = reverse_program(computer, candidate, index - 1)
            if found is not None:
                return found
    return None


def part_one(computer: Computer) -> str:
    """The program's output for the initial value of register A."""
    return ",".join(str(value) for value in run_short(computer, computer.a))


def part_two(computer: Computer) -> int:
    """The value of register A that makes the program print itself."""
    found = reverse_program(computer, 0, len(computer.raw) - 1)
    if found is None:
        raise ValueError("no value of register A reproduces the program")
    return found


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Solve day 17.")
    parser.add_argument("input", nargs="?", default="input", help="puzzle input file")
    args = parser.parse_args(argv)
    try:
        text = Path(args.input).read_text()
    except FileNotFoundError:
        print(f"file not found: {args.input}", file=sys.stderr)
        return 1
    computer = parse(text)
    print(f"res gray star : {part_one(computer)}")
    try:
        print(f"res gold star : {part_two(computer)}")
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())