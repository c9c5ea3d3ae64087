"""Day 9: compact the amphipod's disk."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field, replace
from pathlib import Path

FREE = -1
_DIGITS = "0123456789"


@dataclass
class Block:
    """A run of disk space, either a file or free space."""

    file_id: int
    is_file: bool
    size: int
    valid: bool = True


@dataclass
class DiskMap:
    """The disk both as blocks and as one identifier per memory cell."""

    blocks: list[Block] = field(default_factory=list)
    memory: list[int] = field(default_factory=list)


def parse(text: str) -> DiskMap:
    """Parse the dense disk map: file sizes alternating with free sizes."""
    disk = DiskMap()
    file_id = 0
    for index, char in enumerate("".join(text.split())):
        if char not in _DIGITS:
            raise ValueError(f"unexpected character {char!r} in disk map")
        size = int(char)
        if index % 2 == 0:
            disk.blocks.append(Block(file_id, True, size))
            disk.memory.extend([file_id] * size)
            file_id += 1
        else:
            disk.blocks.append(Block(file_id, False, size))
            disk.memory.extend([FREE] * size)
    return disk


def compact_memory(memory: list[int]) -> list[int]:
    """Fill free cells from the end of the disk, one cell at a time.

    The result holds only the used cells; trailing free space is dropped.
    """
    files = [value for value in memory if value != FREE]
    from_end = reversed(files)
    return [value if value != FREE else next(from_end) for value in memory[: len(files)]]


def compact_blocks(blocks: list[Block]) -> list[Block]:
    """Move whole files, highest identifier first, into the leftmost free span.

    A moved file leaves behind an invalid copy that counts as free space.
    """
    layout = [replace(block) for block in blocks]
    files = [block for block in layout if block.is_file]
    for block in reversed(files):
        position = next(i for i, candidate in enumerate(layout) if candidate is block)
        target = next(
            (
                i
                for i, candidate in enumerate(layout[:position])
                if not candidate.is_file and candidate.size >= block.size
            ),
            None,
        )
        if target is None:
            continue
        free = layout[target]
        moved = replace(block)
        block.valid = False
        if free.size == block.size:
            layout[target] = moved
        else:
            free.size -= block.size
            layout.insert(target, moved)
    return layout


def part_one(disk: DiskMap) -> int:
    """Checksum after compacting cell by cell."""
    return sum(index * value for index, value in enumerate(compact_memory(disk.memory)))


def part_two(disk: DiskMap) -> int:
    """Checksum after compacting whole files."""
    total = 0
    position = 0
    for block in compact_blocks(disk.blocks):
        if block.is_file and block.valid:
            total += block.file_id * sum(range(position, position + block.size))
        position += block.size
    return total


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Solve day 9.")
    parser.add_argument("input", nargs="?", default="input", help="puzzle input file")
    args = parser.parse_args(argv)
    try:
        text = Path(args.input).read_text()
    except FileNotFoundError:
        print(f"file not found: {args.input}", file=sys.stderr)
        return 1
    disk = parse(text)
    print(f"res gray star : {part_one(disk)}")
    print(f"res gold star : {part_two(disk)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())