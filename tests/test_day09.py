import pytest

from aoc2024.day09 import FREE, compact_blocks, compact_memory, parse, part_one, part_two

EXAMPLE = "2333133121414131402\n"


def test_parse_sizes_match_digits():
    disk = parse("12345")
    assert len(disk.blocks) == 5
    assert len(disk.memory) == 1 + 2 + 3 + 4 + 5
    assert disk.memory.count(2) == 5
    assert disk.memory.count(FREE) == 2 + 4
    assert [b.size for b in disk.blocks] == [1, 2, 3, 4, 5]


def test_parse_rejects_non_digits():
    with pytest.raises(ValueError):
        parse("12a4")


def test_compact_memory_invariants():
    disk = parse(EXAMPLE)
    used = [v for v in disk.memory if v != FREE]
    compacted = compact_memory(disk.memory)
    assert FREE not in compacted
    assert sorted(compacted) == sorted(used)
    first_hole = disk.memory.index(FREE)
    assert compacted[:first_hole] == disk.memory[:first_hole]


def test_compact_blocks_preserves_size_and_files():
    disk = parse(EXAMPLE)
    result = compact_blocks(disk.blocks)
    assert sum(b.size for b in result) == sum(b.size for b in disk.blocks)
    valid_ids = sorted(b.file_id for b in result if b.is_file and b.valid)
    assert valid_ids == list(range(len(valid_ids)))
    assert all(b.valid for b in disk.blocks)


def test_example_part_one():
    assert part_one(parse(EXAMPLE)) == 1928


def test_example_part_two():
    assert part_two(parse(EXAMPLE)) == 2858


def test_already_compact_disk_unchanged():
    disk = parse("30")
    assert compact_memory(disk.memory) == disk.memory
    assert part_one(disk) == part_two(disk)