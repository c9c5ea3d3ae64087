import pytest

from aoc2024.day18 import MemorySpace, parse, part_one, part_two, shortest_path

EXAMPLE = """\
5,4
4,2
4,5
3,0
2,1
6,3
2,4
1,5
0,6
3,3
2,6
5,1
1,2
5,5
2,5
6,5
1,4
0,4
6,4
1,1
6,1
1,0
0,5
1,6
2,0
"""


@pytest.fixture
def example():
    return parse(EXAMPLE, 7, 7, 12)


def test_parse_splits_at_threshold(example):
    assert len(example.walls) == 12
    assert len(example.falling) == 13
    assert (5, 4) in example.walls
    assert example.falling[0] == (1, 2)
    assert example.falling[-1] == (2, 0)


def test_parse_rejects_out_of_bounds():
    with pytest.raises(ValueError):
        parse("9,9\n", 7, 7, 12)


def test_parse_rejects_garbage():
    with pytest.raises(ValueError):
        parse("12\n", 7, 7, 12)


def test_example_part_one(example):
    assert part_one(example) == 22


def test_example_part_two(example):
    assert part_two(example) == (6, 1)


def test_path_is_connected_and_avoids_walls(example):
    path = shortest_path(example)
    assert path[0] == (6, 6)
    assert abs(path[-1][0]) + abs(path[-1][1]) == 1
    assert not set(path) & example.walls
    for a, b in zip(path, path[1:]):
        assert abs(a[0] - b[0]) + abs(a[1] - b[1]) == 1
    assert len(set(path)) == len(path)


def test_open_space_path_is_manhattan():
    space = MemorySpace(5, 4, frozenset())
    assert part_one(space) == (5 - 1) + (4 - 1)


def test_blocked_space_has_no_path():
    wall = frozenset((2, y) for y in range(5))
    space = MemorySpace(5, 5, wall)
    assert shortest_path(space) == []
    assert part_one(space) == 0


def test_part_two_without_cut_returns_origin():
    space = MemorySpace(5, 5, frozenset(), ((4, 0), (0, 4)))
    assert part_two(space) == (0, 0)


def test_part_two_returns_cutting_byte():
    falling = tuple((2, y) for y in range(5))
    space = MemorySpace(5, 5, frozenset(), falling)
    assert part_two(space) == falling[-1]


def test_part_two_leaves_space_unchanged(example):
    walls = example.walls
    part_two(example)
    assert example.walls == walls
    assert part_one(example) == len(shortest_path(example))