import pytest

from aoc2024.day06 import (
    Direction,
    Lab,
    guard_path,
    is_looping,
    main,
    parse,
    part_one,
    part_two,
)

EXAMPLE = """....#.....
.........#
..........
..#.......
.......#..
..........
.#..^.....
........#.
#.........
......#...
"""

LOOP = """.#..
...#
#^..
..#.
"""

NEAR_LOOP = """.#..
....
#^..
..#.
"""


@pytest.fixture
def lab() -> Lab:
    return parse(EXAMPLE)


def test_turn_right_cycles():
    start = parse(EXAMPLE).direction
    seen = [start]
    current = start
    for _ in range(3):
        current = current.turn_right()
        seen.append(current)
    assert len(set(seen)) == 4
    assert current.turn_right() is start


def test_turn_right_from_up():
    assert Direction.UP.turn_right() is Direction.RIGHT


def test_parse_guard(lab):
    assert lab.guard == (4, 6)
    assert lab.direction is Direction.UP
    assert (4, 0) in lab.obstacles
    assert lab.width == 10 and lab.height == 10


def test_in_bounds(lab):
    assert lab.in_bounds((0, 0))
    assert lab.in_bounds((9, 9))
    assert not lab.in_bounds((10, 0))
    assert not lab.in_bounds((0, -1))


def test_parse_without_guard():
    with pytest.raises(ValueError):
        parse("....\n.#..\n")


def test_parse_unknown_cell():
    with pytest.raises(ValueError):
        parse("..^.\n.X..\n")


def test_guard_path_invariants(lab):
    path = guard_path(lab)
    assert lab.guard in path
    assert not path & lab.obstacles
    assert all(lab.in_bounds(pos) for pos in path)


def test_guard_path_detects_loop():
    with pytest.raises(ValueError):
        guard_path(parse(LOOP))


def test_is_looping_with_closing_obstacle():
    lab = parse(NEAR_LOOP)
    assert part_one(lab) == len(guard_path(lab))
    assert is_looping(lab, (3, 1))


def test_is_looping_off_path(lab):
    path = guard_path(lab)
    off_path = next(
        (x, y)
        for y in range(lab.height)
        for x in range(lab.width)
        if (x, y) not in path and (x, y) not in lab.obstacles
    )
    assert not is_looping(lab, off_path)


def test_part_one_example(lab):
    assert part_one(lab) == 41


def test_part_two_example(lab):
    assert part_two(lab) == 6


def test_main_missing_file(tmp_path):
    assert main([str(tmp_path / "absent")]) == 1