import copy

import pytest

from aoc2024.day15 import parse, parse_wide, part_one, part_two

SMALL = """\
########
#..O.O.#
##@.O..#
#...O..#
#.#.O..#
#...O..#
#......#
########

<^^>>>vv<v>>v<<
"""

WIDE_EXAMPLE = """\
#######
#...#.#
#.....#
#..OO@#
#..O..#
#.....#
#######

<vv<<^^<<^^
"""


def _rows(warehouse):
    return ["".join(row) for row in warehouse.grid]


def _count(warehouse, marker):
    return sum(row.count(marker) for row in warehouse.grid)


def test_parse_robot_and_commands():
    warehouse = parse(SMALL)
    assert warehouse.robot == (2, 2)
    assert len(warehouse.commands) == len("<^^>>>vv<v>>v<<")
    assert warehouse.commands[0] == (-1, 0)
    assert _rows(warehouse)[2] == "##..O..#"


def test_parse_without_robot_raises():
    with pytest.raises(ValueError):
        parse("###\n#.#\n###\n\n<\n")


def test_part_one_small_example():
    assert part_one(parse(SMALL)) == 2028


def test_part_one_leaves_input_untouched():
    warehouse = parse(SMALL)
    before = copy.deepcopy(warehouse)
    part_one(warehouse)
    assert warehouse == before


def test_moves_keep_box_count():
    warehouse = parse(SMALL)
    boxes = _count(warehouse, "O")
    for direction in warehouse.commands:
        warehouse.apply(direction)
        assert _count(warehouse, "O") == boxes


def test_push_against_wall_does_nothing():
    warehouse = parse("#####\n#@O##\n#####\n\n>\n")
    warehouse.apply((1, 0))
    assert warehouse.robot == (1, 1)
    assert _rows(warehouse)[1] == "#.O##"


def test_push_row_of_boxes():
    warehouse = parse("######\n#@OO.#\n######\n\n>\n")
    warehouse.apply((1, 0))
    assert warehouse.robot == (2, 1)
    assert _rows(warehouse)[1] == "#..OO#"


def test_parse_wide_doubles_cells():
    warehouse = parse_wide(WIDE_EXAMPLE)
    assert warehouse.robot == (10, 3)
    assert _rows(warehouse)[3] == "##....[][]..##"
    assert all(len(row) == 14 for row in warehouse.grid)


def test_wide_example_final_state():
    warehouse = parse_wide(WIDE_EXAMPLE)
    for direction in warehouse.commands:
        warehouse.apply(direction)
    assert warehouse.robot == (5, 2)
    assert _rows(warehouse)[1:4] == [
        "##...[].##..##",
        "##.....[]...##",
        "##....[]....##",
    ]


def test_part_two_wide_example():
    assert part_two(parse_wide(WIDE_EXAMPLE)) == 618


def test_wide_boxes_stay_paired():
    warehouse = parse_wide(SMALL)
    for direction in warehouse.commands:
        warehouse.apply(direction)
        for row in warehouse.grid:
            text = "".join(row)
            assert text.count("[") == text.count("]")
            assert text.count("[]") == text.count("[")


def test_wide_blocked_vertical_push():
    warehouse = parse_wide("#####\n#.#.#\n#.O.#\n#.@.#\n#####\n\n^\n")
    before = _rows(warehouse)
    warehouse.apply((0, -1))
    assert _rows(warehouse) == before
    assert warehouse.robot == (4, 3)


def test_wide_can_move_reports_free_space():
    warehouse = parse_wide("######\n#....#\n#.O..#\n#.@..#\n######\n\n^\n")
    assert warehouse.can_move((4, 2), (0, -1)) is True
    warehouse.apply((0, -1))
    assert warehouse.robot == (4, 2)
    assert _rows(warehouse)[1] == "##..[]....##"