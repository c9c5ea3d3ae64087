import pytest

from aoc2024.day16 import (
    GraphNode,
    construct_graph,
    draw_graph,
    parse,
    part_one,
    part_two,
)

EXAMPLE = """\
###############
#.......#....E#
#.#.###.#.###.#
#.....#.#...#.#
#.###.#####.#.#
#.#.#.......#.#
#.#.#####.###.#
#...........#.#
###.#.#####.#.#
#...#.....#.#.#
#.#.#.###.#.#.#
#.....#...#.#.#
#.###.#.#.#.#.#
#S..#.....#...#
###############
"""


def _corridor(length: int) -> str:
    wall = "#" * (length + 4)
    return f"{wall}\n#S{'.' * length}E#\n{wall}\n"


def _solve(text):
    maze = parse(text)
    graph = construct_graph(maze)
    image = draw_graph(graph, maze.exit, maze.start)
    return maze, graph, image


def test_parse_finds_start_and_exit():
    maze = parse(EXAMPLE)
    assert maze.start == (1, 13)
    assert maze.exit == (13, 1)
    assert maze.orient == (1, 0)
    assert (maze.width, maze.height) == (15, 15)
    assert (0, 0) not in maze.open
    assert maze.start in maze.open and maze.exit in maze.open


def test_parse_rejects_unknown_cell():
    with pytest.raises(ValueError):
        parse("#####\n#S?E#\n#####\n")


def test_parse_requires_exit():
    with pytest.raises(ValueError):
        parse("#####\n#S..#\n#####\n")


def test_example_scores():
    maze, graph, image = _solve(EXAMPLE)
    assert part_one(graph, maze.exit) == 7036
    assert part_two(image) == 45


@pytest.mark.parametrize("length", [0, 1, 3, 6])
def test_straight_corridor(length):
    maze, graph, image = _solve(_corridor(length))
    assert part_one(graph, maze.exit) == length + 1
    assert part_two(image) == length + 2


def test_draw_graph_marks_start_and_exit():
    maze, _, image = _solve(EXAMPLE)
    assert image[maze.start[1]][maze.start[0]] == "0"
    assert image[maze.exit[1]][maze.exit[0]] == "0"
    assert len(image) == maze.height
    assert all(len(row) == maze.width for row in image)


def test_marked_tiles_are_open_except_behind_start():
    maze, _, image = _solve(EXAMPLE)
    marked = {(x, y) for y, row in enumerate(image) for x, char in enumerate(row) if char == "0"}
    behind = (maze.start[0] - 1, maze.start[1])
    assert marked - maze.open == {behind}


def test_start_cost_is_zero():
    maze, graph, _ = _solve(EXAMPLE)
    node = graph[maze.start[1]][maze.start[0]]
    assert node.costs[maze.orient] == 0


def test_cost_min_dirs_without_source():
    node = GraphNode(costs={(1, 0): 5, (0, 1): 5, (-1, 0): 7})
    assert node.cost_min_dirs() == [(0, 1), (1, 0)]


def test_cost_min_dirs_counts_turns():
    node = GraphNode(costs={(1, 0): 5, (0, 1): 5, (-1, 0): 7})
    assert node.cost_min_dirs((1, 0)) == [(1, 0)]
    assert node.cost_min_dirs((0, 1)) == [(0, 1)]


def test_cost_min_dirs_empty_node():
    assert GraphNode().cost_min_dirs() == []


def test_part_one_unreachable_exit():
    maze, graph, _ = _solve("#######\n#S.#.E#\n#######\n")
    with pytest.raises(ValueError):
        part_one(graph, maze.exit)