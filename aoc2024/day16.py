"""Day 16: the reindeer maze and its cheapest paths."""

from __future__ import annotations

import argparse
import heapq
import sys
from dataclasses import dataclass, field
from pathlib import Path

Pos = tuple[int, int]

EAST: Pos = (1, 0)
_NO_DIR: Pos = (0, 0)
_DIRS: tuple[Pos, ...] = ((0, 1), (1, 0), (0, -1), (-1, 0))
_STEP_COST = 1
_TURN_COST = 1000
_PATH = "0"
_OFF_PATH = "-"


def _orthogonal(a: Pos, b: Pos) -> bool:
    return a[0] in (b[1], -b[1]) and a[1] in (b[0], -b[0])


def _turn_cost(current: Pos, new: Pos) -> int:
    if current == new:
        return 0
    if _orthogonal(current, new):
        return _TURN_COST
    return 2 * _TURN_COST


def _dir_order(direction: Pos) -> int:
    return direction[0] * 1000 + direction[1]


@dataclass(frozen=True)
class Maze:
    """Open cells of the maze, its size, and the start and exit."""

    width: int
    height: int
    open: frozenset[Pos]
    start: Pos
    exit: Pos
    orient: Pos = EAST


@dataclass
class GraphNode:
    """Cheapest known cost to reach a cell for each heading, and where from."""

    costs: dict[Pos, int] = field(default_factory=dict)
    previous: dict[Pos, Pos] = field(default_factory=dict)

    def cost_min_dirs(self, src: Pos = _NO_DIR) -> list[Pos]:
        """Headings of least cost, counting the turn towards ``src`` if given."""
        best: int | None = None
        dirs: list[Pos] = []
        for direction in sorted(self.costs, key=_dir_order):
            cost = self.costs[direction]
            if src != _NO_DIR:
                cost += _turn_cost(src, direction)
            if best is None or cost < best:
                best = cost
                dirs = [direction]
            elif cost == best:
                dirs.append(direction)
        return dirs


def parse(text: str) -> Maze:
    """Parse the maze: ``#`` walls, ``.`` floor, ``S`` start and ``E`` exit."""
    rows = [line for line in text.splitlines() if line]
    cells = set()
    start: Pos | None = None
    exit_: Pos | None = None
    for y, row in enumerate(rows):
        for x, char in enumerate(row):
            if char == "#":
                continue
            if char == "S":
                start = (x, y)
            elif char == "E":
                exit_ = (x, y)
            elif char != ".":
                raise ValueError(f"unexpected maze cell {char!r} at {(x, y)}")
            cells.add((x, y))
    if start is None or exit_ is None:
        raise ValueError("the maze needs a start and an exit")
    return Maze(
        width=len(rows[0]),
        height=len(rows),
        open=frozenset(cells),
        start=start,
        exit=exit_,
    )


def construct_graph(maze: Maze) -> list[list[GraphNode]]:
    """Cheapest cost of every reachable cell and heading from the start.

    Moving costs 1 and each quarter turn 1000; the exit is not left again.
    """
    graph = [[GraphNode() for _ in range(maze.width)] for _ in range(maze.height)]
    sx, sy = maze.start
    graph[sy][sx].costs[maze.orient] = 0
    heap: list[tuple[int, Pos, Pos]] = [(0, maze.start, maze.orient)]
    while heap:
        cost, pos, direction = heapq.heappop(heap)
        if cost > graph[pos[1]][pos[0]].costs[direction] or pos == maze.exit:
            continue
        for new_dir in _DIRS:
            new_pos = (pos[0] + new_dir[0], pos[1] + new_dir[1])
            if new_pos not in maze.open:
                continue
            new_cost = cost + _STEP_COST + _turn_cost(direction, new_dir)
            node = graph[new_pos[1]][new_pos[0]]
            known = node.costs.get(new_dir)
            if known is None or new_cost < known:
                node.costs[new_dir] = new_cost
                node.previous[new_dir] = pos
                heapq.heappush(heap, (new_cost, new_pos, new_dir))
            elif known == new_cost:
                node.previous[new_dir] = pos
    return graph


def draw_graph(graph: list[list[GraphNode]], exit: Pos, start: Pos) -> list[str]:
    """Mark with ``0`` every cell on some cheapest path back from the exit.

    The walk back also marks the cell just behind the start.
    """
    height = len(graph)
    width = len(graph[0]) if graph else 0
    image = [[_OFF_PATH] * width for _ in range(height)]
    ex, ey = exit
    stack = [(exit, direction) for direction in graph[ey][ex].cost_min_dirs()]
    seen: set[tuple[Pos, Pos]] = set()
    while stack:
        state = stack.pop()
        if state in seen:
            continue
        seen.add(state)
        (x, y), direction = state
        if not (0 <= x < width and 0 <= y < height):
            continue
        image[y][x] = _PATH
        for back in graph[y][x].cost_min_dirs(direction):
            stack.append(((x - back[0], y - back[1]), back))
    return ["".join(row) for row in image]


def part_one(graph: list[list[GraphNode]], exit: Pos) -> int:
    """Lowest score of a path from the start to the exit."""
    node = graph[exit[1]][exit[0]]
    dirs = node.cost_min_dirs()
    if not dirs:
        raise ValueError("the exit cannot be reached")
    return node.costs[dirs[0]]


def part_two(image: list[str]) -> int:
    """Number of tiles on at least one cheapest path."""
    return sum(row.count(_PATH) for row in image) - 1


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Solve day 16.")
    parser.add_argument("input", nargs="?", default="input", help="puzzle input file")
    args = parser.parse_args(argv)
    try:
        text = Path(args.input).read_text()
    except FileNotFoundError:
        print(f"file not found: {args.input}", file=sys.stderr)
        return 1
    maze = parse(text)
    graph = construct_graph(maze)
    image = draw_graph(graph, maze.exit, maze.start)
    print(f"res gray star : {part_one(graph, maze.exit)}")
    print(f"res gold star : {part_two(image)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())