# aoc2024

Solvers for the 2024 Advent of Code puzzles, days 1 to 19. Each day has its own
module, from `aoc2024.day01` to `aoc2024.day19`. A module parses that day's puzzle
text and computes the answers to both parts of the puzzle.

The package uses only the Python standard library and needs Python 3.10 or later.

## Installation

```
pip install .
```

## Command line

Each day has its own command, from `aoc2024-day01` to `aoc2024-day19`. A command
reads the puzzle input from a file and prints the two answers:

```
aoc2024-day01              # reads ./input
aoc2024-day07 my-input.txt
```

The file argument is optional and defaults to `input` in the current directory.
The output has two lines, `res gray star : <part one>` and `res gold star : <part two>`.
When the file does not exist, the command prints `file not found: <path>` on
standard error and exits with status 1.

Some commands take extra options:

- `aoc2024-day14 --width W --height H` sets the size of the room. The default is 101 by 103.
- `aoc2024-day18 --width W --height H --threshold N` sets the size of the memory
  space and how many bytes have already fallen when the search starts. The
  defaults are 71, 71 and 1024. Part two is printed as `[x,y]`.

## Library use

Each day module has `parse(text)`, which turns the raw puzzle text into that day's
input. It also has `part_one(...)` and `part_two(...)`, which compute the answers:

```python
from aoc2024 import day01

lists = day01.parse("3   4\n4   3\n2   5\n1   3\n3   9\n3   3\n")
print(day01.part_one(lists))  # 11
print(day01.part_two(lists))  # 31
```

Some days take more than the parsed input:

- `day14.part_one(robots, width, height)` and
  `day14.part_two(robots, width, height, iterations)` take the size of the room.
  Part two returns the first second at which at least 100 robots form one
  connected group. It returns 0 if that does not happen within `iterations` seconds.
- `day15.parse(text)` gives the normal warehouse and `day15.parse_wide(text)` the
  double-width one. They go to `part_one` and `part_two` respectively.
- `day16.part_one(graph, exit)` and `day16.part_two(image)` work on the cost graph
  that `construct_graph(maze)` builds and on the drawing that `draw_graph(graph, exit, start)` returns.
- `day18.parse(text, width, height, threshold)` takes the size of the memory space
  and the number of bytes already fallen. `part_two` returns the first falling
  byte that cuts off the exit, or `(0, 0)` if no byte does.

## Limits

- Days 20 to 25 are not included.
- The package does not download puzzle inputs. Save your input to a file first.
- `day17.run_program` runs any program for the computer. `day17.part_one` and
  `day17.part_two` do not: they use `run_short`, a fixed unrolled version of one
  particular puzzle program. They give correct answers only for inputs whose
  program has that structure.

## Tests

```
pip install ".[test]"
pytest
```