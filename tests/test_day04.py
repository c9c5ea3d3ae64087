from aoc2024.day04 import (
    XmasFinder,
    horizontal_search,
    main,
    main_diagonal_search,
    parse,
    part_one,
    part_two,
    secondary_diagonal_search,
    vertical_search,
)

EXAMPLE = """MMMSXXMASM
MSAMXMSMSA
AMXSXMAAMM
MSAMASMSMX
XMASAMXAMM
XXAMMXXAMA
SMSMSASXSS
SAXAMASAAA
MAMMMXMMMM
MXMXAXMASX
"""


def test_example_answers():
    grid = parse(EXAMPLE)
    assert part_one(grid) == 18
    assert part_two(grid) == 9


def test_finder_reports_completion_on_last_letter():
    finder = XmasFinder()
    assert [finder.check(c) for c in "XMAS"] == [False, False, False, True]


def test_finder_restarts_on_new_x():
    finder = XmasFinder()
    results = [finder.check(c) for c in "XMXMAS"]
    assert results[-1] is True
    assert sum(results) == 1


def test_finder_reset_clears_state():
    finder = XmasFinder()
    for c in "XMA":
        finder.check(c)
    finder.reset()
    assert finder.check("S") is False


def test_horizontal_counts_both_directions():
    assert horizontal_search(["XMAS"]) == horizontal_search(["SAMX"])


def test_vertical_is_horizontal_of_transpose():
    grid = parse(EXAMPLE)
    transposed = ["".join(col) for col in zip(*grid)]
    assert vertical_search(grid) == horizontal_search(transposed)


def test_diagonals_swap_under_mirror():
    grid = parse(EXAMPLE)
    mirrored = [row[::-1] for row in grid]
    assert secondary_diagonal_search(mirrored) == main_diagonal_search(grid)
    assert main_diagonal_search(mirrored) == secondary_diagonal_search(grid)


def test_part_one_is_sum_of_searches():
    grid = parse(EXAMPLE)
    assert part_one(grid) == (
        horizontal_search(grid)
        + vertical_search(grid)
        + main_diagonal_search(grid)
        + secondary_diagonal_search(grid)
    )


def test_part_two_rotation_invariant():
    grid = parse(EXAMPLE)
    rotated = ["".join(col) for col in zip(*grid[::-1])]
    assert part_two(rotated) == part_two(grid)


def test_main_prints_results(tmp_path, capsys):
    path = tmp_path / "input"
    path.write_text(EXAMPLE)
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    grid = parse(EXAMPLE)
    assert f"res gray star : {part_one(grid)}" in out
    assert f"res gold star : {part_two(grid)}" in out