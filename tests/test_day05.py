import pytest

from aoc2024.day05 import (
    Manual,
    check_rules,
    main,
    parse,
    parse_rule,
    parse_update,
    part_one,
    part_two,
    reorder,
)

EXAMPLE = """47|53
97|13
97|61
97|47
75|29
61|13
75|53
29|13
97|29
53|29
61|53
97|53
61|29
47|13
75|47
97|75
47|61
75|61
47|29
75|13
53|13

75,47,61,53,29
97,61,53,29,13
75,29,13
75,97,47,61,53
61,13,29
97,13,75,29,47
"""


@pytest.fixture
def manual() -> Manual:
    return parse(EXAMPLE)


def test_parse_rule():
    assert parse_rule("47|53") == (47, 53)


def test_parse_rule_rejects_other_lines():
    with pytest.raises(ValueError):
        parse_rule("47,53")


def test_parse_update():
    assert parse_update("75,47,61") == [75, 47, 61]


def test_parse_splits_sections(manual):
    assert manual.rules[0] == (47, 53)
    assert manual.updates[0] == [75, 47, 61, 53, 29]
    assert all(len(rule) == 2 for rule in manual.rules)


def test_check_rules_valid_update(manual):
    update = manual.updates[0]
    assert check_rules(manual.rules, update) == len(update)


def test_check_rules_invalid_update(manual):
    update = manual.updates[3]
    assert check_rules(manual.rules, update) < len(update)


def test_reorder_gives_valid_permutation(manual):
    for update in manual.updates:
        fixed = reorder(manual.rules, update)
        assert sorted(fixed) == sorted(update)
        assert check_rules(manual.rules, fixed) == len(fixed)


def test_reorder_keeps_valid_update(manual):
    update = manual.updates[0]
    assert reorder(manual.rules, update) == update


def test_part_one_example(manual):
    assert part_one(manual) == 143


def test_part_two_example(manual):
    assert part_two(manual) == 123


def test_main_missing_file(tmp_path):
    assert main([str(tmp_path / "absent")]) == 1


def test_main_prints_results(tmp_path, capsys):
    path = tmp_path / "input"
    path.write_text(EXAMPLE)
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert "res gray star : 143" in out