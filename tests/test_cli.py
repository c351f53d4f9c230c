"""
Tests for the command-line wrapper: defaults, argument handling,
validation exit codes and the final verdict line.
"""

import pytest
from river_crossing.cli import main


def last_line_of(out):
    return out.rstrip("\n").split("\n")[-1]


def last_line(capsys):
    return last_line_of(capsys.readouterr().out)


def test_defaults_to_three_and_three(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith(
        "Current State: \n"
        "\tMissionaries on the left: 3\n"
        "\tCannibals on the left: 3\n"
    )
    assert out.endswith("Solution found!\n")


def test_single_missionary_full_output(capsys):
    assert main(["1"]) == 0
    assert capsys.readouterr().out == (
        "Current State: \n"
        "\tMissionaries on the left: 1\n"
        "\tCannibals on the left: 0\n"
        "\tMissionaries on the right: 0\n"
        "\tCannibals on the right: 0\n"
        "\tBoat on the left: true\n"
        "Current State: \n"
        "\tMissionaries on the left: 0\n"
        "\tCannibals on the left: 0\n"
        "\tMissionaries on the right: 1\n"
        "\tCannibals on the right: 0\n"
        "\tBoat on the left: false\n"
        "Solution found!\n"
    )


def test_two_counts(capsys):
    assert main(["4", "4"]) == 0
    assert last_line(capsys) == "No solution exists."


def test_zero_people_has_no_solution(capsys):
    assert main(["0", "0"]) == 0
    assert last_line(capsys) == "No solution exists."


def test_other_argument_counts_fall_back_to_default(capsys):
    assert main(["1", "2", "3"]) == 0
    out = capsys.readouterr().out
    assert "\tMissionaries on the left: 3\n\tCannibals on the left: 3\n" in out
    assert out.endswith("Solution found!\n")


def test_unused_arguments_are_never_parsed(capsys):
    assert main(["a", "b", "c"]) == 0
    out = capsys.readouterr().out
    assert "\tMissionaries on the left: 3\n\tCannibals on the left: 3\n" in out
    assert last_line_of(out) == "Solution found!"


@pytest.mark.parametrize("argv, message", [
    (["-1"], "Missionary count cannot be negative."),
    (["-1", "2"], "Missionary count cannot be negative."),
    (["2", "-1"], "Cannibal count cannot be negative."),
    (["-1", "-1"], "Cannibal count cannot be negative."),   # cannibals checked first
])
def test_negative_counts_rejected_before_search(capsys, argv, message):
    assert main(argv) == 1
    assert capsys.readouterr().out == message + "\n"


def test_non_numeric_is_a_parse_error(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["three"])
    assert exc.value.code == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "invalid int value" in captured.err


@pytest.mark.parametrize("argv", [["x", "2"], ["2", "x"], ["1.5"]])
def test_non_numeric_count_is_a_parse_error(capsys, argv):
    with pytest.raises(SystemExit) as exc:
        main(argv)
    assert exc.value.code == 2
    assert "invalid int value" in capsys.readouterr().err


def test_cannibal_count_validated_before_missionary_is_parsed(capsys):
    assert main(["x", "-1"]) == 1
    assert capsys.readouterr().out == "Cannibal count cannot be negative.\n"
