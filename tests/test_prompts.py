import io

import pytest

from samedi.prompts import (
    join_sample,
    prompt_for_goals,
    prompt_for_hours,
    prompt_for_initial_note,
    prompt_for_level,
    validate_init_inputs,
)


def test_prompt_for_hours_default():
    out = io.StringIO()
    assert prompt_for_hours(io.StringIO("\n"), out, 40) == 40.0
    assert "Total hours [40]: " in out.getvalue()


def test_prompt_for_hours_invalid_then_valid():
    out = io.StringIO()
    value = prompt_for_hours(io.StringIO("abc\n1001\n80\n"), out, 40)
    assert value == 80.0
    assert "Please enter a number between 1 and 1000." in out.getvalue()
    assert out.getvalue().count("Please enter a number") == 2


def test_prompt_for_hours_eof_without_input_gives_default():
    assert prompt_for_hours(io.StringIO(""), io.StringIO(), 12.5) == 12.5


def test_prompt_for_hours_invalid_at_eof_gives_default():
    out = io.StringIO()
    assert prompt_for_hours(io.StringIO("-3"), out, 40) == 40
    assert "Please enter a number between 1 and 1000." in out.getvalue()


def test_prompt_for_hours_value_without_newline():
    assert prompt_for_hours(io.StringIO(" 25.5 "), io.StringIO(), 40) == 25.5


def test_prompt_for_level():
    out = io.StringIO()
    level = prompt_for_level(io.StringIO("expert\nIntermediate\n"), out)
    assert level == "intermediate"
    assert "Please choose beginner, intermediate, advanced or leave blank." in out.getvalue()


def test_prompt_for_level_blank_and_eof():
    assert prompt_for_level(io.StringIO("\n"), io.StringIO()) == ""
    assert prompt_for_level(io.StringIO(""), io.StringIO()) == ""
    assert prompt_for_level(io.StringIO("wizard"), io.StringIO()) == ""


def test_prompt_for_goals():
    out = io.StringIO()
    goals = prompt_for_goals(io.StringIO("Focus on conversation\n"), out)
    assert goals == "Focus on conversation"
    assert out.getvalue() == "Specific goals or focus areas (optional): "


def test_prompt_for_initial_note_default():
    assert prompt_for_initial_note(io.StringIO("\n"), io.StringIO()) == ""


def test_prompt_for_initial_note_text():
    out = io.StringIO()
    assert prompt_for_initial_note(io.StringIO("  reading ch. 2 \n"), out) == "reading ch. 2"
    assert out.getvalue() == "Initial note (optional): "


@pytest.mark.parametrize("hours", [0.0, -1.0])
def test_validate_init_inputs_rejects_non_positive(hours):
    with pytest.raises(ValueError, match="hours must be positive"):
        validate_init_inputs(hours)


def test_validate_init_inputs_rejects_too_large():
    with pytest.raises(ValueError, match=r"hours too large \(max 1000\), got 1000.5"):
        validate_init_inputs(1000.5)


@pytest.mark.parametrize("hours", [0.5, 40.0, 1000.0])
def test_validate_init_inputs_accepts_range(hours):
    assert validate_init_inputs(hours) is None


@pytest.mark.parametrize(
    "values, limit, expected",
    [
        ([], 5, "-"),
        (["a"], 5, "a"),
        (["a", "b", "c"], 2, "a, b"),
        (["c1", "c2", "c3", "c4", "c5", "c6"], 5, "c1, c2, c3, c4, c5"),
    ],
)
def test_join_sample(values, limit, expected):
    assert join_sample(values, limit) == expected