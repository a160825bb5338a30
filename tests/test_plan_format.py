import pytest

from samedi.plan_format import (
    chunk_status_icon,
    format_duration,
    format_status,
    truncate,
)


@pytest.mark.parametrize(
    ("status", "expected"),
    [
        ("completed", "✓ completed"),
        ("in-progress", "→ in-progress"),
        ("not-started", "○ not-started"),
        ("archived", "archived"),
        ("unknown", "unknown"),
    ],
)
def test_format_status(status, expected):
    assert format_status(status) == expected


@pytest.mark.parametrize(
    ("text", "max_len", "expected"),
    [
        ("short", 10, "short"),
        ("exactly ten", 11, "exactly ten"),
        (
            "this is a very long title that should be truncated",
            20,
            "this is a very lo...",
        ),
        ("", 10, ""),
    ],
)
def test_truncate(text, max_len, expected):
    result = truncate(text, max_len)
    assert result == expected
    assert len(result) <= max_len


def test_truncate_too_small_limit_raises():
    with pytest.raises(ValueError):
        truncate("abcdef", 2)


@pytest.mark.parametrize(
    ("minutes", "expected"),
    [
        (30, "30min"),
        (45, "45min"),
        (60, "1h"),
        (90, "1.5h"),
        (120, "2h"),
        (135, "2.2h"),
    ],
)
def test_format_duration(minutes, expected):
    assert format_duration(minutes) == expected


@pytest.mark.parametrize(
    ("status", "expected"),
    [
        ("completed", "✓"),
        ("in-progress", "→"),
        ("not-started", "○"),
        ("skipped", " "),
        ("archived", " "),
    ],
)
def test_chunk_status_icon(status, expected):
    assert chunk_status_icon(status) == expected