"""Interactive prompts used when creating a plan and starting a session."""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import TextIO

MAX_HOURS = 1000.0
LEVELS = ("beginner", "intermediate", "advanced")


def _format_g(value: float) -> str:
    """Format a number compactly, without a trailing '.0' for whole values."""
    if math.isfinite(value) and value == int(value) and abs(value) < 1e21:
        return str(int(value))
    return repr(value)


def _read_line(reader: TextIO) -> tuple[str, bool]:
    """Read one line; return it with a flag telling whether input has ended."""
    line = reader.readline()
    return line, not line.endswith("\n")


def validate_init_inputs(hours: float) -> None:
    """Raise ValueError unless hours lies in (0, 1000]."""
    if hours <= 0:
        raise ValueError(f"hours must be positive, got {hours:.1f}")
    if hours > MAX_HOURS:
        raise ValueError(f"hours too large (max 1000), got {hours:.1f}")


def _parse_hours(text: str) -> float | None:
    if "_" in text:
        return None
    try:
        return float(text)
    except ValueError:
        return None


def prompt_for_hours(reader: TextIO, writer: TextIO, default_hours: float) -> float:
    """Ask for total hours until a valid value is given; blank keeps the default."""
    while True:
        writer.write(f"Total hours [{_format_g(default_hours)}]: ")
        writer.flush()
        line, at_eof = _read_line(reader)
        if at_eof and not line:
            return default_hours

        text = line.strip()
        if not text:
            return default_hours

        value = _parse_hours(text)
        if value is None or value <= 0 or value > MAX_HOURS:
            writer.write("Please enter a number between 1 and 1000.\n")
            if at_eof:
                return default_hours
            continue

        return value


def prompt_for_level(reader: TextIO, writer: TextIO) -> str:
    """Ask for a learning level; blank or end of input gives an empty string."""
    while True:
        writer.write("Learning level [beginner/intermediate/advanced]: ")
        writer.flush()
        line, at_eof = _read_line(reader)
        if at_eof and not line:
            return ""

        text = line.lower().strip()
        if not text:
            return ""
        if text in LEVELS:
            return text

        writer.write("Please choose beginner, intermediate, advanced or leave blank.\n")
        if at_eof:
            return ""


def prompt_for_goals(reader: TextIO, writer: TextIO) -> str:
    """Ask for optional goals text."""
    writer.write("Specific goals or focus areas (optional): ")
    writer.flush()
    return reader.readline().strip()


def prompt_for_initial_note(reader: TextIO, writer: TextIO) -> str:
    """Ask for an optional note to attach to a new session."""
    writer.write("Initial note (optional): ")
    writer.flush()
    return reader.readline().strip()


def join_sample(values: Sequence[str], limit: int) -> str:
    """Join at most `limit` values with commas, or return '-' when there are none."""
    if not values:
        return "-"
    return ", ".join(values[:limit])