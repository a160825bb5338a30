"""Interactive prompts used when stopping a learning session."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import TextIO


def is_interactive(no_prompt: bool) -> bool:
    """Return True when prompts should be shown."""
    if no_prompt:
        return False
    return sys.stdin.isatty() and sys.stdout.isatty()


def prompt_for_stop_note(reader: TextIO, writer: TextIO) -> str:
    """Ask for optional session notes; end of input means no notes."""
    writer.write("Session notes (optional): ")
    writer.flush()
    return reader.readline().strip()


def prompt_for_artifacts(reader: TextIO, writer: TextIO) -> list[str]:
    """Collect artifact URLs or paths until a blank line or end of input."""
    artifacts: list[str] = []
    while True:
        writer.write("Add artifact URL/path (leave blank to finish): ")
        writer.flush()
        line = reader.readline()
        value = line.strip()
        if not value:
            return artifacts
        artifacts.append(value)
        if not line.endswith("\n"):
            return artifacts


def collect_stop_inputs(
    note: str | None,
    artifacts: Iterable[str] | None,
    note_flag_set: bool,
    artifact_flag_set: bool,
    no_prompt: bool,
) -> tuple[str, list[str]]:
    """Return the note and artifacts for a stop, prompting for what is missing."""
    note = note or ""
    collected = list(artifacts or ())

    if not is_interactive(no_prompt):
        return note, collected

    reader, writer = sys.stdin, sys.stdout

    if not note_flag_set and not note:
        note = prompt_for_stop_note(reader, writer)

    if not artifact_flag_set:
        collected.extend(prompt_for_artifacts(reader, writer))

    return note, collected