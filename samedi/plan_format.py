"""Human-friendly formatting of plan and chunk attributes."""

from __future__ import annotations

_STATUS_LABELS = {
    "completed": "✓ completed",
    "in-progress": "→ in-progress",
    "not-started": "○ not-started",
    "archived": "archived",
}

_CHUNK_ICONS = {
    "completed": "✓",
    "in-progress": "→",
    "not-started": "○",
}

_ELLIPSIS = "..."


def format_status(status: str) -> str:
    """Return a status string with an indicator; unknown statuses pass through."""
    return _STATUS_LABELS.get(str(status), str(status))


def truncate(s: str, max_len: int) -> str:
    """Shorten a string to at most max_len characters, ending with an ellipsis."""
    if len(s) <= max_len:
        return s
    if max_len < len(_ELLIPSIS):
        raise ValueError(f"max_len must be at least {len(_ELLIPSIS)}, got {max_len}")
    return s[: max_len - len(_ELLIPSIS)] + _ELLIPSIS


def format_duration(minutes: int) -> str:
    """Format minutes as '45min', '2h' or '1.5h'."""
    if minutes < 60:
        return f"{minutes}min"
    hours = minutes / 60.0
    if minutes % 60 == 0:
        return f"{hours:.0f}h"
    return f"{hours:.1f}h"


def chunk_status_icon(status: str) -> str:
    """Return a one-character icon for a chunk status, blank when unknown."""
    return _CHUNK_ICONS.get(str(status), " ")