"""Text and JSON rendering helpers for learning statistics."""

from __future__ import annotations

import dataclasses
import datetime as _dt
import json
import sys
from typing import Any, TextIO

_FILLED = "█"
_EMPTY = "░"

_PLAN_STATUS_LABELS = {
    "not-started": "⚪ Not Started",
    "in-progress": "🟡 In Progress",
    "completed": "🟢 Completed",
    "archived": "📦 Archived",
}

# Characters escaped so the output is safe to embed in HTML.
_HTML_ESCAPES = {"<": "\\u003c", ">": "\\u003e", "&": "\\u0026"}


def build_progress_bar(progress: float, width: int) -> str:
    """Return a bar of `width` cells between brackets, filled in proportion to progress."""
    filled = int(progress * width)
    filled = max(0, min(filled, width))
    return "[" + _FILLED * filled + _EMPTY * (width - filled) + "]"


def format_plan_status(status: str) -> str:
    """Return a plan status with an emoji label; unknown statuses pass through."""
    return _PLAN_STATUS_LABELS.get(status, status)


def _to_jsonable(obj: Any) -> Any:
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    if isinstance(obj, (_dt.datetime, _dt.date, _dt.time)):
        return obj.isoformat()
    if isinstance(obj, (set, frozenset, tuple)):
        return list(obj)
    raise TypeError(f"object of type {type(obj).__name__} is not JSON serializable")


def print_json(data: Any, stream: TextIO | None = None) -> None:
    """Write data as two-space indented JSON followed by a newline."""
    out = sys.stdout if stream is None else stream
    try:
        text = json.dumps(data, indent=2, ensure_ascii=False, default=_to_jsonable)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"failed to encode JSON: {exc}") from exc
    for char, escape in _HTML_ESCAPES.items():
        text = text.replace(char, escape)
    out.write(text + "\n")