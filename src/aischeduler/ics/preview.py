"""Human-readable previews of calendar exports."""

from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from aischeduler.events.models import Event, EventCandidate
from .constants import ESTIMATED_BYTES_PER_EVENT, PREVIEW_MAX_EVENTS


def _plural(count: int, word: str) -> str:
    return f"{count} {word}{'s' if count != 1 else ''}"


def reminder_text(minutes: int | str) -> str:
    try:
        value = int(minutes)
    except (TypeError, ValueError):
        return str(minutes)
    if value == 0:
        return "No reminder"
    if value < 60:
        return _plural(value, "minute")
    if value < 1440:
        return _plural(value // 60, "hour")
    if value < 10080:
        return _plural(value // 1440, "day")
    return _plural(value // 10080, "week")


def _fields(item: EventCandidate | Event) -> Mapping[str, Any]:
    if isinstance(item, Event):
        return item.to_dict()
    if isinstance(item, Mapping):
        return item
    return {}


def _value(fields: Mapping[str, Any], key: str) -> Optional[str]:
    value = fields.get(key)
    if value is None or value == "":
        return None
    return str(value)


def generate_preview(events: Sequence[EventCandidate | Event], max_events: int = PREVIEW_MAX_EVENTS) -> str:
    if not events:
        return "No events to preview"
    max_events = max(0, max_events)

    lines = [f"Calendar Preview ({_plural(len(events), 'event')}):", ""]
    for position, item in enumerate(events[:max_events], start=1):
        fields = _fields(item)
        lines.append(f"{position}. {_value(fields, 'title') or ''}")
        lines.append(f"   Date: {_value(fields, 'date') or ''}")
        lines.append(f"   Time: {_value(fields, 'startTime') or ''} - {_value(fields, 'endTime') or ''}")
        lines.append(f"   Category: {_value(fields, 'category') or ''}")
        description = _value(fields, "description")
        if description:
            lines.append(f"   Description: {description}")
        reminder = _value(fields, "reminder")
        if reminder and reminder != "0":
            lines.append(f"   Reminder: {reminder_text(reminder)}")
        lines.append("")

    remaining = len(events) - max_events
    if remaining > 0:
        lines.append(f"... and {_plural(remaining, 'more event')}")
    return "\n".join(lines)


def file_size_estimate(events: Sequence[Any]) -> str:
    if not events:
        return "0 KB"
    estimated = len(events) * ESTIMATED_BYTES_PER_EVENT
    if estimated < 1024:
        return f"{estimated} bytes"
    if estimated < 1024 * 1024:
        return f"{round(estimated / 1024)} KB"
    return f"{round(estimated / (1024 * 1024))} MB"
