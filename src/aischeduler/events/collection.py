"""In-memory event collection."""

from __future__ import annotations

from collections import Counter
from datetime import date
from typing import Any, Iterable, Iterator, Optional

from .constants import DEFAULTS
from .models import Event, EventCandidate
from .validators import ValidationIssue, is_valid_time, normalize_time, validate_all


def _sort_key(event: Event) -> tuple[str, str]:
    start = event.start_time or ""
    if is_valid_time(start):
        start = normalize_time(start)
    return event.date or "", start


def sort_events(events: Iterable[Event]) -> list[Event]:
    """Stable sort by date, then start time."""
    return sorted(events, key=_sort_key)


class EventCollection:
    def __init__(self, events: Optional[Iterable[EventCandidate | Event]] = None) -> None:
        self._events: list[Event] = []
        if events is not None:
            self.set_events(events)

    @property
    def events(self) -> tuple[Event, ...]:
        return tuple(self._events)

    @property
    def count(self) -> int:
        return len(self._events)

    def __len__(self) -> int:
        return len(self._events)

    def __iter__(self) -> Iterator[Event]:
        return iter(tuple(self._events))

    def set_events(self, candidates: Iterable[EventCandidate | Event]) -> None:
        self._events = [Event.from_candidate(candidate) for candidate in candidates]

    def add_event(self, fields: Optional[EventCandidate] = None, today: Optional[date] = None) -> int:
        """Append a manually created event, filling unset fields with defaults."""
        values: dict[str, Any] = dict(DEFAULTS)
        values["date"] = (today or date.today()).isoformat()
        values.update({key: value for key, value in (fields or {}).items() if value})
        self._events.append(Event.from_candidate(values))
        return len(self._events) - 1

    def update_event(self, index: int, field: str, value: Any) -> bool:
        if not 0 <= index < len(self._events):
            return False
        self._events[index] = self._events[index].with_field(field, value)
        return True

    def delete_event(self, index: int) -> bool:
        if not 0 <= index < len(self._events):
            return False
        del self._events[index]
        return True

    def clear(self) -> None:
        self._events = []

    def sort(self) -> None:
        self._events = sort_events(self._events)

    def validate_all(self) -> list[ValidationIssue]:
        return validate_all(self._events)

    def events_in_range(self, start: date, end: date) -> list[Event]:
        return [event for event in self._events if event.day is not None and start <= event.day <= end]

    def category_stats(self) -> dict[str, int]:
        return dict(Counter(event.category or DEFAULTS["category"] for event in self._events))

    def stats_text(self) -> str:
        if not self._events:
            return ""
        parts = ", ".join(f"{count} {category.capitalize()}" for category, count in self.category_stats().items())
        plural = "s" if len(self._events) != 1 else ""
        return f"{len(self._events)} event{plural} extracted: {parts}"

    def events_for_submission(self) -> list[dict[str, Optional[str]]]:
        submission = []
        for event in self._events:
            record = event.to_dict()
            record["title"] = (event.title or "").strip()
            record["description"] = event.description or ""
            submission.append(record)
        return submission
