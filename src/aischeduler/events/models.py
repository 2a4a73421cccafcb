"""Event data model."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date
from typing import Any, Mapping, Optional

from .constants import CATEGORIES, DEFAULT_REMINDER, FALLBACK_CATEGORY, FIELD_NAMES
from .errors import EventValidationError

EventCandidate = Mapping[str, Any]


def _text(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, str):
        return value
    return str(value)


@dataclass(frozen=True)
class Event:
    """A calendar event record.

    Values are kept as text exactly as received so that edits and JSON round
    trips preserve them. ``check_event`` produces the canonical form used for
    encoding.
    """

    title: Optional[str] = None
    date: Optional[str] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    category: Optional[str] = None
    description: Optional[str] = None
    reminder: Optional[str] = DEFAULT_REMINDER

    @classmethod
    def from_candidate(cls, candidate: EventCandidate | Event) -> Event:
        if isinstance(candidate, Event):
            return candidate
        if not isinstance(candidate, Mapping):
            raise EventValidationError("Event must be an object", field="event", value=candidate)
        return cls(
            title=_text(candidate.get("title")),
            date=_text(candidate.get("date")),
            start_time=_text(candidate.get("startTime")),
            end_time=_text(candidate.get("endTime")),
            category=_text(candidate.get("category")),
            description=_text(candidate.get("description")),
            reminder=_text(candidate.get("reminder")) or DEFAULT_REMINDER,
        )

    def to_dict(self) -> dict[str, Optional[str]]:
        return {key: getattr(self, attr) for key, attr in FIELD_NAMES.items()}

    def with_field(self, field: str, value: Any) -> Event:
        attr = FIELD_NAMES.get(field, field)
        if attr not in FIELD_NAMES.values():
            raise EventValidationError(f"Unknown event field '{field}'", field=field, value=value)
        text = _text(value)
        if attr == "reminder":
            text = text or DEFAULT_REMINDER
        return replace(self, **{attr: text})

    @property
    def display_category(self) -> str:
        category = (self.category or "").strip().lower()
        return category if category in CATEGORIES else FALLBACK_CATEGORY

    @property
    def reminder_minutes(self) -> Optional[int]:
        value = (self.reminder or "").strip()
        if not value.isascii() or not value.isdigit():
            return None
        return int(value)

    @property
    def has_alarm(self) -> bool:
        return bool(self.reminder) and self.reminder != "0"

    @property
    def day(self) -> Optional[date]:
        if not self.date:
            return None
        try:
            return date.fromisoformat(self.date)
        except ValueError:
            return None
