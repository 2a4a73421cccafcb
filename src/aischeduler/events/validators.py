"""Validation and normalization of event candidates."""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from datetime import date
from typing import Any, Iterable, Iterator, Mapping, Optional

from .constants import DATE_PATTERN, DEFAULT_REMINDER, FALLBACK_CATEGORY, TIME_PATTERN
from .errors import EventValidationError
from .models import Event, EventCandidate

_DATE_RE = re.compile(DATE_PATTERN)
_TIME_RE = re.compile(TIME_PATTERN)
_REMINDER_RE = re.compile(r"[0-9]+")


@dataclass(frozen=True)
class ValidationIssue:
    index: int
    title: Optional[str]
    errors: tuple[str, ...]

    def to_dict(self) -> dict[str, Any]:
        return {"index": self.index, "title": self.title, "errors": list(self.errors)}


def is_valid_date(value: str) -> bool:
    if not _DATE_RE.fullmatch(value):
        return False
    try:
        date.fromisoformat(value)
    except ValueError:
        return False
    return True


def is_valid_time(value: str) -> bool:
    return _TIME_RE.fullmatch(value) is not None


def normalize_time(value: str) -> str:
    hours, minutes = value.split(":", 1)
    return f"{int(hours):02d}:{minutes}"


def parse_reminder(value: Optional[str]) -> Optional[int]:
    if value is None:
        return None
    stripped = value.strip()
    if not _REMINDER_RE.fullmatch(stripped):
        return None
    return int(stripped)


def _iter_errors(event: Event) -> Iterator[tuple[str, str, Any]]:
    if event.title is None or not event.title.strip():
        yield "title", "Event title is required", event.title

    if not event.date:
        yield "date", "Event date is required", event.date
    elif not is_valid_date(event.date):
        yield "date", "Invalid date format", event.date

    start_ok = False
    if not event.start_time:
        yield "startTime", "Start time is required", event.start_time
    elif not is_valid_time(event.start_time):
        yield "startTime", "Invalid start time format", event.start_time
    else:
        start_ok = True

    end_ok = False
    if not event.end_time:
        yield "endTime", "End time is required", event.end_time
    elif not is_valid_time(event.end_time):
        yield "endTime", "Invalid end time format", event.end_time
    else:
        end_ok = True

    if start_ok and end_ok and normalize_time(event.start_time) >= normalize_time(event.end_time):
        yield "endTime", "End time must be after start time", event.end_time

    if event.reminder and parse_reminder(event.reminder) is None:
        yield "reminder", "Invalid reminder value", event.reminder


def validate_event(candidate: EventCandidate | Event) -> list[str]:
    """Collect every validation error for a candidate (empty when valid)."""
    try:
        event = Event.from_candidate(candidate)
    except EventValidationError as exc:
        return [exc.message]
    return [message for _field, message, _value in _iter_errors(event)]


def check_event(candidate: EventCandidate | Event, index: Optional[int] = None) -> Event:
    """Return the canonical event or raise on the first failing rule."""
    try:
        event = Event.from_candidate(candidate)
    except EventValidationError as exc:
        raise EventValidationError(exc.message, field=exc.field, value=exc.value, index=index) from exc

    failure = next(_iter_errors(event), None)
    if failure is not None:
        field, message, value = failure
        raise EventValidationError(message, field=field, value=value, index=index, title=event.title)

    category = (event.category or "").strip() or FALLBACK_CATEGORY
    reminder = parse_reminder(event.reminder)
    return replace(
        event,
        title=event.title.strip(),
        start_time=normalize_time(event.start_time),
        end_time=normalize_time(event.end_time),
        category=category,
        description=event.description or "",
        reminder=str(reminder) if reminder is not None else DEFAULT_REMINDER,
    )


def _candidate_title(candidate: Any) -> Optional[str]:
    if isinstance(candidate, Event):
        return candidate.title
    if isinstance(candidate, Mapping):
        title = candidate.get("title")
        return title if title is None or isinstance(title, str) else str(title)
    return None


def validate_all(events: Iterable[EventCandidate | Event]) -> list[ValidationIssue]:
    issues: list[ValidationIssue] = []
    for index, candidate in enumerate(events):
        errors = validate_event(candidate)
        if errors:
            issues.append(ValidationIssue(index=index, title=_candidate_title(candidate), errors=tuple(errors)))
    return issues


def format_report(issues: Iterable[ValidationIssue]) -> str:
    lines = []
    for issue in issues:
        label = issue.title or "Untitled"
        lines.append(f"Event {issue.index + 1} ({label}): {', '.join(issue.errors)}")
    return "\n".join(lines)
