"""Read back generated calendar documents."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from pathlib import Path
from typing import Optional

from icalendar import Calendar

from .errors import ICSParseError


@dataclass(frozen=True)
class EventSummary:
    uid: str
    summary: str
    start: Optional[date | datetime]
    end: Optional[date | datetime]
    categories: tuple[str, ...]
    alarms: int


@dataclass(frozen=True)
class DocumentSummary:
    prodid: Optional[str]
    method: Optional[str]
    events: tuple[EventSummary, ...]

    @property
    def count(self) -> int:
        return len(self.events)


def _categories(component) -> tuple[str, ...]:
    value = component.get("categories")
    if value is None:
        return ()
    values = value if isinstance(value, list) else [value]
    names: list[str] = []
    for item in values:
        cats = getattr(item, "cats", None)
        if cats is not None:
            names.extend(str(cat) for cat in cats)
        else:
            names.append(str(item))
    return tuple(names)


def _event_summary(component) -> EventSummary:
    start_prop = component.get("dtstart")
    end_prop = component.get("dtend")
    return EventSummary(
        uid=str(component.get("uid", "")),
        summary=str(component.get("summary", "")),
        start=start_prop.dt if start_prop is not None else None,
        end=end_prop.dt if end_prop is not None else None,
        categories=_categories(component),
        alarms=len(component.walk("VALARM")),
    )


def inspect_document(text: str | bytes) -> DocumentSummary:
    try:
        calendar = Calendar.from_ical(text)
    except Exception as exc:
        raise ICSParseError("Invalid calendar file format", details=str(exc)) from exc

    prodid = calendar.get("prodid")
    method = calendar.get("method")
    events = tuple(_event_summary(component) for component in calendar.walk("VEVENT"))
    return DocumentSummary(
        prodid=str(prodid) if prodid is not None else None,
        method=str(method) if method is not None else None,
        events=events,
    )


def inspect_file(path: Path) -> DocumentSummary:
    if not path.exists():
        raise ICSParseError("Calendar file not found", details={"path": str(path)})
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise ICSParseError("Unable to read calendar file", details={"path": str(path)}) from exc
    return inspect_document(data)
