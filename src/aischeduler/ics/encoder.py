"""iCalendar document encoding for validated events."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional, Sequence

from aischeduler.events.errors import EventValidationError
from aischeduler.events.models import Event, EventCandidate
from aischeduler.events.validators import check_event
from .constants import (
    DEFAULT_FILENAME,
    ESCAPE_TABLE,
    LINE_BREAK,
    MAX_TEXT_LENGTH,
    MEDIA_TYPE,
    PROD_ID,
    TIMESTAMP_FORMAT,
    UID_DOMAIN,
)
from .errors import ICSEncodingError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SkippedEvent:
    index: int
    title: Optional[str]
    reason: str


@dataclass(frozen=True)
class CalendarDocument:
    text: str
    timestamp: str
    encoded: int
    skipped: tuple[SkippedEvent, ...] = ()
    filename: str = DEFAULT_FILENAME
    media_type: str = MEDIA_TYPE

    def to_bytes(self) -> bytes:
        return self.text.encode("utf-8")


def escape_text(value: Optional[str]) -> str:
    """Escape a TEXT value and cap it at 75 characters.

    The cap is applied after escaping; a cut that lands inside an escape
    pair leaves a trailing lone backslash.
    """
    if not value:
        return ""
    for old, new in ESCAPE_TABLE:
        value = value.replace(old, new)
    return value[:MAX_TEXT_LENGTH]


def format_timestamp(moment: datetime) -> str:
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc).strftime(TIMESTAMP_FORMAT)


def _local_datetime(day: str, clock: str) -> str:
    # Floating local time: no trailing Z, no TZID.
    return f"{day.replace('-', '')}T{clock.replace(':', '')}00"


def _category_value(category: Optional[str]) -> str:
    value = (category or "other").replace("\r", "").replace("\n", "")
    return value.upper()


def _alarm_lines(reminder: str, title: str) -> list[str]:
    return [
        "BEGIN:VALARM",
        f"TRIGGER:-PT{reminder}M",
        "ACTION:DISPLAY",
        f"DESCRIPTION:Reminder: {escape_text(title)}",
        "END:VALARM",
    ]


def _event_lines(event: Event, index: int, timestamp: str) -> list[str]:
    lines = [
        "BEGIN:VEVENT",
        f"UID:event-{index}-{timestamp}@{UID_DOMAIN}",
        f"DTSTAMP:{timestamp}",
        f"DTSTART:{_local_datetime(event.date, event.start_time)}",
        f"DTEND:{_local_datetime(event.date, event.end_time)}",
        f"SUMMARY:{escape_text(event.title)}",
        f"CATEGORIES:{_category_value(event.category)}",
    ]
    if event.description and event.description.strip():
        lines.append(f"DESCRIPTION:{escape_text(event.description)}")
    if event.has_alarm:
        lines.extend(_alarm_lines(event.reminder, event.title))
    lines.append("END:VEVENT")
    return lines


def _join(lines: list[str]) -> str:
    return LINE_BREAK.join(lines) + LINE_BREAK


def encode_event(
    candidate: EventCandidate | Event,
    index: int = 0,
    timestamp: Optional[str] = None,
) -> str:
    """Encode one VEVENT block; raises EventValidationError for invalid input."""
    event = check_event(candidate, index=index)
    stamp = timestamp or format_timestamp(datetime.now(timezone.utc))
    return _join(_event_lines(event, index, stamp))


def encode_calendar(
    events: Sequence[EventCandidate | Event],
    now: Optional[datetime] = None,
    filename: str = DEFAULT_FILENAME,
) -> CalendarDocument:
    """Encode a calendar document, skipping events that fail validation."""
    if isinstance(events, (str, bytes)) or not isinstance(events, Sequence) or len(events) == 0:
        raise ICSEncodingError("No events provided for ICS generation")

    timestamp = format_timestamp(now or datetime.now(timezone.utc))
    lines = [
        "BEGIN:VCALENDAR",
        "VERSION:2.0",
        f"PRODID:{PROD_ID}",
        "CALSCALE:GREGORIAN",
        "METHOD:PUBLISH",
    ]
    skipped: list[SkippedEvent] = []
    encoded = 0
    for index, candidate in enumerate(events):
        try:
            event = check_event(candidate, index=index)
        except EventValidationError as exc:
            logger.warning("Skipping invalid event at index %d: %s", index, exc.message)
            skipped.append(SkippedEvent(index=index, title=exc.title, reason=exc.message))
            continue
        lines.extend(_event_lines(event, index, timestamp))
        encoded += 1
    lines.append("END:VCALENDAR")

    logger.debug("Encoded %d event(s), skipped %d", encoded, len(skipped))
    return CalendarDocument(
        text=_join(lines),
        timestamp=timestamp,
        encoded=encoded,
        skipped=tuple(skipped),
        filename=filename,
    )
