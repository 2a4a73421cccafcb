"""Constants for event validation."""

from __future__ import annotations

CATEGORIES = ("work", "meeting", "appointment", "personal", "class", "other")
FALLBACK_CATEGORY = "other"

DEFAULT_REMINDER = "60"

REMINDER_OPTIONS = {
    "0": "No reminder",
    "15": "15 minutes",
    "30": "30 minutes",
    "60": "1 hour",
    "1440": "1 day",
    "10080": "1 week",
}

DEFAULTS = {
    "title": "New Event",
    "startTime": "09:00",
    "endTime": "10:00",
    "category": FALLBACK_CATEGORY,
    "description": "",
    "reminder": DEFAULT_REMINDER,
}

# JSON key -> Event attribute
FIELD_NAMES = {
    "title": "title",
    "date": "date",
    "startTime": "start_time",
    "endTime": "end_time",
    "category": "category",
    "description": "description",
    "reminder": "reminder",
}

DATE_PATTERN = r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$"
TIME_PATTERN = r"^([01]?[0-9]|2[0-3]):[0-5][0-9]$"

EXPORT_FILENAME = "ai-scheduler-events.json"
