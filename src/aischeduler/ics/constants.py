"""Constants for calendar document encoding."""

from __future__ import annotations

PROD_ID = "-//AI Scheduler//AI Scheduler 1.0//EN"
UID_DOMAIN = "aischeduler.com"

DEFAULT_FILENAME = "ai-generated-calendar.ics"
MEDIA_TYPE = "text/calendar"

LINE_BREAK = "\r\n"
MAX_TEXT_LENGTH = 75
TIMESTAMP_FORMAT = "%Y%m%dT%H%M%SZ"

# Applied in order; carriage returns are dropped, never escaped.
ESCAPE_TABLE = (
    ("\\", "\\\\"),
    (";", "\\;"),
    (",", "\\,"),
    ("\n", "\\n"),
    ("\r", ""),
)

PREVIEW_MAX_EVENTS = 5
ESTIMATED_BYTES_PER_EVENT = 250
