"""iCalendar document encoding."""

from .encoder import CalendarDocument, SkippedEvent, encode_calendar, encode_event, escape_text, format_timestamp
from .errors import ICSEncodingError, ICSError, ICSParseError, format_error_for_user
from .inspect import DocumentSummary, EventSummary, inspect_document, inspect_file
from .preview import file_size_estimate, generate_preview, reminder_text

__all__ = [
    "CalendarDocument",
    "SkippedEvent",
    "encode_calendar",
    "encode_event",
    "escape_text",
    "format_timestamp",
    "ICSError",
    "ICSEncodingError",
    "ICSParseError",
    "format_error_for_user",
    "DocumentSummary",
    "EventSummary",
    "inspect_document",
    "inspect_file",
    "file_size_estimate",
    "generate_preview",
    "reminder_text",
]
