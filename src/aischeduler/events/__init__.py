"""Event model, validation and collection helpers."""

from .collection import EventCollection, sort_events
from .errors import EventError, EventFileError, EventImportError, EventValidationError, format_error_for_user
from .models import Event, EventCandidate
from .store import export_to_json, import_from_json, load_events, save_events
from .validators import (
    ValidationIssue,
    check_event,
    format_report,
    is_valid_date,
    is_valid_time,
    validate_all,
    validate_event,
)

__all__ = [
    "Event",
    "EventCandidate",
    "EventCollection",
    "sort_events",
    "EventError",
    "EventFileError",
    "EventImportError",
    "EventValidationError",
    "format_error_for_user",
    "export_to_json",
    "import_from_json",
    "load_events",
    "save_events",
    "ValidationIssue",
    "check_event",
    "format_report",
    "is_valid_date",
    "is_valid_time",
    "validate_all",
    "validate_event",
]
