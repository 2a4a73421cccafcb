"""Event validation and iCalendar export for AI-extracted schedules."""

__version__ = "0.1.0"
