"""Error types for event handling."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class EventError(Exception):
    message: str
    code: str = "EVENT_ERROR"
    details: Any | None = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.message


class EventValidationError(EventError):
    def __init__(
        self,
        message: str,
        field: str | None = None,
        value: Any | None = None,
        index: int | None = None,
        title: str | None = None,
    ) -> None:
        super().__init__(
            message,
            code="VALIDATION_ERROR",
            details={"field": field, "value": value, "index": index, "title": title},
        )
        self.field = field
        self.value = value
        self.index = index
        self.title = title


class EventImportError(EventError):
    def __init__(self, message: str, details: Any | None = None) -> None:
        super().__init__(message, code="IMPORT_ERROR", details=details)


class EventFileError(EventError):
    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(message, code="FILE_ERROR", details={"path": path})
        self.path = path


def format_error_for_user(error: Exception) -> str:
    if isinstance(error, EventValidationError):
        if error.title:
            return f"Validation Error: {error.message} (event '{error.title}')"
        return f"Validation Error: {error.message}"
    if isinstance(error, EventImportError):
        return f"Import Error: {error.message}"
    if isinstance(error, EventFileError):
        return f"File Error: {error.message}"
    if isinstance(error, EventError):
        return f"Error: {error.message}"
    return f"Error: {str(error)}"
