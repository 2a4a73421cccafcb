"""Error types for calendar document operations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class ICSError(Exception):
    message: str
    code: str = "ICS_ERROR"
    details: Any | None = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.message


class ICSEncodingError(ICSError):
    def __init__(self, message: str, details: Any | None = None) -> None:
        super().__init__(message, code="ENCODING_ERROR", details=details)


class ICSParseError(ICSError):
    def __init__(self, message: str, details: Any | None = None) -> None:
        super().__init__(message, code="PARSE_ERROR", details=details)


def format_error_for_user(error: Exception) -> str:
    if isinstance(error, ICSEncodingError):
        return f"Encoding Error: {error.message}"
    if isinstance(error, ICSParseError):
        return f"Parse Error: {error.message}"
    if isinstance(error, ICSError):
        return f"Error: {error.message}"
    return f"Error: {str(error)}"
