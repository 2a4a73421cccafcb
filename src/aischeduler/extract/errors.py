"""Error types for event extraction."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class ExtractError(Exception):
    message: str
    code: str = "EXTRACT_ERROR"
    details: Any | None = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.message


class ExtractConfigError(ExtractError):
    def __init__(self, message: str, details: Any | None = None) -> None:
        super().__init__(message, code="CONFIG_ERROR", details=details)


class ExtractValidationError(ExtractError):
    def __init__(self, message: str, field: str | None = None, value: Any | None = None) -> None:
        super().__init__(message, code="VALIDATION_ERROR", details={"field": field, "value": value})
        self.field = field
        self.value = value


class ExtractAPIError(ExtractError):
    def __init__(self, message: str, status_code: int | None = None, response: Any | None = None) -> None:
        super().__init__(message, code="API_ERROR", details={"status_code": status_code, "response": response})
        self.status_code = status_code
        self.response = response


class ExtractNetworkError(ExtractError):
    def __init__(self, message: str, original_error: Exception | None = None) -> None:
        super().__init__(message, code="NETWORK_ERROR", details={"original_error": str(original_error) if original_error else None})
        self.original_error = original_error


class ExtractTimeoutError(ExtractError):
    def __init__(self, message: str, timeout: float | None = None) -> None:
        super().__init__(message, code="TIMEOUT_ERROR", details={"timeout": timeout})
        self.timeout = timeout


class ExtractRateLimitError(ExtractError):
    def __init__(self, message: str, retry_after: int | None = None) -> None:
        super().__init__(message, code="RATE_LIMIT_ERROR", details={"retry_after": retry_after})
        self.retry_after = retry_after


class ExtractParseError(ExtractError):
    def __init__(self, message: str, raw_response: str | None = None) -> None:
        super().__init__(message, code="PARSE_ERROR", details={"raw_response": raw_response})
        self.raw_response = raw_response


def format_error_for_user(error: Exception) -> str:
    if isinstance(error, ExtractConfigError):
        return f"Configuration Error: {error.message}"
    if isinstance(error, ExtractValidationError):
        return f"Validation Error: {error.message}"
    if isinstance(error, ExtractAPIError):
        return f"API Error: {error.message}"
    if isinstance(error, ExtractNetworkError):
        return f"Network Error: {error.message}"
    if isinstance(error, ExtractTimeoutError):
        return f"Timeout Error: {error.message}"
    if isinstance(error, ExtractRateLimitError):
        return f"Rate Limit Error: {error.message}"
    if isinstance(error, ExtractParseError):
        return f"Parse Error: {error.message}"
    return f"Error: {str(error)}"
