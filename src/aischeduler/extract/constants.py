"""Constants for the event extraction client."""

from __future__ import annotations

API_BASE_URL = "https://api.anthropic.com"
MESSAGES_ENDPOINT = "/v1/messages"
ANTHROPIC_VERSION = "2023-06-01"

DEFAULT_MODEL = "claude-3-haiku-20240307"
DEFAULT_MAX_TOKENS = 4000
DEFAULT_TIMEOUT_SECONDS = 60

SOURCE_CONSTRAINTS = {
    "MAX_FILE_BYTES": 5 * 1024 * 1024,
    "MAX_FILES": 10,
    "EXTENSIONS": (".txt", ".md", ".json"),
    "MAX_CONTENT_TOKENS": 150000,
}

REQUIRED_FIELDS = ("title", "date", "startTime", "endTime")
