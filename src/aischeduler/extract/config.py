"""Configuration loader for the event extraction client."""

from __future__ import annotations

import os
from dataclasses import dataclass

from .constants import API_BASE_URL, DEFAULT_MAX_TOKENS, DEFAULT_MODEL, DEFAULT_TIMEOUT_SECONDS
from .errors import ExtractConfigError


@dataclass(frozen=True)
class ExtractConfig:
    api_key: str
    api_host: str
    model: str
    max_tokens: int
    timeout_seconds: float
    retry_attempts: int
    retry_delay_seconds: float


def _env_number(name: str, default: str, kind: type) -> int | float:
    raw = os.getenv(name, default)
    try:
        return kind(raw)
    except ValueError as exc:
        raise ExtractConfigError(f"Environment variable {name} must be a number", details={"value": raw}) from exc


def load_config() -> ExtractConfig:
    api_key = os.getenv("ANTHROPIC_API_KEY")
    if not api_key:
        raise ExtractConfigError("Required environment variable ANTHROPIC_API_KEY is not set")

    return ExtractConfig(
        api_key=api_key,
        api_host=os.getenv("ANTHROPIC_API_HOST", API_BASE_URL).rstrip("/"),
        model=os.getenv("AISCHEDULER_MODEL", DEFAULT_MODEL),
        max_tokens=int(_env_number("AISCHEDULER_MAX_TOKENS", str(DEFAULT_MAX_TOKENS), int)),
        timeout_seconds=float(_env_number("AISCHEDULER_TIMEOUT", str(DEFAULT_TIMEOUT_SECONDS), float)),
        retry_attempts=int(_env_number("AISCHEDULER_RETRY_ATTEMPTS", "3", int)),
        retry_delay_seconds=float(_env_number("AISCHEDULER_RETRY_DELAY", "1", float)),
    )
