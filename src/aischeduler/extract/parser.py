"""Cleanup and parsing of extractor responses."""

from __future__ import annotations

import json
import logging
import re
from typing import Any

from .constants import REQUIRED_FIELDS
from .errors import ExtractParseError

logger = logging.getLogger(__name__)

_OPENING_FENCE_RE = re.compile(r"^```(?:json)?\s*")
_CLOSING_FENCE_RE = re.compile(r"\s*```$")


def clean_response_text(text: str) -> str:
    cleaned = text.strip()
    if cleaned.startswith("```"):
        cleaned = _OPENING_FENCE_RE.sub("", cleaned, count=1)
        cleaned = _CLOSING_FENCE_RE.sub("", cleaned, count=1)
    return cleaned.strip()


def has_required_fields(item: Any) -> bool:
    return isinstance(item, dict) and all(item.get(field) for field in REQUIRED_FIELDS)


def parse_candidates(text: str) -> list[dict[str, Any]]:
    """Parse a model response into candidate records with the required fields."""
    cleaned = clean_response_text(text)
    try:
        data = json.loads(cleaned)
    except json.JSONDecodeError as exc:
        raise ExtractParseError("Failed to parse AI response. Please try again.", raw_response=text) from exc

    if not isinstance(data, list):
        raise ExtractParseError("Response is not an array", raw_response=text)

    candidates = [item for item in data if has_required_fields(item)]
    dropped = len(data) - len(candidates)
    if dropped:
        logger.info("Dropped %d incomplete event(s) from response", dropped)
    return candidates
