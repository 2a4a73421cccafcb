"""Event extraction from text sources."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Iterable, Optional

from aischeduler.events.collection import sort_events
from aischeduler.events.models import Event
from .client import AnthropicClient
from .files import load_sources
from .parser import parse_candidates
from .prompt import build_prompt

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExtractionResult:
    events: tuple[Event, ...]
    files_processed: int
    events_extracted: int


def extract_events(
    paths: Iterable[Path],
    client: Optional[AnthropicClient] = None,
    today: Optional[date] = None,
) -> ExtractionResult:
    bundle = load_sources(paths)
    prompt = build_prompt(bundle.content, today=today)
    active_client = client or AnthropicClient()

    logger.info("Requesting events from %s", active_client.model)
    response_text = active_client.create_message(prompt)
    candidates = parse_candidates(response_text)
    events = sort_events(Event.from_candidate(candidate) for candidate in candidates)

    return ExtractionResult(
        events=tuple(events),
        files_processed=len(bundle.files),
        events_extracted=len(events),
    )
