"""JSON import/export for event collections."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable, Mapping

from .errors import EventFileError, EventImportError
from .models import Event


def export_to_json(events: Iterable[Event], indent: int = 2) -> str:
    return json.dumps([event.to_dict() for event in events], indent=indent, ensure_ascii=False)


def import_from_json(text: str) -> list[Event]:
    try:
        data = json.loads(text)
    except (TypeError, ValueError) as exc:
        raise EventImportError("Failed to parse JSON", details=str(exc)) from exc

    if not isinstance(data, list):
        raise EventImportError("Invalid JSON format", details={"type": type(data).__name__})

    events: list[Event] = []
    for index, item in enumerate(data):
        if not isinstance(item, Mapping):
            raise EventImportError(f"Event {index + 1} is not a JSON object", details={"index": index})
        events.append(Event.from_candidate(item))
    return events


def load_events(path: Path) -> list[Event]:
    if not path.exists():
        raise EventFileError("Events file not found", path=str(path))
    if path.is_dir():
        raise EventFileError("Events path is a directory", path=str(path))
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise EventFileError("Unable to read events file", path=str(path)) from exc
    return import_from_json(text)


def save_events(path: Path, events: Iterable[Event]) -> Path:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(export_to_json(events) + "\n", encoding="utf-8")
    except OSError as exc:
        raise EventFileError("Unable to write events file", path=str(path)) from exc
    return path
