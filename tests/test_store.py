from __future__ import annotations

import json

import pytest

from aischeduler.events import (
    Event,
    EventCollection,
    EventFileError,
    EventImportError,
    export_to_json,
    import_from_json,
    load_events,
    save_events,
)


@pytest.fixture
def events(batch) -> list[Event]:
    extra = Event(title="Café ☕", date="2024-03-03", start_time="07:30", end_time="08:00", description=None)
    return [Event.from_candidate(candidate) for candidate in batch] + [extra]


def test_round_trip_preserves_order_and_values(events):
    assert import_from_json(export_to_json(events)) == events


def test_export_uses_candidate_keys(events):
    data = json.loads(export_to_json(events))
    assert list(data[0]) == ["title", "date", "startTime", "endTime", "category", "description", "reminder"]
    assert data[0]["startTime"] == "09:00"
    assert data[3]["description"] is None


def test_export_is_pretty_printed(events):
    assert export_to_json(events[:1]).startswith('[\n  {\n    "title": "Standup"')


def test_import_rejects_malformed_json():
    with pytest.raises(EventImportError) as exc_info:
        import_from_json("[{")
    assert exc_info.value.message == "Failed to parse JSON"


def test_import_rejects_non_array():
    with pytest.raises(EventImportError) as exc_info:
        import_from_json('{"title": "x"}')
    assert exc_info.value.message == "Invalid JSON format"


def test_import_rejects_non_object_items():
    with pytest.raises(EventImportError):
        import_from_json('[{"title": "ok"}, 3]')


def test_import_does_not_validate():
    imported = import_from_json('[{"title": "", "startTime": "25:00"}]')
    assert imported == [Event(title="", start_time="25:00")]


def test_save_and_load(tmp_path, events):
    path = save_events(tmp_path / "nested" / "events.json", events)
    assert load_events(path) == events


def test_load_missing_file(tmp_path):
    with pytest.raises(EventFileError):
        load_events(tmp_path / "missing.json")


def test_load_directory(tmp_path):
    with pytest.raises(EventFileError):
        load_events(tmp_path)


def test_round_trip_after_clearing_reminder(events):
    collection = EventCollection(events)
    collection.update_event(0, "reminder", "")
    collection.update_event(1, "reminder", None)
    edited = list(collection.events)
    assert edited[0].reminder == "60"
    assert edited[1].reminder == "60"
    assert import_from_json(export_to_json(edited)) == edited
