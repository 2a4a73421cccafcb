from __future__ import annotations

from datetime import datetime

import pytest

from aischeduler.events import Event, EventValidationError, validate_all
from aischeduler.ics import ICSEncodingError, encode_calendar, encode_event, escape_text, format_timestamp
from conftest import FIXED_STAMP

HEADER = (
    "BEGIN:VCALENDAR\r\n"
    "VERSION:2.0\r\n"
    "PRODID:-//AI Scheduler//AI Scheduler 1.0//EN\r\n"
    "CALSCALE:GREGORIAN\r\n"
    "METHOD:PUBLISH\r\n"
)


def _lines(text: str) -> list[str]:
    assert text.endswith("\r\n")
    return text[:-2].split("\r\n")


def _has_unescaped(value: str, specials: str = ";,\\\n") -> bool:
    position = 0
    while position < len(value):
        char = value[position]
        if char == "\\":
            if position + 1 >= len(value):
                return True
            position += 2
            continue
        if char in specials:
            return True
        position += 1
    return False


def test_single_event_document(standup, now):
    document = encode_calendar([standup], now=now)
    assert document.text.startswith(HEADER)
    assert document.text.endswith("END:VEVENT\r\nEND:VCALENDAR\r\n")
    assert document.text.count("BEGIN:VEVENT") == 1
    assert document.text.count("END:VEVENT") == 1
    assert document.encoded == 1
    assert document.skipped == ()


def test_standup_scenario(standup, now):
    lines = _lines(encode_calendar([standup], now=now).text)
    assert lines[5:] == [
        "BEGIN:VEVENT",
        f"UID:event-0-{FIXED_STAMP}@aischeduler.com",
        f"DTSTAMP:{FIXED_STAMP}",
        "DTSTART:20240301T090000",
        "DTEND:20240301T091500",
        "SUMMARY:Standup",
        "CATEGORIES:MEETING",
        "BEGIN:VALARM",
        "TRIGGER:-PT15M",
        "ACTION:DISPLAY",
        "DESCRIPTION:Reminder: Standup",
        "END:VALARM",
        "END:VEVENT",
        "END:VCALENDAR",
    ]


def test_every_line_uses_crlf(batch, now):
    text = encode_calendar(batch, now=now).text
    assert "\n" not in text.replace("\r\n", "")
    assert "\r" not in text.replace("\r\n", "")


def test_invalid_event_is_skipped(batch, now):
    document = encode_calendar(batch, now=now)
    assert document.text.count("BEGIN:VEVENT") == 2
    assert document.encoded == 2
    assert len(document.skipped) == 1
    skipped = document.skipped[0]
    assert (skipped.index, skipped.title, skipped.reason) == (1, "Backwards", "End time must be after start time")
    assert [issue.index for issue in validate_all(batch)] == [1]


def test_uids_use_input_position_and_shared_stamp(batch, now):
    lines = _lines(encode_calendar(batch, now=now).text)
    uids = [line for line in lines if line.startswith("UID:")]
    stamps = {line for line in lines if line.startswith("DTSTAMP:")}
    assert uids == [
        f"UID:event-0-{FIXED_STAMP}@aischeduler.com",
        f"UID:event-2-{FIXED_STAMP}@aischeduler.com",
    ]
    assert stamps == {f"DTSTAMP:{FIXED_STAMP}"}


def test_skip_is_logged(batch, now, caplog):
    with caplog.at_level("WARNING", logger="aischeduler.ics.encoder"):
        encode_calendar(batch, now=now)
    assert "Skipping invalid event at index 1" in caplog.text


@pytest.mark.parametrize("events", [[], (), "events", {"title": "x"}, None])
def test_empty_or_non_sequence_input_fails(events, now):
    with pytest.raises(ICSEncodingError) as exc_info:
        encode_calendar(events, now=now)
    assert exc_info.value.message == "No events provided for ICS generation"


def test_generator_input_fails(standup, now):
    with pytest.raises(ICSEncodingError):
        encode_calendar((event for event in [standup]), now=now)


def test_all_invalid_still_produces_document(now):
    document = encode_calendar([{"title": ""}], now=now)
    assert document.text == HEADER + "END:VCALENDAR\r\n"
    assert document.encoded == 0


def test_description_and_alarm_rules(standup, now):
    standup["description"] = "Daily sync; bring updates"
    standup["reminder"] = "0"
    lines = _lines(encode_calendar([standup], now=now).text)
    assert "DESCRIPTION:Daily sync\\; bring updates" in lines
    assert "BEGIN:VALARM" not in lines


def test_blank_description_is_omitted(standup, now):
    standup["description"] = "   "
    lines = _lines(encode_calendar([standup], now=now).text)
    assert not any(line.startswith("DESCRIPTION:") and "Reminder" not in line for line in lines)


def test_missing_reminder_uses_default_alarm(standup, now):
    del standup["reminder"]
    assert "TRIGGER:-PT60M" in _lines(encode_calendar([standup], now=now).text)


def test_category_defaults_and_upper_cases(standup, now):
    del standup["category"]
    unknown = dict(standup, category="Team Sync")
    lines = _lines(encode_calendar([standup, unknown], now=now).text)
    assert [line for line in lines if line.startswith("CATEGORIES:")] == ["CATEGORIES:OTHER", "CATEGORIES:TEAM SYNC"]


def test_category_line_breaks_are_removed(standup, now):
    standup["category"] = "work\r\nX-INJECTED:1"
    lines = _lines(encode_calendar([standup], now=now).text)
    assert "CATEGORIES:WORKX-INJECTED:1" in lines
    assert "X-INJECTED:1" not in lines


def test_single_digit_hours_are_padded(standup, now):
    standup["startTime"], standup["endTime"] = "9:05", "11:30"
    lines = _lines(encode_calendar([standup], now=now).text)
    assert "DTSTART:20240301T090500" in lines
    assert "DTEND:20240301T113000" in lines


def test_summary_has_no_unescaped_specials(standup, now):
    standup["title"] = "Plan; review, then \\ notes\nnext"
    lines = _lines(encode_calendar([standup], now=now).text)
    summary = next(line for line in lines if line.startswith("SUMMARY:"))
    assert summary == "SUMMARY:Plan\\; review\\, then \\\\ notes\\nnext"
    assert not _has_unescaped(summary[len("SUMMARY:"):])


def test_encoder_accepts_event_objects_and_does_not_mutate(standup, now):
    event = Event.from_candidate(standup)
    original = dict(standup)
    assert encode_calendar([event], now=now).text == encode_calendar([standup], now=now).text
    assert standup == original


def test_encode_event_in_isolation(standup):
    block = encode_event(standup, index=3, timestamp=FIXED_STAMP)
    assert block.startswith(f"BEGIN:VEVENT\r\nUID:event-3-{FIXED_STAMP}@aischeduler.com\r\n")
    assert block.endswith("END:VALARM\r\nEND:VEVENT\r\n")


def test_encode_event_rejects_invalid(standup):
    standup["endTime"] = standup["startTime"]
    with pytest.raises(EventValidationError) as exc_info:
        encode_event(standup)
    assert exc_info.value.message == "End time must be after start time"


def test_document_delivery_metadata(standup, now):
    document = encode_calendar([standup], now=now, filename="week.ics")
    assert document.filename == "week.ics"
    assert document.media_type == "text/calendar"
    assert document.timestamp == FIXED_STAMP
    assert document.to_bytes() == document.text.encode("utf-8")


def test_format_timestamp_treats_naive_as_utc():
    assert format_timestamp(datetime(2024, 1, 2, 3, 4, 5)) == "20240102T030405Z"


class TestEscapeText:
    def test_escape_order(self):
        assert escape_text("a\\;b") == "a\\\\\\;b"

    def test_specials(self):
        assert escape_text("a;b,c\nd") == "a\\;b\\,c\\nd"

    def test_carriage_returns_are_dropped(self):
        assert escape_text("line one\r\nline two\r") == "line one\\nline two"

    def test_empty_values(self):
        assert escape_text(None) == ""
        assert escape_text("") == ""

    def test_truncates_after_escaping(self):
        assert escape_text("x" * 100) == "x" * 75
        assert len(escape_text(";" * 50)) == 75

    def test_truncation_can_split_an_escape_pair(self):
        assert escape_text("a" * 74 + ";") == "a" * 74 + "\\"
