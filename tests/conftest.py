from __future__ import annotations

from datetime import datetime, timezone

import pytest

FIXED_NOW = datetime(2024, 2, 1, 12, 30, 45, tzinfo=timezone.utc)
FIXED_STAMP = "20240201T123045Z"


@pytest.fixture
def standup() -> dict[str, str]:
    return {
        "title": "Standup",
        "date": "2024-03-01",
        "startTime": "09:00",
        "endTime": "09:15",
        "category": "meeting",
        "reminder": "15",
    }


@pytest.fixture
def batch(standup: dict[str, str]) -> list[dict[str, str]]:
    return [
        standup,
        {
            "title": "Backwards",
            "date": "2024-03-01",
            "startTime": "14:00",
            "endTime": "13:00",
            "category": "work",
        },
        {
            "title": "Dentist",
            "date": "2024-03-02",
            "startTime": "16:00",
            "endTime": "17:00",
            "category": "appointment",
            "description": "Bring insurance card",
            "reminder": "1440",
        },
    ]


@pytest.fixture
def now() -> datetime:
    return FIXED_NOW
