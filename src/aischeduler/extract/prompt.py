"""Prompt construction for event extraction."""

from __future__ import annotations

from datetime import date
from typing import Optional

from aischeduler.events.constants import CATEGORIES

_TEMPLATE = """Please analyze the following content and extract calendar events. Look for patterns like meetings, appointments, classes, deadlines, etc. Return a JSON array of events with this exact format:

[
  {{
    "title": "Event title",
    "date": "YYYY-MM-DD",
    "startTime": "HH:MM",
    "endTime": "HH:MM",
    "category": "{categories}",
    "description": "Brief description if available"
  }}
]

Content to analyze:
{content}

IMPORTANT:
- Return ONLY valid JSON, no other text
- Use 24-hour format for times
- If time is not specified, estimate reasonable times
- If end time is not specified, add 1 hour to start time
- Today's date is {today}
- Convert relative dates like "tomorrow", "next week" to actual dates
- Be conservative - only extract clear, actionable events"""


def build_prompt(content: str, today: Optional[date] = None) -> str:
    return _TEMPLATE.format(
        categories="|".join(CATEGORIES),
        content=content,
        today=(today or date.today()).isoformat(),
    )
