from __future__ import annotations

import math
from datetime import date, datetime, time, timedelta, timezone

from dateutil import parser as date_parser


ONE_DAY = timedelta(days=1)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def whole_days_between(start: datetime, end: datetime) -> int:
    '''Complete days from start to end, truncated toward zero (negative when end < start).'''
    return math.trunc((end - start) / ONE_DAY)


def word_count(text: str | None) -> int:
    return len((text or '').split())


def parse_datetime_value(value: str | int | float | date | None) -> datetime | None:
    if value is None:
        return None
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        # PyYAML hands back bare dates for values like 2024-05-01.
        parsed = datetime.combine(value, time.min)
    elif isinstance(value, (int, float)):
        if value > 1_000_000_000_000:
            value = value / 1000.0
        return datetime.fromtimestamp(value, tz=timezone.utc)
    elif isinstance(value, str):
        try:
            parsed = date_parser.parse(value)
        except (ValueError, OverflowError):
            return None
    else:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)
