from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import Union

from .intervals import Interval

DateLike = Union[date, datetime]


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def beginning_of_day(value: DateLike) -> datetime:
    if isinstance(value, datetime):
        return datetime.combine(value.date(), time.min)
    return datetime.combine(value, time.min)


def calendar_day(instant: DateLike) -> Interval:
    start = beginning_of_day(instant)
    return Interval(start, start + timedelta(days=1))


def calendar_week(instant: DateLike) -> Interval:
    """Monday 00:00 through the following Monday 00:00, exclusive."""
    day = beginning_of_day(instant)
    monday = day - timedelta(days=day.weekday())
    return Interval(monday, monday + timedelta(days=7))


def calendar_month(value: DateLike) -> Interval:
    """[first day of the month, first day of next month) for any day inside it."""
    d = value.date() if isinstance(value, datetime) else value
    start = datetime(d.year, d.month, 1)
    if d.month == 12:
        end = datetime(d.year + 1, 1, 1)
    else:
        end = datetime(d.year, d.month + 1, 1)
    return Interval(start, end)


def as_datetime(value: DateLike) -> datetime:
    """Dates are read as midnight of that day; datetimes pass through."""
    if isinstance(value, datetime):
        return value
    return datetime.combine(value, time.min)
