"""
Default directives for the marked formatter, read from a ``datetime.datetime``.

    %y  year, 2 digits           %I  hour (12h, 01-12)
    %Y  year, 4 digits           %p  AM (00-11) / PM (12-23)
    %m  month, 01-12             %M  minute
    %d  day of month             %S  second
    %H  hour (24h)               %f  millisecond, 3 digits
    %s  seconds since epoch      %T  %H:%M:%S
    %w  weekday, Monday = 0
"""
from __future__ import annotations

from datetime import datetime
from typing import Dict

from .base import DateHandler


def _pad(n: int, digits: int) -> str:
    return str(n).zfill(digits)


def short_year(date: datetime) -> str:
    return _pad(date.year % 100, 2)


def full_year(date: datetime) -> str:
    return _pad(date.year, 4)


def month(date: datetime) -> str:
    return _pad(date.month, 2)


def day(date: datetime) -> str:
    return _pad(date.day, 2)


def hour_24(date: datetime) -> str:
    return _pad(date.hour, 2)


def hour_12(date: datetime) -> str:
    return _pad(date.hour % 12 or 12, 2)


def meridiem(date: datetime) -> str:
    return "AM" if date.hour < 12 else "PM"


def minute(date: datetime) -> str:
    return _pad(date.minute, 2)


def second(date: datetime) -> str:
    return _pad(date.second, 2)


def epoch_seconds(date: datetime) -> str:
    # naive datetimes are taken as local time, same as datetime.timestamp()
    return f"{date.timestamp():.0f}"


def millisecond(date: datetime) -> str:
    return _pad(date.microsecond // 1000, 3)


def clock_time(date: datetime) -> str:
    return f"{hour_24(date)}:{minute(date)}:{second(date)}"


def weekday(date: datetime) -> str:
    return str(date.weekday())


DEFAULT_DATE_HANDLERS: Dict[str, DateHandler[datetime]] = {
    "y": short_year,
    "Y": full_year,
    "m": month,
    "d": day,
    "H": hour_24,
    "I": hour_12,
    "p": meridiem,
    "M": minute,
    "S": second,
    "s": epoch_seconds,
    "f": millisecond,
    "T": clock_time,
    "w": weekday,
}
