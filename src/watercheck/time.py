# SPDX-License-Identifier: MIT

import datetime
from typing import cast

import pendulum

DISTANT_PAST = pendulum.Date(1, 1, 1)


def now_utc() -> pendulum.DateTime:
    return pendulum.now("UTC")


def local_date(datetime: pendulum.DateTime) -> pendulum.Date:
    """Calendar day of an instant in the local timezone."""
    local = datetime.in_tz("local")
    return pendulum.Date(local.year, local.month, local.day)


def datetime_to_iso_str(datetime: pendulum.DateTime) -> str:
    return datetime.isoformat()


def datetime_from_str(datetime: str) -> pendulum.DateTime:
    return cast(pendulum.DateTime, pendulum.parse(datetime))


def datetime_from_value(value: str | datetime.datetime) -> pendulum.DateTime:
    """Parse an ISO-8601 string. YAML may already have resolved it to a datetime."""
    if isinstance(value, datetime.datetime):
        return pendulum.instance(value)
    if not isinstance(value, str):
        raise TypeError(f"expected an ISO-8601 string, got {value!r}")
    return datetime_from_str(value)


def date_to_str(date: pendulum.Date) -> str:
    return date.isoformat()


def date_from_str(date: str | datetime.date) -> pendulum.Date:
    """Parse a 'YYYY-MM-DD' string. YAML may already have resolved it to a date."""
    if isinstance(date, datetime.date):
        return pendulum.Date(date.year, date.month, date.day)
    parsed = datetime.date.fromisoformat(date)
    return pendulum.Date(parsed.year, parsed.month, parsed.day)


def datetime_to_display_local_time_str(datetime: pendulum.DateTime) -> str:
    return datetime.in_tz("local").format("HH:mm")


def date_to_display_str(date: pendulum.Date) -> str:
    return date.format("MMM DD ddd")


def time_ago_str(timestamp: pendulum.DateTime, now: pendulum.DateTime) -> str:
    seconds = (now - timestamp).total_seconds()
    if seconds < 60:
        return "Just now"
    if seconds < 3600:
        return f"{int(seconds // 60)}m ago"
    return f"{int(seconds // 3600)}h ago"
