"""Boundary: coerce caller input to timezone-aware UTC datetimes."""

from __future__ import annotations

from datetime import date, datetime, time, timezone

from daterange_intervals.types import InvalidInput


def to_instant(value: object, name: str) -> datetime:
    """Convert a datetime, date, POSIX timestamp or ISO string to UTC.

    Naive datetimes are taken to be UTC already. Raises InvalidInput
    naming `name` for None or anything that does not parse.
    """
    if value is None:
        raise InvalidInput(name, value, "is missing")

    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, date):
        dt = datetime.combine(value, time(0, 0))
    elif isinstance(value, (int, float)) and not isinstance(value, bool):
        try:
            return datetime.fromtimestamp(value, tz=timezone.utc)
        except (OverflowError, OSError, ValueError) as e:
            raise InvalidInput(name, value, f"not a valid timestamp ({e})") from e
    elif isinstance(value, str):
        try:
            dt = datetime.fromisoformat(value.strip())
        except ValueError as e:
            raise InvalidInput(name, value, f"not an ISO-8601 date-time ({e})") from e
    else:
        raise InvalidInput(
            name, value, f"unsupported type {type(value).__name__}"
        )

    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    try:
        return dt.astimezone(timezone.utc)
    except OverflowError as e:
        raise InvalidInput(name, value, f"out of range in UTC ({e})") from e
