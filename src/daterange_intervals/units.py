"""Granularity units and UTC calendar-field stepping."""

from __future__ import annotations

from datetime import MAXYEAR, MINYEAR, datetime, timedelta
from enum import StrEnum

from daterange_intervals.types import InvalidUnit


def _add_months(dt: datetime, months: int) -> datetime:
    """Add whole months to the month field, keeping day-of-month and time.

    A day-of-month missing from the target month overflows into the next
    month: Jan 31 + 1 month lands on Mar 2 (leap year) or Mar 3.
    """
    total = dt.month - 1 + months
    year = dt.year + total // 12
    month = total % 12 + 1
    if not MINYEAR <= year <= MAXYEAR:
        raise OverflowError(f"year {year} is out of range")
    first = dt.replace(year=year, month=month, day=1)
    return first + timedelta(days=dt.day - 1)


class Unit(StrEnum):
    """Calendar step size. Each member compares equal to its name."""

    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    QUARTER = "quarter"
    YEAR = "year"

    @classmethod
    def parse(cls, value: object) -> Unit:
        """Return the Unit for a member or exact unit name.

        Raises InvalidUnit for anything else.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value)
            except ValueError:
                pass
        raise InvalidUnit(value)

    @property
    def finer(self) -> Unit | None:
        """Next finer unit to descend into, or None at the bottom."""
        return FINER.get(self)

    def advance(self, cursor: datetime) -> datetime:
        """Return the instant one unit after `cursor`.

        Raises OverflowError past the representable datetime range.
        """
        if self in _FIXED_STEPS:
            return cursor + _FIXED_STEPS[self]
        return _add_months(cursor, _MONTH_STEPS[self])


_FIXED_STEPS: dict[Unit, timedelta] = {
    Unit.SECOND: timedelta(seconds=1),
    Unit.MINUTE: timedelta(minutes=1),
    Unit.HOUR: timedelta(hours=1),
    # UTC has no DST, so a calendar day is always 24 hours
    Unit.DAY: timedelta(days=1),
    Unit.WEEK: timedelta(days=7),
}

_MONTH_STEPS: dict[Unit, int] = {
    Unit.MONTH: 1,
    Unit.QUARTER: 3,
    Unit.YEAR: 12,
}

FINER: dict[Unit, Unit] = {
    Unit.MINUTE: Unit.SECOND,
    Unit.HOUR: Unit.MINUTE,
    Unit.DAY: Unit.HOUR,
    Unit.WEEK: Unit.DAY,
    Unit.MONTH: Unit.DAY,
    Unit.QUARTER: Unit.MONTH,
    Unit.YEAR: Unit.MONTH,
}
