"""Shared types: Interval and the error hierarchy."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import TYPE_CHECKING, Iterator

if TYPE_CHECKING:
    from daterange_intervals.units import Unit


@dataclass(frozen=True)
class Interval:
    """One half-open sub-range [start, end) produced by an IntervalSet.

    Unpacks as a pair: ``start, end = interval``.
    """

    start: datetime
    end: datetime
    unit: Unit

    @property
    def duration(self) -> timedelta:
        return self.end - self.start

    def __iter__(self) -> Iterator[datetime]:
        yield self.start
        yield self.end


class IntervalError(Exception):
    """Base class for every error raised by this package."""


class InvalidInput(IntervalError, ValueError):
    """Raised when a range bound is missing, unparseable or out of order."""

    def __init__(self, argument: str, value: object, reason: str) -> None:
        self.argument = argument
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {argument} {value!r}: {reason}")


class InvalidUnit(IntervalError, ValueError):
    """Raised when a granularity is not one of the supported units."""

    def __init__(self, unit: object) -> None:
        self.unit = unit
        super().__init__(f"Invalid interval unit {unit!r} provided")


class InvalidVisitor(IntervalError, TypeError):
    """Raised for a non-Visitor passed to accept() or a non-callable callback."""

    def __init__(self, visitor: object, reason: str) -> None:
        self.visitor = visitor
        self.reason = reason
        super().__init__(f"Invalid visitor {type(visitor).__name__}: {reason}")


class VisitorError(IntervalError):
    """Wraps an exception raised by a visit callback, with traversal context."""

    def __init__(self, interval: Interval, depth: int, error: BaseException) -> None:
        self.interval = interval
        self.depth = depth
        self.error = error
        super().__init__(
            f"Visit failed at depth {depth} for {interval.unit.value} interval "
            f"[{interval.start.isoformat()}, {interval.end.isoformat()}): "
            f"{error!r}"
        )
