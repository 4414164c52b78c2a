"""daterange-intervals: calendar partitions of date-time ranges with visitor traversal."""

from daterange_intervals.instants import to_instant
from daterange_intervals.intervals import IntervalSet
from daterange_intervals.types import (
    Interval,
    IntervalError,
    InvalidInput,
    InvalidUnit,
    InvalidVisitor,
    VisitorError,
)
from daterange_intervals.units import FINER, Unit
from daterange_intervals.visitor import Visitor

__all__ = [
    "FINER",
    "Interval",
    "IntervalError",
    "IntervalSet",
    "InvalidInput",
    "InvalidUnit",
    "InvalidVisitor",
    "Unit",
    "Visitor",
    "VisitorError",
    "to_instant",
]
