"""IntervalSet: partition a date-time range and drive visitor traversal.

A range [start, end) is cut into consecutive intervals one unit long,
stepping a cursor from ``start`` with UTC calendar-field arithmetic. The
last interval always ends exactly at ``end``; when the range is not a whole
number of units the last interval is truncated.

Traversal is "visitor-like" rather than a plain visitor: the visitor is not
fully decoupled from the data, because it decides per interval whether the
traversal descends into a finer partition of that interval.

    2024-01-01 .. 2025-01-01, quarter, descend at depth 0:

        Q1 [01-01, 04-01)          depth 0
            Jan [01-01, 02-01)     depth 1
            Feb [02-01, 03-01)     depth 1
            Mar [03-01, 04-01)     depth 1
        Q2 [04-01, 07-01)          depth 0
            ...
"""

from __future__ import annotations

import inspect
import logging
from datetime import datetime
from typing import Iterator

from daterange_intervals.instants import to_instant
from daterange_intervals.types import Interval, InvalidInput, InvalidVisitor, VisitorError
from daterange_intervals.units import Unit
from daterange_intervals.visitor import Visitor


class IntervalSet:
    """Immutable partition of [start, end) at one granularity unit.

    ``start`` and ``end`` always report the constructed range; the bounds of
    each interval are carried by the Interval values yielded by iteration.
    """

    def __init__(
        self,
        start: object,
        end: object,
        unit: Unit | str,
        *,
        logger: logging.Logger | None = None,
    ) -> None:
        self._unit = Unit.parse(unit)
        self._start = to_instant(start, "start")
        self._end = to_instant(end, "end")
        if self._start >= self._end:
            raise InvalidInput(
                "end", end, f"must be after start {self._start.isoformat()}"
            )
        self._logger = logger if logger is not None else logging.getLogger(__name__)

        boundaries: list[datetime] = []
        cursor: datetime | None = self._start
        while cursor < self._end:
            boundaries.append(cursor)
            try:
                cursor = self._unit.advance(cursor)
            except OverflowError:
                # Stepped past datetime.max: certainly beyond end.
                cursor = None
                break
        boundaries.append(self._end)

        self._boundaries = tuple(boundaries)
        self._is_equipartition = cursor == self._end

        self._logger.debug(
            "Created %d %s segments for range (%s, %s)",
            self.length,
            self._unit.value,
            self._start.isoformat(),
            self._end.isoformat(),
        )

    @property
    def start(self) -> datetime:
        return self._start

    @property
    def end(self) -> datetime:
        return self._end

    @property
    def unit(self) -> Unit:
        return self._unit

    @property
    def finer_unit(self) -> Unit | None:
        """Unit a descent from this set would use, or None."""
        return self._unit.finer

    @property
    def boundaries(self) -> tuple[datetime, ...]:
        """start, every intermediate cut, then end. Strictly increasing."""
        return self._boundaries

    @property
    def length(self) -> int:
        """Number of intervals."""
        return len(self._boundaries) - 1

    @property
    def is_equipartition(self) -> bool:
        """Whether the final interval is a full unit rather than a truncated tail."""
        return self._is_equipartition

    def __len__(self) -> int:
        return self.length

    def __iter__(self) -> Iterator[Interval]:
        boundaries = self._boundaries
        for i in range(len(boundaries) - 1):
            yield Interval(boundaries[i], boundaries[i + 1], self._unit)

    def __repr__(self) -> str:
        return (
            f"IntervalSet({self._start.isoformat()!r}, {self._end.isoformat()!r}, "
            f"{self._unit.value!r}, length={self.length})"
        )

    async def accept(self, visitor: Visitor) -> None:
        """Visit every interval in order, descending where the visitor asks.

        The walk is pre-order and depth-first: an interval is visited before
        its subdivisions, and all of them are visited before its next
        sibling. A visit that raises is logged and its subtree skipped,
        unless ``visitor.propagate_errors`` is set, in which case a
        VisitorError aborts the traversal.

        Raises InvalidVisitor if `visitor` is not a Visitor.
        """
        if not isinstance(visitor, Visitor):
            raise InvalidVisitor(visitor, "accepts only Visitor instances")

        finer = self._unit.finer
        for interval in self:
            self._logger.debug(
                "visiting %s %s - %s (depth %d)",
                interval.unit.value,
                interval.start.isoformat(),
                interval.end.isoformat(),
                visitor.depth,
            )
            try:
                descend = visitor.visit(interval)
                if inspect.isawaitable(descend):
                    descend = await descend
            except Exception as e:
                error = VisitorError(interval, visitor.depth, e)
                if visitor.propagate_errors:
                    raise error from e
                self._logger.error("%s; continuing with next interval", error, exc_info=e)
                continue

            if descend and visitor.sub_intervals and finer is not None:
                self._logger.debug(
                    "recursing lower for subinterval: %s (%s, %s)",
                    finer.value,
                    interval.start.isoformat(),
                    interval.end.isoformat(),
                )
                visitor.depth += 1
                try:
                    child = IntervalSet(
                        interval.start, interval.end, finer, logger=self._logger
                    )
                    await child.accept(visitor)
                finally:
                    visitor.depth -= 1
