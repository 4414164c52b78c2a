"""Text rendering for development-time verification.

This module is dev-only and not imported by production code.
"""

from __future__ import annotations

import asyncio
from typing import Callable

from daterange_intervals.intervals import IntervalSet
from daterange_intervals.types import Interval
from daterange_intervals.visitor import Visitor


def show_intervals(intervals: IntervalSet) -> str:
    """Print a table of the intervals in a set, one row per interval.

    Returns the string and also prints to stdout.
    """
    lines: list[str] = []
    lines.append(f"{'#':>4s}  {'start':<25s}  {'end':<25s}  duration")

    for i, interval in enumerate(intervals):
        lines.append(
            f"{i:>4d}  {interval.start.isoformat():<25s}  "
            f"{interval.end.isoformat():<25s}  {interval.duration}"
        )

    tail = "equipartition" if intervals.is_equipartition else "truncated tail"
    lines.append(f"{intervals.length} {intervals.unit.value} interval(s), {tail}")

    result = "\n".join(lines)
    print(result)
    return result


def show_traversal(
    intervals: IntervalSet,
    descend: Callable[[Interval, int], bool] | None = None,
) -> str:
    """Print an indented outline of a traversal in visit order.

    Each visited interval is one line, indented two spaces per depth.
    `descend(interval, depth)` decides whether to subdivide; with no
    `descend` the traversal stays at the top level.
    Returns the string and also prints to stdout.
    """
    visited: list[tuple[int, Interval]] = []

    def record(visitor: Visitor, interval: Interval) -> bool:
        visited.append((visitor.depth, interval))
        return descend(interval, visitor.depth) if descend else False

    visitor = Visitor(record, sub_intervals=descend is not None)
    asyncio.run(intervals.accept(visitor))

    lines = [
        f"{'  ' * depth}{interval.unit.value:<7s} "
        f"{interval.start.isoformat()} - {interval.end.isoformat()}"
        for depth, interval in visited
    ]

    result = "\n".join(lines)
    print(result)
    return result
