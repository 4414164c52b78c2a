"""Visitor: caller-owned unit of work driven by IntervalSet.accept()."""

from __future__ import annotations

from typing import Any, Callable, Generic, TypeVar

from daterange_intervals.types import Interval, InvalidVisitor

S = TypeVar("S")


class Visitor(Generic[S]):
    """Wraps a callback invoked once per interval during a traversal.

    The callback is called as ``callback(visitor, interval)`` so it can read
    ``depth`` and accumulate into ``state`` (or any attribute the caller
    attaches). A truthy return value, or an awaitable resolving to one, asks
    for the interval to be subdivided at the next finer unit; this only
    happens when ``sub_intervals`` is set.

    ``depth`` is owned by the traversal: it is incremented around each
    descent and is 0 between traversals.
    """

    def __init__(
        self,
        callback: Callable[[Visitor[S], Interval], Any],
        *,
        state: S | None = None,
        sub_intervals: bool = False,
        propagate_errors: bool = False,
    ) -> None:
        if not callable(callback):
            raise InvalidVisitor(callback, "callback must be callable")
        self._callback = callback
        self.state = state
        self.depth = 0
        self.sub_intervals = sub_intervals
        # When set, a failing visit aborts the whole traversal.
        self.propagate_errors = propagate_errors

    @property
    def callback(self) -> Callable[[Visitor[S], Interval], Any]:
        return self._callback

    def visit(self, interval: Interval) -> Any:
        """Run the callback for one interval and return its descend signal."""
        return self._callback(self, interval)

    def __repr__(self) -> str:
        return (
            f"Visitor({getattr(self._callback, '__name__', self._callback)!s}, "
            f"depth={self.depth}, sub_intervals={self.sub_intervals})"
        )
