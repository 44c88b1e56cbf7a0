"""Work throttler bounding concurrent file reads to one.

Traversal discovers files far faster than they can be read and digested.
Dispatching every discovery immediately would open one descriptor per file
and eventually fail with "too many open files". The throttler admits a
single work item at a time and holds the rest in a pending queue.

The slot is released when the digest stage has finished *reading*, not when
the lookup for that file completes, so network lookups may still overlap.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Callable

from jarhunt.core.models import DrainOrder, WorkItem


logger = logging.getLogger(__name__)

StartCallback = Callable[[WorkItem], None]


class WorkThrottler:
    """Single-slot admission queue for digest work.

    States are idle (nothing in flight, nothing pending) and active (one item
    in flight, zero or more pending). Only the event loop that owns the
    pipeline may call into the throttler.

    Example:
        >>> started = []
        >>> throttler = WorkThrottler(started.append)
        >>> throttler.submit(WorkItem("a.jar"))
        >>> throttler.submit(WorkItem("b.jar"))
        >>> [item.file_path for item in started]
        ['a.jar']
    """

    def __init__(
        self,
        start: StartCallback,
        order: DrainOrder = DrainOrder.LIFO,
    ) -> None:
        """Initialize an idle throttler.

        Args:
            start: Called synchronously with each item as it is admitted.
            order: Which pending item to admit when the slot frees up.
        """
        self._start = start
        self._order = order
        self._pending: deque[WorkItem] = deque()
        self._in_flight = False
        self._closed = False

    @property
    def in_flight(self) -> bool:
        """True while an admitted item has not yet called complete()."""
        return self._in_flight

    @property
    def is_idle(self) -> bool:
        """True when nothing is in flight and nothing is pending."""
        return not self._in_flight and not self._pending

    @property
    def pending(self) -> tuple[WorkItem, ...]:
        """Snapshot of queued items, oldest first."""
        return tuple(self._pending)

    def submit(self, item: WorkItem) -> None:
        """Admit an item now if the slot is free, otherwise queue it."""
        if self._closed:
            logger.debug("Throttler closed, dropping %s", item.file_path)
            return
        if self._in_flight:
            self._pending.append(item)
            return
        self._dispatch(item)

    def complete(self) -> None:
        """Release the slot and admit the next pending item, if any.

        Raises:
            RuntimeError: If called while nothing is in flight.
        """
        if not self._in_flight:
            raise RuntimeError("complete() called with no work item in flight")
        self._in_flight = False

        if self._closed or not self._pending:
            return

        if self._order is DrainOrder.LIFO:
            item = self._pending.pop()
        else:
            item = self._pending.popleft()
        self._dispatch(item)

    def close(self) -> None:
        """Abandon pending work and refuse further submissions."""
        self._closed = True
        self._pending.clear()

    def _dispatch(self, item: WorkItem) -> None:
        self._in_flight = True
        logger.debug("Dispatching %s (%d pending)", item.file_path, len(self._pending))
        self._start(item)
