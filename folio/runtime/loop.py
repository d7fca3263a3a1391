"""Single-threaded cooperative event loop with a virtual clock.

Timers are fire-and-forget callbacks. Nothing runs until the clock is
advanced, so tests drive time explicitly with ``advance``.
"""

import heapq
import itertools
import logging
from collections.abc import Callable

logger = logging.getLogger(__name__)


class TimerHandle:
    """A scheduled callback. Cancelling it guarantees it never fires."""

    def __init__(self, due_ms: float, seq: int, callback: Callable[[], None]) -> None:
        self.due_ms = due_ms
        self.seq = seq
        self.callback = callback
        self.cancelled = False
        self.fired = False

    @property
    def active(self) -> bool:
        return not (self.cancelled or self.fired)

    def cancel(self) -> None:
        self.cancelled = True

    def __lt__(self, other: "TimerHandle") -> bool:
        return (self.due_ms, self.seq) < (other.due_ms, other.seq)

    def __repr__(self) -> str:
        state = "cancelled" if self.cancelled else "fired" if self.fired else "pending"
        return f"TimerHandle(due={self.due_ms:.0f}ms, {state})"


class EventLoop:
    def __init__(self) -> None:
        self.now_ms: float = 0.0
        self._queue: list[TimerHandle] = []
        self._seq = itertools.count()

    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> TimerHandle:
        if delay_ms < 0:
            raise ValueError(f"delay must be non-negative, got {delay_ms}")
        handle = TimerHandle(self.now_ms + delay_ms, next(self._seq), callback)
        heapq.heappush(self._queue, handle)
        return handle

    def pending(self) -> int:
        return sum(1 for h in self._queue if h.active)

    def next_due(self) -> float | None:
        self._drop_cancelled()
        return self._queue[0].due_ms if self._queue else None

    def advance(self, ms: float) -> int:
        """Move the clock forward by ``ms``, firing due timers in order.

        Callbacks may schedule new timers; those fire too if they fall due
        inside the window. Returns the number of callbacks run.
        """
        if ms < 0:
            raise ValueError(f"cannot move the clock backwards ({ms}ms)")
        deadline = self.now_ms + ms
        fired = 0
        while True:
            self._drop_cancelled()
            if not self._queue or self._queue[0].due_ms > deadline:
                break
            handle = heapq.heappop(self._queue)
            self.now_ms = handle.due_ms
            handle.fired = True
            handle.callback()
            fired += 1
        self.now_ms = deadline
        return fired

    def run_next(self) -> bool:
        """Jump to the next pending timer and fire everything due at that instant."""
        due = self.next_due()
        if due is None:
            return False
        self.advance(due - self.now_ms)
        return True

    def _drop_cancelled(self) -> None:
        while self._queue and self._queue[0].cancelled:
            heapq.heappop(self._queue)
