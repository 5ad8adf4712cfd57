"""
Cancellable delayed callbacks.

The session controller only needs ``call_later(delay_ms, callback)`` returning
a handle with ``cancel()``.  ``ManualScheduler`` implements it on a virtual
millisecond clock that only moves when :meth:`ManualScheduler.advance` is
called, which keeps every timer-driven transition deterministic.
"""

import heapq
import itertools


class TimerHandle:
    def __init__(self, when, callback):
        self.when = when
        self.callback = callback
        self.cancelled = False

    def cancel(self):
        self.cancelled = True


class ManualScheduler:
    """Virtual-clock scheduler (milliseconds)."""

    def __init__(self):
        self.now = 0.0
        self._queue = []
        self._counter = itertools.count()

    def call_later(self, delay_ms, callback) -> TimerHandle:
        handle = TimerHandle(self.now + max(0.0, float(delay_ms)), callback)
        heapq.heappush(self._queue, (handle.when, next(self._counter), handle))
        return handle

    @property
    def pending(self) -> int:
        return sum(1 for _, _, h in self._queue if not h.cancelled)

    def advance(self, ms):
        """Move the clock forward by *ms*, running every callback that falls due.

        Callbacks scheduled while advancing run in the same call if they fall
        inside the window.
        """
        target = self.now + ms
        while self._queue and self._queue[0][0] <= target:
            when, _, handle = heapq.heappop(self._queue)
            self.now = when
            if not handle.cancelled:
                handle.callback()
        self.now = target

    def run_all(self):
        """Advance until no live timer is left."""
        while self.pending:
            live = [w for w, _, h in self._queue if not h.cancelled]
            self.advance(min(live) - self.now)
