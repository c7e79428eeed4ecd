"""Event loop adapters for deferred, cancellable callbacks."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from heapq import heappop, heappush
from typing import Protocol

TaskCallback = Callable[[], None]


class Cancellable(Protocol):
    def cancel(self) -> None: ...


class EventLoop(Protocol):
    """The single-threaded loop every controller entry point runs on."""

    def call_later(self, delay: float, callback: TaskCallback) -> Cancellable: ...


@dataclass(slots=True, eq=False)
class TimerHandle:
    """Handle for a callback queued on a :class:`ManualEventLoop`."""

    due: float
    callback: TaskCallback
    cancelled: bool = False
    fired: bool = False

    @property
    def pending(self) -> bool:
        return not (self.cancelled or self.fired)

    def cancel(self) -> None:
        # Cancelling after the callback ran, or twice, changes nothing.
        if not self.fired:
            self.cancelled = True


@dataclass(slots=True)
class ManualEventLoop:
    """Virtual-clock loop. Time only moves when :meth:`advance` is called."""

    now: float = 0.0
    _queue: list[tuple[float, int, TimerHandle]] = field(default_factory=list)
    _sequence: int = 0

    def call_later(self, delay: float, callback: TaskCallback) -> TimerHandle:
        if delay < 0.0:
            raise ValueError("delay must be >= 0")
        handle = TimerHandle(due=self.now + delay, callback=callback)
        self._sequence += 1
        heappush(self._queue, (handle.due, self._sequence, handle))
        return handle

    @property
    def pending_count(self) -> int:
        return sum(1 for _, _, handle in self._queue if handle.pending)

    def advance(self, delta: float) -> int:
        """Move the clock forward and run every callback that became due."""
        if delta < 0.0:
            raise ValueError("delta must be >= 0")
        target = self.now + delta
        executed = 0
        while self._queue and self._queue[0][0] <= target:
            due, _, handle = heappop(self._queue)
            if not handle.pending:
                continue
            self.now = due
            handle.fired = True
            handle.callback()
            executed += 1
        self.now = target
        return executed

    def run_pending(self) -> int:
        """Run callbacks due right now, e.g. zero-delay deferrals."""
        return self.advance(0.0)
