"""One-shot timer schedulers that drive the playback controller.

WHY: The controller must wait between words without busy-waiting and
without owning an event loop. Injecting the timer primitive lets the same
controller run on a real asyncio loop in the terminal player and on a
virtual clock in tests and in the timeline planner.

HOW: A scheduler exposes ``now()`` in milliseconds and
``call_later(delay_ms, callback)`` returning a handle with ``cancel()``.
  AsyncioScheduler — wraps loop.time() / loop.call_later()
  ManualScheduler  — virtual clock; timers fire only when advanced

RULES:
- Single-threaded: callbacks run on the thread that drives the scheduler
- A cancelled handle never fires
- ManualScheduler fires timers in due-time order, ties in creation order
"""

from __future__ import annotations

import asyncio
import heapq
import itertools
from typing import Callable, List, Optional, Protocol, Tuple


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    """The timer primitive the controller depends on."""

    def now(self) -> float: ...

    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> TimerHandle: ...


class AsyncioScheduler:
    """Scheduler backed by an asyncio event loop.

    The loop defaults to the running loop, so construct it from inside a
    coroutine (or pass the loop explicitly).
    """

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None) -> None:
        self._loop = loop or asyncio.get_running_loop()

    def now(self) -> float:
        return self._loop.time() * 1000.0

    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> asyncio.TimerHandle:
        return self._loop.call_later(delay_ms / 1000.0, callback)


class ManualTimer:
    """Handle returned by ManualScheduler.call_later."""

    def __init__(self, due_ms: float, callback: Callable[[], None]) -> None:
        self.due_ms = due_ms
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler:
    """Deterministic scheduler on a virtual millisecond clock.

    WHY: Timing tests must not sleep, and the timeline planner needs to
    replay a whole run instantly while the ramp still sees realistic
    elapsed times.

    HOW: Timers sit in a heap keyed by (due time, sequence). advance()
    moves the clock forward, firing every timer that falls due on the
    way, with the clock set to each timer's due time as it fires.

    RULES:
    - Timers scheduled by a firing callback are honoured within the same
      advance() if they fall due before its end
    - run_until_idle() fires everything until no live timer remains, up
      to idle_limit timers unless the caller passes its own limit
    """

    idle_limit = 1_000_000

    def __init__(self, start_ms: float = 0.0) -> None:
        self._now = start_ms
        self._timers: List[Tuple[float, int, ManualTimer]] = []
        self._seq = itertools.count()

    def now(self) -> float:
        return self._now

    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> ManualTimer:
        timer = ManualTimer(self._now + max(0.0, delay_ms), callback)
        heapq.heappush(self._timers, (timer.due_ms, next(self._seq), timer))
        return timer

    @property
    def pending(self) -> int:
        """Number of live (not cancelled) timers."""
        return sum(1 for _, _, t in self._timers if not t.cancelled)

    def next_due(self) -> Optional[float]:
        self._drop_cancelled()
        return self._timers[0][0] if self._timers else None

    def advance(self, delay_ms: float) -> None:
        """Move the clock forward by *delay_ms*, firing due timers."""
        deadline = self._now + delay_ms
        while True:
            due = self.next_due()
            if due is None or due > deadline:
                break
            self._fire_next()
        self._now = deadline

    def run_until_idle(self, limit: Optional[int] = None) -> int:
        """Fire timers until none remain; returns how many fired."""
        if limit is None:
            limit = self.idle_limit
        fired = 0
        while self.next_due() is not None:
            if fired >= limit:
                raise RuntimeError("Scheduler did not go idle after {} timers".format(limit))
            self._fire_next()
            fired += 1
        return fired

    def _fire_next(self) -> None:
        due, _, timer = heapq.heappop(self._timers)
        self._now = max(self._now, due)
        timer.callback()

    def _drop_cancelled(self) -> None:
        while self._timers and self._timers[0][2].cancelled:
            heapq.heappop(self._timers)
