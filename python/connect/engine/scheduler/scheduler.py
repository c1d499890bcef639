"""One-shot deferred actions for the engine.

The engine only needs a ``schedule(delay, action)`` callable.  These
helpers provide one for tests (``ManualScheduler``) and one for
frontends that already run a polling loop (``TimerQueue``).
"""

from __future__ import annotations

import heapq
import itertools
import time
from typing import Callable

Action = Callable[[], None]
Schedule = Callable[[float, Action], None]


def run_now(delay: float, action: Action) -> None:
    """Scheduler that ignores the delay and runs *action* immediately."""
    action()


class ManualScheduler:
    """Records scheduled actions until ``flush`` runs them.

    Lets tests step through deferred behaviour without a clock.
    """

    def __init__(self) -> None:
        self.pending: list[tuple[float, Action]] = []

    def __call__(self, delay: float, action: Action) -> None:
        self.pending.append((delay, action))

    def flush(self) -> int:
        """Run every pending action in scheduling order; return how many ran."""
        ran = 0
        while self.pending:
            _, action = self.pending.pop(0)
            action()
            ran += 1
        return ran


class TimerQueue:
    """Monotonic-clock timer queue polled from a frontend loop."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._heap: list[tuple[float, int, Action]] = []
        self._counter = itertools.count()

    def __call__(self, delay: float, action: Action) -> None:
        heapq.heappush(self._heap, (self._clock() + delay, next(self._counter), action))

    def __len__(self) -> int:
        return len(self._heap)

    @property
    def next_due(self) -> float | None:
        """Seconds until the next action is due, or ``None`` if idle."""
        if not self._heap:
            return None
        return max(0.0, self._heap[0][0] - self._clock())

    def run_due(self) -> int:
        """Run every action whose time has come; return how many ran."""
        now = self._clock()
        ran = 0
        while self._heap and self._heap[0][0] <= now:
            _, _, action = heapq.heappop(self._heap)
            action()
            ran += 1
        return ran
