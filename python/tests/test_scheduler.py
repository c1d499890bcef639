"""Deferred-action helpers."""

from __future__ import annotations

import pytest

from connect.engine.scheduler import ManualScheduler, TimerQueue, run_now


class _FakeClock:
    def __init__(self) -> None:
        self.now = 100.0

    def __call__(self) -> float:
        return self.now


def test_run_now_runs_immediately() -> None:
    ran: list[str] = []
    run_now(5.0, lambda: ran.append("x"))
    assert ran == ["x"]


def test_manual_scheduler_waits_for_flush() -> None:
    ran: list[int] = []
    scheduler = ManualScheduler()
    scheduler(0.5, lambda: ran.append(1))
    scheduler(0.1, lambda: ran.append(2))
    assert ran == []
    assert scheduler.flush() == 2
    assert ran == [1, 2]
    assert scheduler.flush() == 0


def test_timer_queue_fires_when_due() -> None:
    clock = _FakeClock()
    timers = TimerQueue(clock)
    ran: list[str] = []
    timers(0.5, lambda: ran.append("late"))
    timers(0.2, lambda: ran.append("early"))

    assert timers.next_due == pytest.approx(0.2)
    assert timers.run_due() == 0

    clock.now += 0.3
    assert timers.run_due() == 1
    assert ran == ["early"]

    clock.now += 0.3
    assert timers.run_due() == 1
    assert ran == ["early", "late"]
    assert len(timers) == 0
    assert timers.next_due is None


def test_timer_queue_keeps_order_for_equal_deadlines() -> None:
    clock = _FakeClock()
    timers = TimerQueue(clock)
    ran: list[int] = []
    for i in range(3):
        timers(0.0, lambda i=i: ran.append(i))
    timers.run_due()
    assert ran == [0, 1, 2]
