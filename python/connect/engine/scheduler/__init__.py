from connect.engine.scheduler.scheduler import (
    Action,
    ManualScheduler,
    Schedule,
    TimerQueue,
    run_now,
)

__all__ = ["Action", "ManualScheduler", "Schedule", "TimerQueue", "run_now"]
