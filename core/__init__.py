# -*- coding: utf-8 -*-
from .hooks import HookHost
from .hover import HoverHandlers, HoverTracker
from .timers import Completion, IntervalRunner, StableIntervalRunner, TimeoutRunner, TimerSlot
from .types import ExecutionWindow, HoverOptions, RunnerState, ScheduleConfig, TimerBackend

__all__ = [
    "HookHost",
    "HoverHandlers",
    "HoverTracker",
    "Completion",
    "IntervalRunner",
    "StableIntervalRunner",
    "TimeoutRunner",
    "TimerSlot",
    "ExecutionWindow",
    "HoverOptions",
    "RunnerState",
    "ScheduleConfig",
    "TimerBackend",
]
