# -*- coding: utf-8 -*-
"""Shared hook types (pure, test-friendly)."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Mapping, Optional, Protocol

Callback = Callable[[], Any]
EventCallback = Callable[[Any], Any]


class TimerBackend(Protocol):
    """Minimal timer primitive the hooks depend on.

    Times are milliseconds. ``schedule_after`` returns an opaque handle that
    ``cancel`` accepts; cancelling an unknown or already fired handle is a no-op.
    """

    def schedule_after(self, delay_ms: int, fn: Callable[[], None]) -> Any: ...

    def cancel(self, handle: Any) -> None: ...

    def now(self) -> float: ...


class RunnerState(str, Enum):
    IDLE = "idle"
    SCHEDULED = "scheduled"
    FIRING = "firing"


def coerce_delay(value: Any) -> Optional[int]:
    """Return *value* as whole milliseconds, or None when nothing may be scheduled."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    try:
        ms = int(value)
    except (OverflowError, ValueError):
        return None
    return ms if ms >= 0 else None


@dataclass(frozen=True)
class ScheduleConfig:
    callback: Optional[Callback]
    delay_ms: Any

    @property
    def effective_delay(self) -> Optional[int]:
        return coerce_delay(self.delay_ms)

    def differs_from(self, other: "ScheduleConfig") -> bool:
        # callbacks compare by identity: a new closure is a new config
        return self.callback is not other.callback or self.delay_ms != other.delay_ms


@dataclass(frozen=True)
class ExecutionWindow:
    start_ms: float
    end_ms: float

    @property
    def elapsed_ms(self) -> float:
        return max(0.0, float(self.end_ms) - float(self.start_ms))

    def next_delay(self, period_ms: int) -> int:
        """Wait before the next start so starts stay ``period_ms`` apart."""
        remaining = float(period_ms) - self.elapsed_ms
        if remaining <= 0:
            return 0
        return int(round(remaining))


@dataclass(frozen=True)
class HoverOptions:
    delay_ms: int = 0
    on_enter: Optional[EventCallback] = None
    on_leave: Optional[EventCallback] = None

    @classmethod
    def coerce(cls, options: Any = None, **overrides: Any) -> "HoverOptions":
        """Build options from a mapping, an instance or keywords.

        Malformed fields fall back to their defaults.
        """
        raw: dict = {}
        if isinstance(options, HoverOptions):
            raw = {"delay_ms": options.delay_ms, "on_enter": options.on_enter, "on_leave": options.on_leave}
        elif isinstance(options, Mapping):
            raw = dict(options)
        raw.update({k: v for k, v in overrides.items() if v is not None})

        delay = raw.get("delay_ms", raw.get("delay", 0))
        if isinstance(delay, bool) or not isinstance(delay, int) or delay < 0:
            delay = 0
        on_enter = raw.get("on_enter")
        on_leave = raw.get("on_leave")
        return cls(
            delay_ms=delay,
            on_enter=on_enter if callable(on_enter) else None,
            on_leave=on_leave if callable(on_leave) else None,
        )
