# -*- coding: utf-8 -*-
"""Pure timer runners (no UI dependencies).

Every runner owns a single :class:`TimerSlot`, so at most one scheduled
invocation is live per runner. Runners are inert until mounted; unmounting
cancels whatever is pending.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, List, Optional

from core.guards import as_callable, safe_call
from core.types import (
    Callback,
    ExecutionWindow,
    RunnerState,
    ScheduleConfig,
    TimerBackend,
)
from infra import perf

log = logging.getLogger(__name__)

_UNSET: Any = object()


class Completion:
    """Completion signal for asynchronous callbacks.

    A callback that finishes later returns a Completion and calls
    :meth:`resolve` (or :meth:`reject`) once its work has settled. Any other
    return value means the callback finished when it returned.

    Settle it on the thread that owns the timer backend, since settling
    re-arms the runner there. Work running on a QThreadPool or a QThread
    should emit a signal connected to :meth:`resolve` instead of calling it
    directly; ``QtTimerBackend`` refuses to schedule from other threads.
    """

    def __init__(self) -> None:
        self._done = False
        self._exception: Optional[BaseException] = None
        self._callbacks: List[Callable[["Completion"], Any]] = []

    @classmethod
    def resolved(cls) -> "Completion":
        c = cls()
        c.resolve()
        return c

    @property
    def done(self) -> bool:
        return self._done

    @property
    def exception(self) -> Optional[BaseException]:
        return self._exception

    def resolve(self) -> None:
        self._settle(None)

    def reject(self, exc: Any) -> None:
        if not isinstance(exc, BaseException):
            exc = RuntimeError(str(exc))
        self._settle(exc)

    def add_done_callback(self, fn: Callable[["Completion"], Any]) -> None:
        if self._done:
            safe_call(fn, self, label="completion callback")
        else:
            self._callbacks.append(fn)

    def _settle(self, exc: Optional[BaseException]) -> None:
        if self._done:
            return
        self._done = True
        self._exception = exc
        callbacks, self._callbacks = self._callbacks, []
        for fn in callbacks:
            safe_call(fn, self, label="completion callback")


class TimerSlot:
    """Holds at most one live timer handle.

    Starting a new timer cancels the previous one. Each cancel bumps a
    generation counter, and a fire from an older generation is dropped even if
    the native timer was already queued.
    """

    def __init__(self, backend: TimerBackend, *, label: str = "timer") -> None:
        self._backend = backend
        self._label = label
        self._handle: Any = None
        self._generation = 0

    @property
    def active(self) -> bool:
        return self._handle is not None

    @property
    def generation(self) -> int:
        return self._generation

    def start(self, delay_ms: int, fn: Callable[[], None]) -> None:
        self.cancel()
        generation = self._generation

        def _fire() -> None:
            if generation != self._generation:
                return
            self._handle = None
            with perf.span(self._label):
                fn()

        self._handle = self._backend.schedule_after(int(delay_ms), _fire)

    def cancel(self) -> None:
        self._generation += 1
        handle, self._handle = self._handle, None
        if handle is not None:
            self._backend.cancel(handle)


class _ScheduledRunner:
    label = "timer"

    def __init__(self, backend: TimerBackend, callback: Optional[Callback] = None, delay_ms: Any = -1) -> None:
        self._backend = backend
        self._config = ScheduleConfig(as_callable(callback), delay_ms)
        self._slot = TimerSlot(backend, label=self.label)
        self._mounted = False
        self._state = RunnerState.IDLE

    def __repr__(self) -> str:
        return f"{type(self).__name__}(delay_ms={self._config.delay_ms!r}, state={self._state.value})"

    @property
    def config(self) -> ScheduleConfig:
        return self._config

    @property
    def state(self) -> RunnerState:
        return self._state

    @property
    def is_mounted(self) -> bool:
        return self._mounted

    def mount(self) -> None:
        if self._mounted:
            return
        self._mounted = True
        self._schedule_first()

    def unmount(self) -> None:
        self._mounted = False
        self._cancel()

    def update(self, callback: Any = _UNSET, delay_ms: Any = _UNSET) -> bool:
        """Apply a new configuration; returns True when it changed.

        A change cancels the live handle and schedules again with the latest
        values, as if the runner had just been mounted.
        """
        new = ScheduleConfig(
            self._config.callback if callback is _UNSET else as_callable(callback),
            self._config.delay_ms if delay_ms is _UNSET else delay_ms,
        )
        if not new.differs_from(self._config):
            return False
        self._config = new
        if self._mounted:
            self._cancel()
            self._schedule_first()
        return True

    def _cancel(self) -> None:
        self._slot.cancel()
        self._state = RunnerState.IDLE

    def _schedule_first(self) -> None:
        delay = self._config.effective_delay
        if delay is None:
            log.debug("%s not scheduled: delay %r", self.label, self._config.delay_ms)
            return
        self._arm(delay)

    def _arm(self, delay_ms: int) -> None:
        self._slot.start(delay_ms, self._fire)
        self._state = RunnerState.SCHEDULED

    def _fire(self) -> None:
        raise NotImplementedError


class TimeoutRunner(_ScheduledRunner):
    """Run a callback once, ``delay_ms`` after mounting."""

    label = "timeout"

    def _fire(self) -> None:
        self._state = RunnerState.FIRING
        safe_call(self._config.callback, label="timeout callback")
        if self._state is RunnerState.FIRING:
            self._state = RunnerState.IDLE


class IntervalRunner(_ScheduledRunner):
    """Run a callback every ``period_ms``, first run one period after mounting.

    The next deadline is armed before the callback runs, so the callback's own
    duration does not stretch the spacing. Fires missed while the loop was
    blocked are skipped, not replayed.
    """

    label = "interval"

    def __init__(self, backend: TimerBackend, callback: Optional[Callback] = None, period_ms: Any = -1) -> None:
        super().__init__(backend, callback, period_ms)
        self._deadline = 0.0

    def _schedule_first(self) -> None:
        delay = self._config.effective_delay
        if delay is None:
            log.debug("interval not scheduled: period %r", self._config.delay_ms)
            return
        self._deadline = self._backend.now() + delay
        self._arm(delay)

    def _fire(self) -> None:
        period = self._config.effective_delay or 0
        now = self._backend.now()
        self._deadline += period
        if self._deadline < now:
            if period > 0:
                missed = int((now - self._deadline) // period) + 1
                self._deadline += missed * period
            else:
                self._deadline = now
        self._slot.start(max(0, int(round(self._deadline - now))), self._fire)

        self._state = RunnerState.FIRING
        safe_call(self._config.callback, label="interval callback")
        if self._state is RunnerState.FIRING:
            self._state = RunnerState.SCHEDULED if self._slot.active else RunnerState.IDLE


class StableIntervalRunner(_ScheduledRunner):
    """Run a callback repeatedly with ``period_ms`` between invocation starts.

    The wait after each cycle is ``max(0, period - elapsed)`` where *elapsed*
    covers the call and, for callbacks returning a :class:`Completion`, the
    time until it settles. The next cycle is only armed once the current one
    has settled, so cycles never overlap.
    """

    label = "stable_interval"

    def __init__(self, backend: TimerBackend, callback: Optional[Callback] = None, period_ms: Any = -1) -> None:
        super().__init__(backend, callback, period_ms)
        self._last_window: Optional[ExecutionWindow] = None

    @property
    def last_window(self) -> Optional[ExecutionWindow]:
        return self._last_window

    def _fire(self) -> None:
        generation = self._slot.generation
        self._state = RunnerState.FIRING
        start = self._backend.now()
        _ok, result = safe_call(self._config.callback, label="stable interval callback")
        if isinstance(result, Completion):
            result.add_done_callback(lambda c: self._settled(generation, start, c))
        else:
            self._settled(generation, start, None)

    def _settled(self, generation: int, start: float, completion: Optional[Completion]) -> None:
        end = self._backend.now()
        if completion is not None and completion.exception is not None:
            log.error("stable interval callback rejected", exc_info=completion.exception)
        if generation != self._slot.generation or not self._mounted:
            log.debug("stable interval cycle discarded (cancelled while running)")
            return
        period = self._config.effective_delay
        if period is None:
            self._state = RunnerState.IDLE
            return
        window = ExecutionWindow(start, end)
        self._last_window = window
        delay = window.next_delay(period)
        log.debug("stable interval cycle took %.1fms, next in %dms", window.elapsed_ms, delay)
        self._arm(delay)
