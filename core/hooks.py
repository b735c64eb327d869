# -*- coding: utf-8 -*-
"""Per-instance hook registry.

A HookHost plays the host framework's lifecycle role for one component
instance: hooks registered on it are set up on mount and torn down on unmount.
"""
from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Iterator, List, Optional, Protocol, TypeVar

from core.hover import HoverTracker
from core.timers import IntervalRunner, StableIntervalRunner, TimeoutRunner
from core.types import Callback, TimerBackend

log = logging.getLogger(__name__)


class Hook(Protocol):
    def mount(self) -> None: ...

    def unmount(self) -> None: ...


H = TypeVar("H", bound=Hook)


class HookHost:
    def __init__(self, backend: TimerBackend) -> None:
        self._backend = backend
        self._hooks: List[Hook] = []
        self._mounted = False

    @property
    def backend(self) -> TimerBackend:
        return self._backend

    @property
    def is_mounted(self) -> bool:
        return self._mounted

    @property
    def hooks(self) -> List[Hook]:
        return list(self._hooks)

    def use(self, hook: H) -> H:
        """Register *hook*; it is mounted right away if the host is mounted."""
        self._hooks.append(hook)
        if self._mounted:
            hook.mount()
        return hook

    def use_hover(self, options: Any = None, *, on_change=None, **kwargs: Any) -> HoverTracker:
        return self.use(HoverTracker(self._backend, options or kwargs, on_change=on_change))

    def use_timeout(self, callback: Optional[Callback], delay_ms: Any) -> TimeoutRunner:
        return self.use(TimeoutRunner(self._backend, callback, delay_ms))

    def use_interval(self, callback: Optional[Callback], period_ms: Any) -> IntervalRunner:
        return self.use(IntervalRunner(self._backend, callback, period_ms))

    def use_stable_interval(self, callback: Optional[Callback], period_ms: Any) -> StableIntervalRunner:
        return self.use(StableIntervalRunner(self._backend, callback, period_ms))

    def mount(self) -> None:
        if self._mounted:
            return
        self._mounted = True
        for hook in list(self._hooks):
            hook.mount()

    def unmount(self) -> None:
        if not self._mounted:
            return
        self._mounted = False
        for hook in reversed(list(self._hooks)):
            try:
                hook.unmount()
            except Exception:
                log.error("unmount failed for %r", hook, exc_info=True)

    @contextmanager
    def mounted(self) -> Iterator["HookHost"]:
        self.mount()
        try:
            yield self
        finally:
            self.unmount()
