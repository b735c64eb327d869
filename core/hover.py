# -*- coding: utf-8 -*-
"""Hover state tracking (pure, no Qt)."""
from __future__ import annotations

import logging
from typing import Any, Callable, NamedTuple, Optional, Tuple

from core.guards import safe_call
from core.timers import TimerSlot
from core.types import HoverOptions, TimerBackend

log = logging.getLogger(__name__)


class HoverHandlers(NamedTuple):
    on_mouse_enter: Callable[..., None]
    on_mouse_leave: Callable[..., None]


class HoverTracker:
    """Boolean hover flag driven by enter/leave events.

    With ``delay_ms > 0`` the flag only turns on if no leave arrives within the
    delay. ``on_enter``/``on_leave`` always receive the triggering event,
    whatever the delay outcome.
    """

    def __init__(
        self,
        backend: TimerBackend,
        options: Any = None,
        *,
        on_change: Optional[Callable[[bool], Any]] = None,
    ) -> None:
        self._options = HoverOptions.coerce(options)
        self._slot = TimerSlot(backend, label="hover")
        self._on_change = on_change if callable(on_change) else None
        self._hovering = False
        self._disposed = False
        self._handlers = HoverHandlers(self.on_mouse_enter, self.on_mouse_leave)

    @property
    def options(self) -> HoverOptions:
        return self._options

    @property
    def is_hovering(self) -> bool:
        return self._hovering

    @property
    def handlers(self) -> HoverHandlers:
        return self._handlers

    @property
    def pending(self) -> bool:
        return self._slot.active

    def current(self) -> Tuple[bool, HoverHandlers]:
        return self._hovering, self._handlers

    def on_mouse_enter(self, event: Any = None) -> None:
        if self._options.delay_ms > 0:
            if not self._disposed:
                self._slot.start(self._options.delay_ms, lambda: self._set_hovering(True))
        else:
            self._set_hovering(True)
        safe_call(self._options.on_enter, event, label="hover enter callback")

    def on_mouse_leave(self, event: Any = None) -> None:
        self._slot.cancel()
        self._set_hovering(False)
        safe_call(self._options.on_leave, event, label="hover leave callback")

    def mount(self) -> None:
        self._disposed = False

    def unmount(self) -> None:
        self._disposed = True
        self._slot.cancel()

    def _set_hovering(self, value: bool) -> None:
        if self._hovering == value:
            return
        self._hovering = value
        log.debug("hover -> %s", value)
        if self._on_change is not None:
            safe_call(self._on_change, value, label="hover change callback")
