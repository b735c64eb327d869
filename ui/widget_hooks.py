# -*- coding: utf-8 -*-
"""Hooks bound to a QWidget's lifetime.

Each widget gets one WidgetHookHost, created on first use and stored on the
widget. Hooks start immediately and are torn down when the widget is
destroyed (or when ``hooks_for(widget).unmount()`` is called).
"""
from __future__ import annotations

import logging
from typing import Any, Optional

from core.hooks import HookHost
from core.timers import IntervalRunner, StableIntervalRunner, TimeoutRunner
from core.types import Callback, EventCallback, HoverOptions
from infra.settings import default_hover_delay
from services.qt_timer_backend import QtTimerBackend
from ui.hover_filter import HoverEventFilter

log = logging.getLogger(__name__)

_HOST_ATTR = "_ui_hooks_host"


class WidgetHookHost(HookHost):
    def __init__(self, widget) -> None:
        super().__init__(QtTimerBackend(widget))
        self._widget_name = type(widget).__name__
        widget.destroyed.connect(self._on_widget_destroyed)
        self.mount()

    def _on_widget_destroyed(self, *_args) -> None:
        log.debug("%s destroyed; unmounting %d hook(s)", self._widget_name, len(self.hooks))
        self.unmount()


def hooks_for(widget) -> WidgetHookHost:
    host = getattr(widget, _HOST_ATTR, None)
    if host is None:
        host = WidgetHookHost(widget)
        setattr(widget, _HOST_ATTR, host)
    return host


def use_hover(
    widget,
    delay_ms: Optional[int] = None,
    on_enter: Optional[EventCallback] = None,
    on_leave: Optional[EventCallback] = None,
) -> HoverEventFilter:
    """Track hover on *widget*; the delay defaults to the ``hover_delay_ms`` setting."""
    host = hooks_for(widget)
    if delay_ms is None:
        delay_ms = default_hover_delay()
    options = HoverOptions.coerce(delay_ms=delay_ms, on_enter=on_enter, on_leave=on_leave)
    hover_filter = HoverEventFilter(host.backend, options, parent=widget)
    widget.installEventFilter(hover_filter)
    host.use(hover_filter.tracker)
    return hover_filter


def use_timeout(widget, callback: Optional[Callback], delay_ms: Any) -> TimeoutRunner:
    return hooks_for(widget).use_timeout(callback, delay_ms)


def use_interval(widget, callback: Optional[Callback], period_ms: Any) -> IntervalRunner:
    return hooks_for(widget).use_interval(callback, period_ms)


def use_stable_interval(widget, callback: Optional[Callback], period_ms: Any) -> StableIntervalRunner:
    return hooks_for(widget).use_stable_interval(callback, period_ms)
