# -*- coding: utf-8 -*-
from .hover_filter import HoverEventFilter
from .widget_hooks import WidgetHookHost, hooks_for, use_hover, use_interval, use_stable_interval, use_timeout

__all__ = [
    "HoverEventFilter",
    "WidgetHookHost",
    "hooks_for",
    "use_hover",
    "use_interval",
    "use_stable_interval",
    "use_timeout",
]
