# -*- coding: utf-8 -*-
"""
Event filter feeding a widget's Enter/Leave events into a HoverTracker.
"""
from __future__ import annotations

from typing import Any

from PyQt5.QtCore import QEvent, QObject, pyqtSignal

from core.hover import HoverTracker
from core.types import TimerBackend


class HoverEventFilter(QObject):
    """
    Observes Enter/Leave on the widget it is installed on. Events are never
    consumed; the widget still receives them.
    """

    hover_changed = pyqtSignal(bool)

    def __init__(self, backend: TimerBackend, options: Any = None, parent=None) -> None:
        super().__init__(parent)
        self.tracker = HoverTracker(backend, options, on_change=self.hover_changed.emit)

    @property
    def is_hovering(self) -> bool:
        return self.tracker.is_hovering

    def eventFilter(self, obj, event):
        etype = event.type()
        if etype == QEvent.Enter:
            self.tracker.on_mouse_enter(event)
        elif etype == QEvent.Leave:
            self.tracker.on_mouse_leave(event)
        return super().eventFilter(obj, event)
