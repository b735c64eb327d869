# -*- coding: utf-8 -*-
"""QTimer-backed timer primitive for the hook runners."""
from __future__ import annotations

import logging
import threading
import time
from typing import Callable, Dict

log = logging.getLogger(__name__)

try:
    from PyQt5.QtCore import QObject, Qt, QTimer
except Exception:  # pragma: no cover - optional for test environments
    QObject = None
    QTimer = None


if QObject is not None:

    class QtTimerBackend(QObject):
        """Single-shot QTimers keyed by integer handles.

        Timers are children of the backend, so parenting the backend to a
        widget ties every pending timer to the widget's lifetime.
        """

        def __init__(self, parent=None) -> None:
            super().__init__(parent)
            self._timers: Dict[int, QTimer] = {}
            self._next_handle = 0
            self._owner = threading.get_ident()

        def now(self) -> float:
            return time.perf_counter() * 1000.0

        def schedule_after(self, delay_ms: int, fn: Callable[[], None]) -> int:
            self._check_thread("schedule_after")
            self._next_handle += 1
            handle = self._next_handle
            timer = QTimer(self)
            timer.setSingleShot(True)
            timer.setTimerType(Qt.PreciseTimer)
            timer.timeout.connect(lambda h=handle: self._on_timeout(h, fn))
            self._timers[handle] = timer
            timer.start(max(0, int(delay_ms)))
            return handle

        def cancel(self, handle: int) -> None:
            self._check_thread("cancel")
            timer = self._timers.pop(handle, None)
            if timer is not None:
                self._dispose(timer)

        def pending_count(self) -> int:
            return len(self._timers)

        def shutdown(self) -> None:
            for timer in list(self._timers.values()):
                self._dispose(timer)
            self._timers.clear()

        def _check_thread(self, operation: str) -> None:
            # QTimers cannot be started or stopped from another thread
            if threading.get_ident() != self._owner:
                raise RuntimeError(f"QtTimerBackend.{operation} called outside the thread that created it")

        def _on_timeout(self, handle: int, fn: Callable[[], None]) -> None:
            timer = self._timers.pop(handle, None)
            if timer is None:
                # cancelled after the timeout was queued
                return
            self._dispose(timer)
            fn()

        @staticmethod
        def _dispose(timer: QTimer) -> None:
            try:
                timer.stop()
                timer.deleteLater()
            except RuntimeError:
                # C++ side already deleted together with the parent widget
                log.debug("timer already deleted", exc_info=True)

else:

    class QtTimerBackend:  # pragma: no cover
        def __init__(self, *args, **kwargs) -> None:
            raise RuntimeError("PyQt5 is required to use QtTimerBackend")
