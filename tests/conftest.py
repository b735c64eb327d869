# -*- coding: utf-8 -*-

"""Pytest configuration.

The project keeps a simple top-level package layout (core/, services/, ui/...).
For local testing we add the repository root to sys.path so that imports like
`from core...` work reliably without installing.

Qt-free tests drive the hooks through ``ManualTimerBackend`` (the ``clock``
fixture): time only moves when a test advances it. Qt tests use the ``qapp``
fixture and are skipped when PyQt5 is not importable.
"""

from __future__ import annotations

import os
import sys
from typing import Callable, Dict, Tuple

import pytest

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


class ManualTimerBackend:
    """Deterministic timer primitive with a hand-driven clock (milliseconds)."""

    def __init__(self) -> None:
        self._now = 0.0
        self._next_handle = 0
        self._timers: Dict[int, Tuple[float, Callable[[], None]]] = {}

    def now(self) -> float:
        return self._now

    def schedule_after(self, delay_ms: int, fn: Callable[[], None]) -> int:
        self._next_handle += 1
        self._timers[self._next_handle] = (self._now + max(0, int(delay_ms)), fn)
        return self._next_handle

    def cancel(self, handle: int) -> None:
        self._timers.pop(handle, None)

    def pending_count(self) -> int:
        return len(self._timers)

    def sleep(self, ms: float) -> None:
        """Simulate a callback busy for *ms* (time passes, nothing fires)."""
        self._now += ms

    def advance(self, ms: float) -> None:
        """Let *ms* pass, firing due timers in order of deadline."""
        target = self._now + ms
        while True:
            due = [(deadline, handle) for handle, (deadline, _fn) in self._timers.items() if deadline <= target]
            if not due:
                break
            deadline, handle = min(due)
            _deadline, fn = self._timers.pop(handle)
            self._now = max(self._now, deadline)
            fn()
        self._now = max(self._now, target)


@pytest.fixture
def clock() -> ManualTimerBackend:
    return ManualTimerBackend()


@pytest.fixture(autouse=True)
def _isolated_user_dir(tmp_path, monkeypatch):
    monkeypatch.setenv("UIHOOKS_HOME", str(tmp_path / "userdata"))


@pytest.fixture(scope="session")
def qapp():
    pytest.importorskip("PyQt5.QtWidgets")
    from PyQt5.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    return app


@pytest.fixture
def wait_ms(qapp):
    """Run the Qt event loop for *ms* milliseconds.

    *sample* runs inside the deadline timer itself, ahead of any timer that only
    became due while the loop was blocked, and its value is returned.
    """
    from PyQt5.QtCore import QEventLoop, QTimer

    def _wait(ms: int, sample=None):
        loop = QEventLoop()
        result = []

        def _deadline():
            if sample is not None:
                result.append(sample())
            loop.quit()

        QTimer.singleShot(int(ms), _deadline)
        loop.exec_()
        return result[0] if result else None

    return _wait
