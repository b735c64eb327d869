# -*- coding: utf-8 -*-
"""Demo window wiring every widget hook."""
from __future__ import annotations

import logging
import time

from PyQt5.QtCore import Qt, QTimer
from PyQt5.QtWidgets import QFrame, QLabel, QVBoxLayout, QWidget

from core.timers import Completion
from ui.widget_hooks import hooks_for, use_hover, use_interval, use_stable_interval, use_timeout
from uihooks import __version__

log = logging.getLogger(__name__)

CLOCK_PERIOD_MS = 1000
POLL_PERIOD_MS = 2000
# simulated duration of one asynchronous poll
POLL_WORK_MS = 600
READY_DELAY_MS = 1500


class MainWindow(QWidget):
    def __init__(self, parent=None) -> None:
        super().__init__(parent)
        self.setWindowTitle(f"UI hooks demo {__version__}")
        self.resize(360, 220)

        self.hover_box = QFrame(self)
        self.hover_box.setFrameShape(QFrame.StyledPanel)
        self.hover_box.setMinimumHeight(70)
        self.hover_label = QLabel("Hover me", self.hover_box)
        self.hover_label.setAlignment(Qt.AlignCenter)
        box_layout = QVBoxLayout(self.hover_box)
        box_layout.addWidget(self.hover_label)

        self.clock_label = QLabel("", self)
        self.poll_label = QLabel("poll: waiting", self)
        self.status_label = QLabel("starting...", self)

        layout = QVBoxLayout(self)
        layout.addWidget(self.hover_box)
        layout.addWidget(self.clock_label)
        layout.addWidget(self.poll_label)
        layout.addWidget(self.status_label)

        self._polls = 0
        self._last_poll_start = 0.0

        self.hover = use_hover(self.hover_box)
        self.hover.hover_changed.connect(self._on_hover_changed)
        self.clock = use_interval(self, self._tick_clock, CLOCK_PERIOD_MS)
        self.poller = use_stable_interval(self, self._poll, POLL_PERIOD_MS)
        self.ready = use_timeout(self, lambda: self.status_label.setText("ready"), READY_DELAY_MS)
        self._tick_clock()

    def closeEvent(self, event) -> None:
        hooks_for(self).unmount()
        hooks_for(self.hover_box).unmount()
        super().closeEvent(event)

    def _on_hover_changed(self, hovering: bool) -> None:
        self.hover_label.setText("Hovering" if hovering else "Hover me")

    def _tick_clock(self) -> None:
        self.clock_label.setText(time.strftime("clock: %H:%M:%S"))

    def _poll(self) -> Completion:
        now = time.perf_counter() * 1000.0
        if self._last_poll_start:
            log.debug("poll start-to-start %.0fms", now - self._last_poll_start)
        self._last_poll_start = now
        self._polls += 1
        self.poll_label.setText(f"poll #{self._polls}: running")
        done = Completion()

        def _finish() -> None:
            self.poll_label.setText(f"poll #{self._polls}: done")
            done.resolve()

        QTimer.singleShot(POLL_WORK_MS, _finish)
        return done


def create_main_window() -> MainWindow:
    """Factory used by main.py."""
    return MainWindow()
