# -*- coding: utf-8 -*-
"""Slow timer callback reporting.

Off unless ``UIHOOKS_PERF`` is set to a truthy value. When on, every timer
fire that takes at least ``THRESHOLD_MS`` is reported on ``uihooks.perf``.
"""

from __future__ import annotations

import logging
import os
import time
from contextlib import contextmanager
from typing import Any, Iterator, Optional

ENABLED = os.environ.get("UIHOOKS_PERF", "").strip().lower() in ("1", "true", "yes", "on")
THRESHOLD_MS = 50.0

log = logging.getLogger("uihooks.perf")


def configure(threshold_ms: Any) -> None:
    """Apply the ``perf_threshold_ms`` user setting."""
    global THRESHOLD_MS
    try:
        THRESHOLD_MS = max(0.0, float(threshold_ms))
    except (TypeError, ValueError):
        log.warning("ignoring perf threshold %r", threshold_ms)


@contextmanager
def span(label: str, *, threshold_ms: Optional[float] = None) -> Iterator[None]:
    if not ENABLED:
        yield
        return
    limit = THRESHOLD_MS if threshold_ms is None else threshold_ms
    started = time.perf_counter()
    try:
        yield
    finally:
        elapsed = (time.perf_counter() - started) * 1000.0
        if elapsed >= limit:
            log.info("slow %s callback: %.1f ms", label, elapsed)
