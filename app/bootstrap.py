# -*- coding: utf-8 -*-
"""
Application bootstrap (runs before UI):
- Load user settings
- Init logging (and perf logging when UIHOOKS_PERF is set)
"""
from __future__ import annotations

from typing import Any, Dict

from infra import perf
from infra.logging_setup import init_logging, init_perf_logging
from infra.settings import load_settings


def bootstrap() -> Dict[str, Any]:
    settings = load_settings()
    init_logging(level=settings["log_level"])
    if perf.ENABLED:
        perf.configure(settings["perf_threshold_ms"])
        init_perf_logging()
    return settings
