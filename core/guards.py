# -*- coding: utf-8 -*-
"""core/guards.py

Guard helpers for user callbacks invoked from timers and event handlers.

Goals:
- A failing callback must never break the timer loop or the event filter.
- Leave a trace (logging) instead of silent failures.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional, Tuple, TypeVar

log = logging.getLogger(__name__)
T = TypeVar("T")


def as_callable(value: Any, *, name: str = "callback") -> Optional[Callable[..., Any]]:
    """Return *value* if it is callable, otherwise None."""
    if value is None or callable(value):
        return value
    log.debug("Ignoring %s: not callable (%r)", name, value)
    return None


def safe_call(fn: Optional[Callable[..., T]], *args: Any, label: str = "callback") -> Tuple[bool, Optional[T]]:
    """Execute a callback safely.

    Returns ``(True, result)`` on success and ``(False, None)`` when the callback
    raised. A missing callback counts as a successful no-op.
    """
    if fn is None:
        return True, None
    try:
        return True, fn(*args)
    except Exception:
        log.error("Exception in %s %r", label, fn, exc_info=True)
        return False, None
