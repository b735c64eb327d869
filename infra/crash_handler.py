# -*- coding: utf-8 -*-
"""Send exceptions that escape Qt slots or threads to the log.

Timer and hover callbacks are already wrapped by ``core.guards.safe_call``.
This covers the rest: PyQt5 aborts the process when an exception leaves a
slot while ``sys.excepthook`` is the default one.
"""

from __future__ import annotations

import logging
import sys
import threading

log = logging.getLogger(__name__)


def log_unhandled(exc_type, exc, tb) -> None:
    if issubclass(exc_type, KeyboardInterrupt):
        sys.__excepthook__(exc_type, exc, tb)
        return
    log.critical("Unhandled %s outside hook callbacks", exc_type.__name__, exc_info=(exc_type, exc, tb))


def _log_thread_exception(args) -> None:
    log_unhandled(args.exc_type, args.exc_value, args.exc_traceback)


def install_global_exception_handlers() -> None:
    sys.excepthook = log_unhandled
    threading.excepthook = _log_thread_exception
