# -*- coding: utf-8 -*-
"""
Logging setup: hook and callback failures end up in a user-space log file.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

from infra.paths import logs_dir

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _has_file_handler(logger: logging.Logger, log_path: Path) -> bool:
    return any(
        isinstance(h, logging.FileHandler) and getattr(h, "baseFilename", "") == str(log_path)
        for h in logger.handlers
    )


def _resolve_level(level: Union[int, str]) -> int:
    if isinstance(level, str):
        level = logging.getLevelName(level.strip().upper())
    return level if isinstance(level, int) else logging.INFO


def init_logging(filename: str = "uihooks.log", level: Union[int, str] = logging.INFO) -> Path:
    """Attach the user log file and a console handler to the root logger.

    Handlers already installed by the host application are left alone.
    Calling again with the same file only updates the level.
    """
    log_path = logs_dir() / filename
    root = logging.getLogger()
    root.setLevel(_resolve_level(level))
    if _has_file_handler(root, log_path):
        return log_path

    formatter = logging.Formatter(LOG_FORMAT)
    for handler in (logging.FileHandler(log_path, encoding="utf-8"), logging.StreamHandler()):
        handler.setFormatter(formatter)
        root.addHandler(handler)
    return log_path


def init_perf_logging(filename: str = "perf.log") -> Path:
    """Attach a dedicated file handler for slow callback timings."""
    log_path = logs_dir() / filename
    logger = logging.getLogger("uihooks.perf")
    logger.setLevel(logging.INFO)
    if not _has_file_handler(logger, log_path):
        fh = logging.FileHandler(log_path, encoding="utf-8")
        fh.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(fh)
    return log_path
