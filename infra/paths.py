# -*- coding: utf-8 -*-
"""
Per-user writable locations for logs and settings (no admin required).
"""
from __future__ import annotations

import os
from pathlib import Path

APP_NAME = "UiHooks"


def user_data_dir() -> Path:
    """
    Per-user writable directory. ``UIHOOKS_HOME`` wins, then LOCALAPPDATA
    (non-roaming), APPDATA and finally the home folder.
    """
    override = os.getenv("UIHOOKS_HOME")
    if override:
        p = Path(override).expanduser()
    else:
        base = os.getenv("LOCALAPPDATA") or os.getenv("APPDATA") or str(Path.home())
        p = Path(base) / APP_NAME
    return ensure_dir(p)


def ensure_dir(p: Path) -> Path:
    p.mkdir(parents=True, exist_ok=True)
    return p


def logs_dir() -> Path:
    return ensure_dir(user_data_dir() / "logs")
