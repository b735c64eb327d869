# -*- coding: utf-8 -*-
"""
User settings stored in a per-user writable folder (no admin).
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from infra.paths import user_data_dir

SETTINGS_FILENAME = "uihooks_settings.json"
log = logging.getLogger(__name__)

DEFAULTS: Dict[str, Any] = {
    # default enter delay for widgets bound with ui.widget_hooks.use_hover
    "hover_delay_ms": 0,
    "log_level": "INFO",
    "perf_threshold_ms": 50.0,
}


def settings_file() -> Path:
    return user_data_dir() / SETTINGS_FILENAME


def load_settings(path: Optional[Path] = None) -> Dict[str, Any]:
    path = path or settings_file()
    if not path.exists():
        save_settings(DEFAULTS.copy(), path)
        return DEFAULTS.copy()

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        # Recover from corruption gracefully
        log.warning("Settings file %s unreadable; restoring defaults", path, exc_info=True)
        save_settings(DEFAULTS.copy(), path)
        return DEFAULTS.copy()

    merged = DEFAULTS.copy()
    if isinstance(data, dict):
        merged.update({k: v for k, v in data.items() if k in DEFAULTS and v is not None})
    return merged


def save_settings(data: Dict[str, Any], path: Optional[Path] = None) -> None:
    path = path or settings_file()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")


def get_setting(key: str, path: Optional[Path] = None) -> Any:
    if key not in DEFAULTS:
        raise KeyError(f"Unknown setting: {key}")
    return load_settings(path).get(key, DEFAULTS[key])


def default_hover_delay(path: Optional[Path] = None) -> int:
    try:
        value = get_setting("hover_delay_ms", path)
    except OSError:
        log.debug("hover delay setting unavailable", exc_info=True)
        return 0
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        return 0
    return value
