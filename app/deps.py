# -*- coding: utf-8 -*-
"""Checks run by main() before anything imports Qt."""
from __future__ import annotations

from importlib import import_module
from typing import List


def missing_runtime_packages() -> List[str]:
    """Pip names of runtime packages that fail to import."""
    try:
        import_module("PyQt5.QtWidgets")
    except ImportError:
        return ["PyQt5"]
    return []


def ensure_runtime_deps() -> None:
    missing = missing_runtime_packages()
    if missing:
        raise RuntimeError(
            f"The uihooks demo needs {', '.join(missing)}.\n\nInstall it with:\n  pip install -e ."
        )
