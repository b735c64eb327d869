# -*- coding: utf-8 -*-
"""Logging, perf spans, crash handler and dependency checks (PyQt-free)."""
from __future__ import annotations

import logging
import sys
import threading

import pytest

from app import deps
from infra import crash_handler, perf
from infra.logging_setup import init_logging, init_perf_logging
from infra.paths import logs_dir


@pytest.fixture
def root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for h in list(root.handlers):
        if h not in handlers:
            root.removeHandler(h)
            h.close()
    root.setLevel(level)


def _log_files(logger, path):
    return [h for h in logger.handlers if isinstance(h, logging.FileHandler) and h.baseFilename == str(path)]


def test_init_logging_attaches_file_handler_once(root_logger):
    root_logger.addHandler(logging.NullHandler())  # a handler the host app installed first
    path = init_logging(level="debug")
    count = len(root_logger.handlers)

    assert init_logging(level="warning") == path
    assert len(root_logger.handlers) == count
    assert len(_log_files(root_logger, path)) == 1
    assert path.parent == logs_dir()
    assert root_logger.level == logging.WARNING


def test_init_logging_writes_records_to_user_log(root_logger):
    path = init_logging(level=logging.INFO)
    logging.getLogger("uihooks.test").info("hover delay changed")
    for h in _log_files(root_logger, path):
        h.flush()
    assert "hover delay changed" in path.read_text(encoding="utf-8")


@pytest.mark.parametrize("level", ["verbose", None, ["INFO"]])
def test_init_logging_unknown_level_means_info(root_logger, level):
    init_logging(level=level)
    assert root_logger.level == logging.INFO


def test_init_perf_logging_attaches_one_handler():
    logger = logging.getLogger("uihooks.perf")
    before = list(logger.handlers)
    try:
        init_perf_logging()
        init_perf_logging()
        added = [h for h in logger.handlers if h not in before]
        assert len(added) == 1
    finally:
        for h in logger.handlers[:]:
            if h not in before:
                logger.removeHandler(h)
                h.close()


def test_perf_span_logs_slow_callbacks(caplog, monkeypatch):
    monkeypatch.setattr(perf, "ENABLED", True)
    monkeypatch.setattr(perf, "THRESHOLD_MS", 0.0)
    with caplog.at_level("INFO", logger="uihooks.perf"):
        with perf.span("interval"):
            pass
    assert "slow interval callback" in caplog.text


def test_perf_span_is_silent_when_disabled(caplog, monkeypatch):
    monkeypatch.setattr(perf, "ENABLED", False)
    monkeypatch.setattr(perf, "THRESHOLD_MS", 0.0)
    with caplog.at_level("INFO", logger="uihooks.perf"):
        with perf.span("timeout"):
            pass
    assert caplog.text == ""


def test_perf_configure_applies_setting_and_ignores_garbage(monkeypatch):
    monkeypatch.setattr(perf, "THRESHOLD_MS", 50.0)
    perf.configure("12.5")
    assert perf.THRESHOLD_MS == 12.5
    perf.configure("slow")
    assert perf.THRESHOLD_MS == 12.5
    perf.configure(-3)
    assert perf.THRESHOLD_MS == 0.0


@pytest.fixture
def restore_hooks(monkeypatch):
    monkeypatch.setattr(sys, "excepthook", sys.excepthook)
    monkeypatch.setattr(threading, "excepthook", threading.excepthook)


def test_crash_handler_logs_unhandled(caplog, restore_hooks):
    crash_handler.install_global_exception_handlers()
    assert sys.excepthook is crash_handler.log_unhandled

    try:
        raise ValueError("escaped a slot")
    except ValueError as exc:
        with caplog.at_level("CRITICAL"):
            sys.excepthook(type(exc), exc, exc.__traceback__)
    assert "Unhandled ValueError" in caplog.text
    assert "escaped a slot" in caplog.text


def test_crash_handler_logs_thread_exceptions(caplog, restore_hooks):
    crash_handler.install_global_exception_handlers()

    def worker():
        raise KeyError("lost in a worker")

    with caplog.at_level("CRITICAL"):
        t = threading.Thread(target=worker)
        t.start()
        t.join()
    assert "Unhandled KeyError" in caplog.text


def test_crash_handler_leaves_keyboard_interrupt_to_python(caplog, monkeypatch):
    seen = []
    monkeypatch.setattr(sys, "__excepthook__", lambda *args: seen.append(args[0]))
    crash_handler.log_unhandled(KeyboardInterrupt, KeyboardInterrupt(), None)
    assert seen == [KeyboardInterrupt]
    assert caplog.records == []


def test_missing_runtime_packages_reported(monkeypatch):
    def broken_qt(name):
        raise ImportError(f"libGL missing while loading {name}")

    monkeypatch.setattr(deps, "import_module", broken_qt)
    assert deps.missing_runtime_packages() == ["PyQt5"]
    with pytest.raises(RuntimeError, match="pip install -e ."):
        deps.ensure_runtime_deps()


def test_runtime_deps_present(monkeypatch):
    monkeypatch.setattr(deps, "import_module", lambda name: None)
    assert deps.missing_runtime_packages() == []
    deps.ensure_runtime_deps()


def test_bootstrap_loads_settings_and_logging(root_logger):
    from app.bootstrap import bootstrap

    settings = bootstrap()
    assert settings["hover_delay_ms"] == 0
    assert len(_log_files(root_logger, logs_dir() / "uihooks.log")) == 1
    assert root_logger.level == logging.INFO


def test_bootstrap_applies_perf_threshold_when_enabled(root_logger, monkeypatch):
    from app.bootstrap import bootstrap
    from infra.settings import save_settings, DEFAULTS

    monkeypatch.setattr(perf, "ENABLED", True)
    monkeypatch.setattr(perf, "THRESHOLD_MS", 50.0)
    save_settings(dict(DEFAULTS, perf_threshold_ms=5))
    perf_logger = logging.getLogger("uihooks.perf")
    before = list(perf_logger.handlers)
    try:
        bootstrap()
        assert perf.THRESHOLD_MS == 5.0
        assert len(_log_files(perf_logger, logs_dir() / "perf.log")) == 1
    finally:
        for h in perf_logger.handlers[:]:
            if h not in before:
                perf_logger.removeHandler(h)
                h.close()
