"""Tests for the logging helpers."""

import logging
import types

import pytest

from malapi.utils import debug as dbg


def test_debug_silent_by_default(monkeypatch: pytest.MonkeyPatch, caplog) -> None:
    monkeypatch.delenv("MALAPI_DEBUG", raising=False)
    with caplog.at_level(logging.DEBUG, logger="malapi"):
        dbg.debug("hidden message")
    assert "hidden message" not in caplog.text


def test_debug_enabled_by_env(monkeypatch: pytest.MonkeyPatch, caplog) -> None:
    monkeypatch.setenv("MALAPI_DEBUG", "1")
    with caplog.at_level(logging.DEBUG, logger="malapi"):
        dbg.debug("visible message")
    assert "visible message" in caplog.text


def test_warn_and_error_always_logged(caplog) -> None:
    with caplog.at_level(logging.INFO, logger="malapi"):
        dbg.warn("careful")
        dbg.error("broken")
    assert "careful" in caplog.text
    assert "broken" in caplog.text
    assert dbg.setup_logger() is logging.getLogger("malapi")


def test_debug_module_is_not_shadowed() -> None:
    """Edge: the package attribute stays the logging module, not a function."""
    import malapi.utils

    assert isinstance(malapi.utils.debug, types.ModuleType)
    assert dbg.debug is malapi.utils.debug.debug


def test_debug_enabled_after_first_log_call(
    monkeypatch: pytest.MonkeyPatch, caplog
) -> None:
    """Edge: MALAPI_DEBUG set after the logger exists still enables debug output."""
    monkeypatch.delenv("MALAPI_DEBUG", raising=False)
    dbg.info("logger created")
    assert logging.getLogger("malapi").level == logging.INFO

    monkeypatch.setenv("MALAPI_DEBUG", "1")
    dbg.debug("late debug message")
    assert "late debug message" in caplog.text
    assert logging.getLogger("malapi").level == logging.DEBUG
