from __future__ import annotations

import logging

import pytest

from todolist.utils import logging as logging_utils


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.delenv("TODOLIST_LOG_LEVEL", raising=False)
    monkeypatch.delenv("TODOLIST_DEBUG", raising=False)
    root = logging.getLogger()
    previous = root.level
    yield
    root.setLevel(previous)


def test_configure_root_uses_default_level() -> None:
    assert logging_utils.configure_root(logging.WARNING) == logging.WARNING
    assert logging.getLogger().level == logging.WARNING


def test_configure_root_accepts_level_name() -> None:
    assert logging_utils.configure_root("error") == logging.ERROR


@pytest.mark.parametrize("value,expected", [("DEBUG", logging.DEBUG), ("warning", logging.WARNING), ("15", 15)])
def test_env_level_overrides_default(monkeypatch, value, expected):
    monkeypatch.setenv("TODOLIST_LOG_LEVEL", value)
    assert logging_utils.configure_root(logging.INFO) == expected


def test_unknown_env_level_falls_back_to_info(monkeypatch) -> None:
    monkeypatch.setenv("TODOLIST_LOG_LEVEL", "chatty")
    assert logging_utils.configure_root(logging.ERROR) == logging.INFO


def test_debug_flag_forces_debug(monkeypatch) -> None:
    monkeypatch.setenv("TODOLIST_DEBUG", "yes")
    assert logging_utils.configure_root(logging.ERROR) == logging.DEBUG


@pytest.mark.parametrize("value", ["\u00b2", "\u2075"])
def test_superscript_digit_env_level_falls_back_to_info(monkeypatch, value):
    monkeypatch.setenv("TODOLIST_LOG_LEVEL", value)
    assert logging_utils.configure_root(logging.ERROR) == logging.INFO


def test_level_name() -> None:
    assert logging_utils.level_name(logging.INFO) == "INFO"
