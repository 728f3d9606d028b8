"""Shared fixtures for unit tests."""

import pytest

from expectkit.config import reset_config
from expectkit.registry import clear_matcher_registry


@pytest.fixture(autouse=True)
def plain_output(monkeypatch):
    """Render failure messages without ANSI codes and with default settings."""
    monkeypatch.setenv("NO_COLOR", "1")
    for name in ("EXPECTKIT_INDENT_SIZE", "EXPECTKIT_MAX_STRING", "EXPECTKIT_PLUGINS"):
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture(autouse=True)
def clean_registry():
    """Drop matchers registered by a test, keeping built-ins."""
    clear_matcher_registry()
    yield
    clear_matcher_registry()
