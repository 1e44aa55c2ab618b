"""Pytest configuration for srnotify tests."""

import logging

import pytest


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer settings out of the tests."""
    for name in ("SRNOTIFY_SESSION", "SRNOTIFY_TIMEOUT", "SRNOTIFY_LOG_LEVEL", "SRNOTIFY_LOG_FILE"):
        monkeypatch.delenv(name, raising=False)
    logging.getLogger("srnotify").handlers.clear()


def pytest_collection_modifyitems(config, items):
    """Set per-marker timeouts: unit=1s, integration=5s."""
    for item in items:
        if "unit" in item.keywords:
            item.add_marker(pytest.mark.timeout(1))
        elif "integration" in item.keywords:
            item.add_marker(pytest.mark.timeout(5))
