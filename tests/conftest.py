"""Shared pytest fixtures and configuration for LogHaven tests."""

import os
from datetime import datetime

import pytest

from loghaven.config.settings import reset_settings
from loghaven.core.level import Level
from loghaven.core.logging_event import LoggingEvent
from loghaven.repository import LoggerRepository


class CountingFactory:
    """Wrapper factory that records each logger it is called with."""

    def __init__(self):
        self.calls = []

    def __call__(self, logger):
        self.calls.append(logger)
        # Build a fresh string object so identity checks are meaningful
        return "".join(["wrap(", logger.name, ")"])

    @property
    def count(self):
        return len(self.calls)


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolate tests from LOGHAVEN_* variables in the environment."""
    for key in list(os.environ):
        if key.startswith("LOGHAVEN_"):
            monkeypatch.delenv(key, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def repository():
    """Fresh repository, shut down after the test."""
    repo = LoggerRepository("test-repo")
    yield repo
    repo.shutdown()


@pytest.fixture
def counting_factory():
    return CountingFactory()


@pytest.fixture
def make_event():
    """Build logging events with sensible defaults."""

    def _make(level=Level.INFO, message="test message", **kwargs):
        return LoggingEvent(
            logger_name=kwargs.pop("logger_name", "test.logger"),
            level=level,
            message=message,
            timestamp=kwargs.pop("timestamp", datetime(2024, 1, 1, 12, 0, 0)),
            **kwargs,
        )

    return _make
