"""Pytest configuration and shared fixtures for nullpipe tests."""

from __future__ import annotations

import logging
from unittest.mock import AsyncMock, Mock

import pytest
import structlog
from nullpipe import reset
from nullpipe._logging import LOGGER_NAME

MOCK_RETURN = 'mockReturn'


@pytest.fixture(autouse=True)
def clean_state(monkeypatch: pytest.MonkeyPatch) -> None:
    """Fresh config and default structlog setup around every test."""
    monkeypatch.delenv('NULLPIPE_TRACE', raising=False)
    monkeypatch.delenv('NULLPIPE_LOG_LEVEL', raising=False)
    reset()
    yield
    reset()
    structlog.reset_defaults()
    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.propagate = True


@pytest.fixture
def cb_single() -> Mock:
    """Sync callback returning a fixed non-nullish value."""
    return Mock(return_value=MOCK_RETURN)


@pytest.fixture
def cb_single_async() -> AsyncMock:
    """Async callback returning a fixed non-nullish value."""
    return AsyncMock(return_value=MOCK_RETURN)


@pytest.fixture
def cb_multiple() -> Mock:
    """Sync callback taking extra arguments."""
    return Mock(return_value=MOCK_RETURN)


@pytest.fixture
def cb_multiple_async() -> AsyncMock:
    """Async callback taking extra arguments."""
    return AsyncMock(return_value=MOCK_RETURN)
