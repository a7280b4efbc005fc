"""
Shared fixtures: in-memory sessions and a fixed reference date.
"""

from datetime import date
from unittest.mock import Mock

import pytest

from statusbot.clients.recognizer_client import RecognizerClient
from statusbot.clients.search_client import SearchClient
from statusbot.config import Settings
from statusbot.session import session_manager

# Friday
TODAY = date(2024, 3, 1)


@pytest.fixture(autouse=True)
def in_memory_sessions(monkeypatch):
    """Run every test against an empty in-memory session store."""
    monkeypatch.delenv("REDIS_URL", raising=False)
    session_manager._in_memory_sessions.clear()
    yield session_manager._in_memory_sessions
    session_manager._in_memory_sessions.clear()


@pytest.fixture
def today():
    return TODAY


@pytest.fixture
def settings(monkeypatch):
    for name in ("CLU_ENDPOINT", "CLU_API_KEY", "CLU_PROJECT_NAME",
                 "CLU_DEPLOYMENT_NAME", "SEARCH_ENDPOINT", "SEARCH_API_KEY",
                 "STATUS_INTENT_NAME"):
        monkeypatch.delenv(name, raising=False)
    return Settings()


@pytest.fixture
def recognizer():
    mock_recognizer = Mock(spec=RecognizerClient)
    mock_recognizer.is_configured = True
    return mock_recognizer


@pytest.fixture
def unconfigured_recognizer():
    mock_recognizer = Mock(spec=RecognizerClient)
    mock_recognizer.is_configured = False
    return mock_recognizer


@pytest.fixture
def searcher():
    mock_searcher = Mock(spec=SearchClient)
    mock_searcher.search.return_value = []
    return mock_searcher
