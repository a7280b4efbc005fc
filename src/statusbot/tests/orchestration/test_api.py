"""
Tests for the FastAPI transport.
"""

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from statusbot.errors.exceptions import UpstreamError
from statusbot.orchestration.api.main import app
from statusbot.session import get_session, save_session


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_post_message_returns_orchestrator_result(client):
    result = {
        "success": True,
        "messages": [{"text": "Which Project Details you want?", "input_hint": "expectingInput"}],
        "outcome": {"type": "PROMPT", "state": "ProjectStep"},
    }

    with patch("statusbot.orchestration.api.message.handle_message", return_value=result) as mock_handle:
        response = client.post("/api/messages", json={"conversation_id": "c1", "text": "hi"})

    mock_handle.assert_called_once_with(conversation_id="c1", text="hi")
    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["messages"] == result["messages"]
    assert body["outcome"] == result["outcome"]


def test_upstream_error_maps_to_502(client):
    with patch(
        "statusbot.orchestration.api.message.handle_message",
        side_effect=UpstreamError("recognizer down"),
    ):
        response = client.post("/api/messages", json={"conversation_id": "c1", "text": "hi"})

    assert response.status_code == 502
    assert response.json()["detail"]["error"] == "upstream_error"


def test_missing_fields_are_rejected(client):
    response = client.post("/api/messages", json={"text": "hi"})

    assert response.status_code == 422


def test_delete_conversation_clears_session(client):
    save_session("c1", {"phase": "AWAITING_UTTERANCE", "flow": None})

    response = client.delete("/api/conversations/c1")

    assert response.status_code == 200
    assert get_session("c1") is None
