"""
Tests for /chat endpoints.

The registry dependency is overridden with a fresh ChatSessionRegistry and
Gemini is replaced by a mocked client.
"""

from unittest.mock import AsyncMock, patch

import pytest
from fastapi.testclient import TestClient

from maharishi.main import app
from maharishi.routes.chat import get_chat_registry
from maharishi.services.chat_service import ChatSessionRegistry
from maharishi.utils.constants import AI_DISABLED_MESSAGE, CHAT_ERROR_MESSAGE

CLIENT_PATH = "maharishi.services.chat_service.get_gemini_client"


@pytest.fixture
def registry():
    """Fresh registry injected into the chat routes."""
    registry = ChatSessionRegistry()
    app.dependency_overrides[get_chat_registry] = lambda: registry

    yield registry

    app.dependency_overrides.clear()


@pytest.fixture
def client(registry):
    """Create test client for FastAPI app."""
    return TestClient(app)


@pytest.fixture
def gemini(mock_gemini_client):
    with patch(CLIENT_PATH, return_value=mock_gemini_client):
        yield mock_gemini_client


class TestCreateSession:

    def test_create_returns_greeting(self, client, registry, gemini, mock_chat):
        response = client.post("/chat/sessions")

        assert response.status_code == 201
        data = response.json()
        assert data["greeting"] == "Namaste! How can I help?"
        assert data["ai_enabled"] is True
        assert registry.get(data["session_id"]) is not None
        mock_chat.send_message_stream.assert_awaited_once_with("Hello")

    def test_create_without_key(self, client):
        with patch(CLIENT_PATH, return_value=None):
            response = client.post("/chat/sessions")

        assert response.status_code == 201
        assert response.json()["greeting"] == AI_DISABLED_MESSAGE
        assert response.json()["ai_enabled"] is False


class TestSendMessage:

    def test_reply_streamed_as_text(self, client, gemini, mock_chat, stream_factory):
        session_id = client.post("/chat/sessions").json()["session_id"]
        mock_chat.send_message_stream = AsyncMock(
            return_value=stream_factory(["Use ", "neem oil ", "spray."])
        )

        response = client.post(
            f"/chat/sessions/{session_id}/messages",
            json={"message": "Aphids on my mustard crop?"},
        )

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        assert response.text == "Use neem oil spray."

    def test_failure_streams_apology(self, client, gemini, mock_chat):
        session_id = client.post("/chat/sessions").json()["session_id"]
        mock_chat.send_message_stream = AsyncMock(side_effect=RuntimeError("unavailable"))

        response = client.post(f"/chat/sessions/{session_id}/messages", json={"message": "Hi"})

        assert response.status_code == 200
        assert response.text == CHAT_ERROR_MESSAGE

    def test_unknown_session(self, client):
        response = client.post("/chat/sessions/nope/messages", json={"message": "Hi"})

        assert response.status_code == 404
        assert response.json()["detail"]["error"] == "session_not_found"

    @pytest.mark.parametrize("payload", [{"message": ""}, {"message": "   "}, {}])
    def test_invalid_message(self, client, gemini, payload):
        session_id = client.post("/chat/sessions").json()["session_id"]

        response = client.post(f"/chat/sessions/{session_id}/messages", json=payload)

        assert response.status_code == 422


class TestTranscriptAndClose:

    def test_transcript(self, client, gemini, mock_chat, stream_factory):
        session_id = client.post("/chat/sessions").json()["session_id"]
        mock_chat.send_message_stream = AsyncMock(return_value=stream_factory(["Around 120 days."]))
        client.post(f"/chat/sessions/{session_id}/messages", json={"message": "How long does wheat take?"})

        response = client.get(f"/chat/sessions/{session_id}/turns")

        assert response.status_code == 200
        assert response.json()["turns"] == [
            {"role": "user", "text": "Hello"},
            {"role": "assistant", "text": "Namaste! How can I help?"},
            {"role": "user", "text": "How long does wheat take?"},
            {"role": "assistant", "text": "Around 120 days."},
        ]

    def test_close_session(self, client, registry, gemini):
        session_id = client.post("/chat/sessions").json()["session_id"]
        session = registry.get(session_id)

        response = client.delete(f"/chat/sessions/{session_id}")

        assert response.status_code == 204
        assert session.closed is True
        assert client.get(f"/chat/sessions/{session_id}/turns").status_code == 404
        assert client.delete(f"/chat/sessions/{session_id}").status_code == 404


class TestAbandonedSessions:

    def test_idle_session_expires(self, client, registry, gemini):
        session_id = client.post("/chat/sessions").json()["session_id"]
        session = registry.get(session_id)
        session.last_used -= registry.ttl_seconds + 1

        response = client.get(f"/chat/sessions/{session_id}/turns")

        assert response.status_code == 404
        assert response.json()["detail"]["error"] == "session_not_found"
        assert session.closed is True
        assert len(registry) == 0

    def test_sessions_without_delete_stay_bounded(self, client, registry, gemini):
        registry.max_sessions = 5

        session_ids = [client.post("/chat/sessions").json()["session_id"] for _ in range(20)]

        assert len(registry) == 5
        assert client.get(f"/chat/sessions/{session_ids[-1]}/turns").status_code == 200
        assert client.get(f"/chat/sessions/{session_ids[0]}/turns").status_code == 404
