"""
Pytest configuration for Maharishi backend tests.

Sets up test environment and global fixtures.
"""
import os
from typing import Iterable, Optional
from unittest.mock import AsyncMock, MagicMock

import pytest

# Disable config validation during tests
# This allows tests to run without requiring real environment variables
os.environ["VALIDATE_CONFIG"] = "false"

# Set test environment variables
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("GOOGLE_API_KEY", "test-google-api-key")
# No backoff sleeps between retries in tests
os.environ["RETRY_BACKOFF_SECONDS"] = "0"
os.environ["RETRY_BACKOFF_MAX_SECONDS"] = "0"

from maharishi.services.gemini_client import reset_gemini_client  # noqa: E402


def make_chunk(text: Optional[str]) -> MagicMock:
    """Fake streaming chunk exposing .text like GenerateContentResponse."""
    chunk = MagicMock()
    chunk.text = text
    return chunk


async def fake_stream(texts: Iterable[Optional[str]], error: Optional[Exception] = None):
    """Async generator standing in for the Gemini reply stream."""
    for text in texts:
        yield make_chunk(text)
    if error is not None:
        raise error


@pytest.fixture(autouse=True)
def fresh_gemini_client():
    """Never reuse a cached Gemini client across tests."""
    reset_gemini_client()
    yield
    reset_gemini_client()


@pytest.fixture
def mock_chat():
    """Fake Gemini chat handle; tests set send_message_stream."""
    chat = MagicMock()
    chat.send_message_stream = AsyncMock(
        side_effect=lambda message: fake_stream(["Namaste! ", "How can I help?"])
    )
    return chat


@pytest.fixture
def mock_gemini_client(mock_chat):
    """
    Fake genai.Client.

    - client.aio.models.generate_content: AsyncMock (set return_value per test)
    - client.aio.chats.create: returns mock_chat
    """
    client = MagicMock()
    client.aio.models.generate_content = AsyncMock()
    client.aio.chats.create.return_value = mock_chat
    return client


@pytest.fixture
def stream_factory():
    """Build fake reply streams: stream_factory(["a", "b"], error=None)."""
    return fake_stream
