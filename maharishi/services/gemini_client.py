"""
Shared Gemini client.

Both the recommendation service and chat sessions reach Gemini through the
single client created here. When GOOGLE_API_KEY is not configured the
client is None and the AI features fall back to fixed messages.
"""

import logging
from typing import Optional

from google import genai
from google.genai import types

from maharishi.config import settings

logger = logging.getLogger(__name__)

# Initialize Gemini client (lazy initialization)
_gemini_client: Optional[genai.Client] = None


def get_gemini_client() -> Optional[genai.Client]:
    """
    Lazy initialization of the Gemini client.

    Returns:
        The shared genai.Client, or None when no API key is configured or
        the client could not be created.
    """
    global _gemini_client

    if _gemini_client is not None:
        return _gemini_client

    if not settings.GOOGLE_API_KEY:
        logger.warning("Gemini API key not found. AI features will be disabled.")
        return None

    try:
        _gemini_client = genai.Client(
            api_key=settings.GOOGLE_API_KEY,
            # HttpOptions.timeout is in milliseconds
            http_options=types.HttpOptions(timeout=int(settings.GEMINI_TIMEOUT_SECONDS * 1000)),
        )
        logger.info("Gemini client initialized successfully")
        return _gemini_client
    except Exception as e:
        logger.error(f"Failed to initialize Gemini client: {e}")
        return None


def reset_gemini_client() -> None:
    """Drop the cached client so the next call re-reads settings."""
    global _gemini_client
    _gemini_client = None
