"""
Service layer for the Maharishi backend.

Contains the logic the routes delegate to:
- Crop recommendations and chat sessions backed by Gemini
- Static demo catalog (farmer, listings) and simulated weather

Services act as the glue between routes (HTTP layer) and Gemini.
"""

from .catalog_service import get_demo_farmer, get_farmer_listings, get_listings
from .chat_service import (
    AgriChatSession,
    ChatSessionClosedError,
    ChatSessionNotFoundError,
    ChatSessionRegistry,
    chat_sessions,
)
from .recommendation_service import (
    RecommendationAuthError,
    RecommendationNetworkError,
    RecommendationRequestError,
    RecommendationSchemaError,
    RecommendationUnavailableError,
    get_recommendations,
)
from .weather_service import get_weather

__all__ = [
    "get_demo_farmer",
    "get_listings",
    "get_farmer_listings",
    "AgriChatSession",
    "ChatSessionRegistry",
    "ChatSessionClosedError",
    "ChatSessionNotFoundError",
    "chat_sessions",
    "get_recommendations",
    "RecommendationRequestError",
    "RecommendationUnavailableError",
    "RecommendationAuthError",
    "RecommendationNetworkError",
    "RecommendationSchemaError",
    "get_weather",
]
