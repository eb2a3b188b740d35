"""
Advisor - Gemini prompts and structured output schemas.

This package holds everything the Maharishi assistant sends to Gemini:
- prompts: chat persona and the crop recommendation prompt builder
- schemas: response_schema models for structured recommendations

The service layer that performs the calls is in:
- maharishi/services/recommendation_service.py
- maharishi/services/chat_service.py
"""

from maharishi.agents.advisor.prompts import (
    CHAT_DISCLAIMER,
    MAHARISHI_SYSTEM_PROMPT,
    build_crop_recommendation_prompt,
)
from maharishi.agents.advisor.schemas import (
    CropRecommendationItemSchema,
    CropRecommendationResponseSchema,
)

__all__ = [
    # Prompts
    "CHAT_DISCLAIMER",
    "MAHARISHI_SYSTEM_PROMPT",
    "build_crop_recommendation_prompt",
    # Schemas
    "CropRecommendationItemSchema",
    "CropRecommendationResponseSchema",
]
