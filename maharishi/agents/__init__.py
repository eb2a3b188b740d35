"""
AI Components for the Maharishi backend.

1. Crop Recommendation (Single-Shot Structured Output)
   - One Gemini call constrained by response_schema
   - Located in: maharishi/services/recommendation_service.py

2. Agri Q&A Chat (Streaming Chat Session)
   - Gemini chat handle with a fixed persona, replies streamed as fragments
   - Located in: maharishi/services/chat_service.py

Both use the Google Gen AI SDK directly; no agent framework is involved.
"""

from maharishi.agents.advisor import (
    MAHARISHI_SYSTEM_PROMPT,
    CropRecommendationResponseSchema,
    build_crop_recommendation_prompt,
)

__all__ = [
    "MAHARISHI_SYSTEM_PROMPT",
    "CropRecommendationResponseSchema",
    "build_crop_recommendation_prompt",
]
