"""
Advisor Structured Output Schemas

Pydantic models passed to Gemini as `response_schema` so the model is
constrained to return the recommendation payload shape. These are the wire
shape only; the validated records exposed to callers live in
maharishi.schemas.recommendations.
"""

from typing import List

from pydantic import BaseModel, Field


class CropRecommendationItemSchema(BaseModel):
    """Schema for a single crop suggestion as produced by the model."""
    crop: str = Field(
        ...,
        description='Name of the recommended crop (e.g., "Wheat", "Tomato").'
    )
    reason: str = Field(
        ...,
        description="A brief, practical reason why this crop is suitable."
    )
    expected_yield_kg_per_acre: str = Field(
        ...,
        description='Estimated yield in kilograms per acre (e.g., "2000-2500 kg").'
    )
    expected_profit_inr: str = Field(
        ...,
        description='Estimated profit in Indian Rupees per acre (e.g., "₹50,000 - ₹70,000").'
    )


class CropRecommendationResponseSchema(BaseModel):
    """Schema for the complete structured recommendation response."""
    recommendations: List[CropRecommendationItemSchema]

