"""
Pydantic schemas for crop recommendation endpoints.

These models define the request/response contracts for the crop advice
flow powered by Gemini structured output.
"""

from typing import List

from pydantic import BaseModel, Field, field_validator

from maharishi.utils.constants import SEASONS, SOIL_TYPES

# ============================================================================
# REQUEST MODELS
# ============================================================================

class CropRecommendationRequest(BaseModel):
    """
    Request for crop advice for one farm.

    Soil type and season must be one of the fixed options offered by the
    recommendation form; the location is free text (usually a pincode).
    """
    location: str = Field(
        ...,
        description="Pincode (or other location code) of the farm",
        min_length=1,
        max_length=100,
        examples=["261001"]
    )
    soil_type: str = Field(
        ...,
        description=f"Soil category, one of: {', '.join(SOIL_TYPES)}",
        examples=["Alluvial"]
    )
    season: str = Field(
        ...,
        description=f"Farming season, one of: {', '.join(SEASONS)}",
        examples=["Rabi (Winter)"]
    )

    @field_validator("location")
    @classmethod
    def location_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("location must not be blank")
        return value.strip()

    @field_validator("soil_type")
    @classmethod
    def soil_type_is_known(cls, value: str) -> str:
        if value not in SOIL_TYPES:
            raise ValueError(f"soil_type must be one of: {', '.join(SOIL_TYPES)}")
        return value

    @field_validator("season")
    @classmethod
    def season_is_known(cls, value: str) -> str:
        if value not in SEASONS:
            raise ValueError(f"season must be one of: {', '.join(SEASONS)}")
        return value


# ============================================================================
# RESPONSE MODELS
# ============================================================================

class CropRecommendation(BaseModel):
    """
    A single suggested crop, ready for UI display.

    Yield and profit are human-readable ranges, not numbers.
    """
    crop: str = Field(
        ...,
        description="Name of the recommended crop",
        min_length=1,
        examples=["Wheat"]
    )
    reason: str = Field(
        ...,
        description="Practical reason why the crop suits the farm",
        min_length=1,
        examples=["Alluvial soil retains moisture well for a winter wheat crop."]
    )
    expected_yield_kg_per_acre: str = Field(
        ...,
        description="Estimated yield per acre, unit-qualified",
        min_length=1,
        examples=["1800-2200 kg"]
    )
    expected_profit_inr: str = Field(
        ...,
        description="Estimated profit per acre, currency-qualified",
        min_length=1,
        examples=["₹40,000 - ₹55,000"]
    )

    @field_validator("crop", "reason", "expected_yield_kg_per_acre", "expected_profit_inr")
    @classmethod
    def not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("field must not be blank")
        return value


class CropRecommendationResponse(BaseModel):
    """
    Response with crop suggestions.

    An empty list is a valid outcome (the model returned no suggestions).
    """
    recommendations: List[CropRecommendation] = Field(
        ...,
        description="Suggested crops (nominally 3)",
        max_length=3
    )


class RecommendationOptionsResponse(BaseModel):
    """Fixed option sets for the recommendation form."""
    soil_types: List[str] = Field(..., examples=[SOIL_TYPES])
    seasons: List[str] = Field(..., examples=[SEASONS])
