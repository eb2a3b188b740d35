"""
FastAPI routes for crop recommendation endpoints.

Endpoints:
- GET /recommendations/options: Soil types and seasons offered by the form
- POST /recommendations/crops: Crop suggestions for one farm
"""

import logging

from fastapi import APIRouter, HTTPException, status

from maharishi.schemas.recommendations import (
    CropRecommendationRequest,
    CropRecommendationResponse,
    RecommendationOptionsResponse,
)
from maharishi.services.recommendation_service import (
    RecommendationAuthError,
    RecommendationNetworkError,
    RecommendationRequestError,
    RecommendationSchemaError,
    RecommendationUnavailableError,
    get_recommendations,
)
from maharishi.utils.constants import SEASONS, SOIL_TYPES

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/recommendations",
    tags=["recommendations"]
)


@router.get(
    "/options",
    response_model=RecommendationOptionsResponse,
    summary="List recommendation form options",
)
async def get_recommendation_options() -> RecommendationOptionsResponse:
    """Fixed soil types and seasons accepted by POST /recommendations/crops."""
    return RecommendationOptionsResponse(soil_types=list(SOIL_TYPES), seasons=list(SEASONS))


@router.post(
    "/crops",
    response_model=CropRecommendationResponse,
    status_code=200,
    summary="Recommend crops for a farm",
    description="""
    Asks Gemini for 3 profitable, suitable crops for the given pincode,
    soil type and season.

    **Responses:**
    - 200: recommendations (possibly empty)
    - 422: unknown soil type or season, or blank location
    - 502: Gemini failed (network, auth or malformed response)
    - 503: AI features disabled (no API key configured)
    """
)
async def recommend_crops_endpoint(request: CropRecommendationRequest) -> CropRecommendationResponse:
    """
    Crop recommendation endpoint.

    - Parse/Validate: CropRecommendationRequest (enumerated soil/season)
    - Call LLM: single structured call via service layer
    - Map errors: service exceptions -> HTTP status with generic message
    """
    logger.info(
        f"POST /recommendations/crops called: soil_type='{request.soil_type}', "
        f"season='{request.season}'"
    )

    try:
        recommendations = await get_recommendations(
            location=request.location,
            soil_type=request.soil_type,
            season=request.season,
        )
    except RecommendationUnavailableError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail={
                "error": "ai_disabled",
                "details": e.message
            }
        )
    except RecommendationRequestError as e:
        if isinstance(e, RecommendationAuthError):
            error_code = "upstream_auth_error"
        elif isinstance(e, RecommendationNetworkError):
            error_code = "upstream_unavailable"
        elif isinstance(e, RecommendationSchemaError):
            error_code = "upstream_invalid_response"
        else:
            error_code = "recommendation_failed"
        logger.warning(f"Recommendation request failed: {error_code}")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail={
                "error": error_code,
                "details": e.message
            }
        )

    logger.info(f"Returning {len(recommendations)} recommendations")
    return CropRecommendationResponse(recommendations=recommendations)
