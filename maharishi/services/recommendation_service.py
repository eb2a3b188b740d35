"""
Recommendation Service - Gemini Structured Output

This service turns a farm's location, soil type and season into crop
suggestions using Google's Gemini model with schema-constrained output.

Architecture:
- Pattern: Single-shot LLM call (one request, one response)
- Model: Gemini 2.5 Flash (settings.GEMINI_MODEL)
- API: Google Gen AI Python SDK (google-genai), async client
- Temperature: 0.7 (settings.RECOMMENDATION_TEMPERATURE)
- Output: JSON constrained by response_schema, parsed from response text

Failure handling:
- Transient failures (5xx, 429, transport errors, timeouts) are retried
  with exponential backoff via tenacity
- Every failure reaches the caller as a RecommendationRequestError carrying
  one generic user-facing message; subclasses keep the cause apart for logs
  and HTTP status mapping
- Malformed entries are dropped one by one; a payload without a
  "recommendations" field yields an empty list
"""

import asyncio
import json
import logging
from typing import Any, List

import httpx
from google.genai import errors as genai_errors
from google.genai import types
from pydantic import ValidationError
from tenacity import (
    before_sleep_log,
    retry,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from maharishi.agents.advisor.prompts import build_crop_recommendation_prompt
from maharishi.agents.advisor.schemas import CropRecommendationResponseSchema
from maharishi.config import settings
from maharishi.schemas.recommendations import CropRecommendation
from maharishi.services.gemini_client import get_gemini_client
from maharishi.utils.constants import (
    AI_DISABLED_MESSAGE,
    RECOMMENDATION_COUNT,
    RECOMMENDATION_ERROR_MESSAGE,
)

logger = logging.getLogger(__name__)

# google-genai talks to Gemini over httpx (aiohttp is not installed, so the SDK
# never switches to it). Timeouts from the asyncio layer are treated the same.
TRANSPORT_ERRORS = (httpx.TransportError, asyncio.TimeoutError)


# =============================================================================
# ERRORS
# =============================================================================

class RecommendationRequestError(Exception):
    """Crop recommendations could not be obtained."""

    def __init__(self, message: str = RECOMMENDATION_ERROR_MESSAGE):
        super().__init__(message)
        self.message = message


class RecommendationUnavailableError(RecommendationRequestError):
    """No Gemini key is configured; no call was attempted."""

    def __init__(self, message: str = AI_DISABLED_MESSAGE):
        super().__init__(message)


class RecommendationAuthError(RecommendationRequestError):
    """Gemini rejected the API key."""


class RecommendationNetworkError(RecommendationRequestError):
    """Gemini was unreachable or kept failing after retries."""


class RecommendationSchemaError(RecommendationRequestError):
    """Gemini answered with a payload that does not match the schema."""


# =============================================================================
# GEMINI CALL
# =============================================================================

def _is_transient_error(exc: BaseException) -> bool:
    """Errors worth retrying: server side failures, rate limits, transport."""
    if isinstance(exc, genai_errors.ServerError):
        return True
    if isinstance(exc, genai_errors.ClientError) and exc.code == 429:
        return True
    return isinstance(exc, TRANSPORT_ERRORS)


def _is_auth_error(exc: genai_errors.ClientError) -> bool:
    if exc.code in (401, 403):
        return True
    # An invalid key comes back as 400 INVALID_ARGUMENT
    return exc.code == 400 and "api key" in str(exc).lower()


@retry(
    stop=stop_after_attempt(settings.RECOMMENDATION_MAX_ATTEMPTS),
    wait=wait_exponential(
        multiplier=settings.RETRY_BACKOFF_SECONDS,
        max=settings.RETRY_BACKOFF_MAX_SECONDS,
    ),
    retry=retry_if_exception(_is_transient_error),
    before_sleep=before_sleep_log(logger, logging.WARNING),
    reraise=True,
)
async def _generate_structured_content(
    client: Any,
    prompt: str,
    config: types.GenerateContentConfig,
) -> types.GenerateContentResponse:
    return await client.aio.models.generate_content(
        model=settings.GEMINI_MODEL,
        contents=prompt,
        config=config,
    )


# =============================================================================
# RESPONSE PARSING
# =============================================================================

def _parse_recommendations(raw_text: str) -> List[CropRecommendation]:
    """
    Parse the structured response text into validated recommendations.

    Args:
        raw_text: JSON text returned by Gemini

    Returns:
        Up to RECOMMENDATION_COUNT records, each with all four fields set.
        Empty when the payload has no "recommendations" field.

    Raises:
        RecommendationSchemaError: text is not JSON, or the payload (or its
            "recommendations" field) has the wrong type.
    """
    try:
        payload = json.loads(raw_text)
    except json.JSONDecodeError as e:
        logger.error(f"Failed to parse JSON response: {e}")
        raise RecommendationSchemaError() from e

    if not isinstance(payload, dict):
        logger.error(f"Expected a JSON object, got {type(payload).__name__}")
        raise RecommendationSchemaError()

    raw_items = payload.get("recommendations")
    if raw_items is None:
        logger.warning("Gemini response has no 'recommendations' field, returning empty list")
        return []

    if not isinstance(raw_items, list):
        logger.error(f"'recommendations' is {type(raw_items).__name__}, expected a list")
        raise RecommendationSchemaError()

    recommendations: List[CropRecommendation] = []
    for idx, item in enumerate(raw_items):
        try:
            recommendations.append(CropRecommendation.model_validate(item))
        except ValidationError as e:
            logger.warning(f"Dropping malformed recommendation {idx}: {e.error_count()} validation error(s)")

    if len(recommendations) > RECOMMENDATION_COUNT:
        logger.warning(f"Gemini returned {len(recommendations)} recommendations, keeping {RECOMMENDATION_COUNT}")
        recommendations = recommendations[:RECOMMENDATION_COUNT]

    return recommendations


# =============================================================================
# PUBLIC API
# =============================================================================

async def get_recommendations(
    location: str,
    soil_type: str,
    season: str,
) -> List[CropRecommendation]:
    """
    Get crop recommendations for a farm using Gemini structured output.

    This function:
    1. Checks that all inputs are present and Gemini is configured
    2. Builds the recommendation prompt (soil type and season forwarded verbatim)
    3. Calls Gemini with response_schema, retrying transient failures
    4. Parses and validates each recommendation

    Args:
        location: Pincode of the farm
        soil_type: Soil category (e.g., "Alluvial")
        season: Farming season label (e.g., "Rabi (Winter)")

    Returns:
        List of CropRecommendation (nominally 3, possibly empty)

    Raises:
        RecommendationUnavailableError: GOOGLE_API_KEY is not configured
        RecommendationAuthError: Gemini rejected the credentials
        RecommendationNetworkError: Gemini unreachable after retries
        RecommendationSchemaError: response did not match the schema
        RecommendationRequestError: any other failure, or blank inputs
    """
    if not (location and location.strip() and soil_type and soil_type.strip() and season and season.strip()):
        raise RecommendationRequestError("Please fill in all fields.")

    logger.info(f"get_recommendations called: soil_type='{soil_type}', season='{season}'")

    client = get_gemini_client()
    if client is None:
        logger.error("Gemini client not available")
        raise RecommendationUnavailableError()

    prompt = build_crop_recommendation_prompt(
        location=location,
        soil_type=soil_type,
        season=season,
    )

    config = types.GenerateContentConfig(
        response_mime_type="application/json",
        response_schema=CropRecommendationResponseSchema,
        temperature=settings.RECOMMENDATION_TEMPERATURE,
    )

    try:
        logger.info("Calling Gemini API for crop recommendations...")
        response = await _generate_structured_content(client, prompt, config)
    except genai_errors.ClientError as e:
        if _is_auth_error(e):
            logger.error(f"Gemini rejected the credentials (code={e.code})")
            raise RecommendationAuthError() from e
        if e.code == 429:
            logger.error("Gemini rate limit persisted after retries")
            raise RecommendationNetworkError() from e
        logger.error(f"Gemini client error (code={e.code}): {e}")
        raise RecommendationRequestError() from e
    except (genai_errors.ServerError, *TRANSPORT_ERRORS) as e:
        logger.error(f"Gemini unreachable after retries: {e.__class__.__name__}")
        raise RecommendationNetworkError() from e
    except Exception as e:
        logger.error(f"Error fetching crop recommendations: {e}", exc_info=True)
        raise RecommendationRequestError() from e

    response_text = (response.text or "").strip()
    if not response_text:
        logger.error("Empty text in Gemini response")
        raise RecommendationSchemaError()

    recommendations = _parse_recommendations(response_text)

    logger.info(f"Returning {len(recommendations)} crop recommendations")
    return recommendations
