"""
Weather lookup endpoint (simulated data).
"""

import logging

from fastapi import APIRouter, HTTPException, status

from maharishi.schemas.weather import WeatherSnapshot
from maharishi.services.weather_service import get_weather

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/weather", tags=["weather"])


@router.get(
    "/{pincode}",
    response_model=WeatherSnapshot,
    summary="Current weather for a pincode",
    description="Returns a simulated snapshot; no weather provider is integrated.",
)
async def get_weather_endpoint(pincode: str) -> WeatherSnapshot:
    try:
        return get_weather(pincode)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={
                "error": "invalid_pincode",
                "details": str(e)
            }
        )
