"""
Weather Service - simulated conditions.

No weather provider is integrated; every pincode gets the same snapshot
dated today.
"""

import logging
from datetime import date
from typing import Optional

from maharishi.schemas.weather import WeatherSnapshot

logger = logging.getLogger(__name__)

SIMULATED_FORECAST = (
    "Partly cloudy with a chance of afternoon showers. High temperatures will continue."
)


def get_weather(pincode: str, today: Optional[date] = None) -> WeatherSnapshot:
    """
    Return the simulated weather snapshot for a pincode.

    Args:
        pincode: Location code typed by the farmer (not validated beyond non-empty)
        today: Date to report (defaults to date.today())
    """
    pincode = pincode.strip()
    if not pincode:
        raise ValueError("pincode must not be blank")

    logger.info(f"Simulated weather lookup for pincode={pincode}")

    return WeatherSnapshot(
        pincode=pincode,
        date=today or date.today(),
        temperature_c=32,
        rainfall_mm=5,
        humidity=75,
        wind_kph=12,
        forecast=SIMULATED_FORECAST,
    )
