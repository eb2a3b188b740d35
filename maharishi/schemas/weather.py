"""
Weather lookup schemas.

Weather is simulated: every pincode gets the same snapshot.
"""

import datetime

from pydantic import BaseModel, Field


class WeatherSnapshot(BaseModel):
    """Current conditions for a pincode."""
    pincode: str = Field(..., examples=["261001"])
    date: datetime.date
    temperature_c: float = Field(..., examples=[32])
    rainfall_mm: float = Field(..., ge=0, examples=[5])
    humidity: float = Field(..., ge=0, le=100, description="Relative humidity in percent", examples=[75])
    wind_kph: float = Field(..., ge=0, examples=[12])
    forecast: str = Field(
        ...,
        examples=["Partly cloudy with a chance of afternoon showers. High temperatures will continue."]
    )
