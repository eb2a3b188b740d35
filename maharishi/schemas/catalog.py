"""
Pydantic schemas for the demo farmer, crop and marketplace listing data.

The catalog is static; these models only describe the shapes returned by
the dashboard and marketplace endpoints.
"""

from datetime import datetime
from typing import List, Literal

from pydantic import BaseModel, Field

ListingStatus = Literal["OPEN", "SOLD", "CANCELLED"]


class Farmer(BaseModel):
    """Farmer profile."""
    id: str = Field(..., examples=["FARMER_001"])
    name: str = Field(..., examples=["Rajesh Kumar"])
    phone: str = Field(..., examples=["+91 98765 43210"])
    language: Literal["en", "hi", "mr"] = Field(..., description="Preferred UI language")
    village: str
    district: str
    state: str
    pincode: str = Field(..., examples=["261001"])
    soil_type: str = Field(..., examples=["Alluvial"])
    wallet_balance: float = Field(..., description="Wallet balance in INR", examples=[15250.75])


class Crop(BaseModel):
    """Crop traded in the marketplace."""
    id: str = Field(..., examples=["C01"])
    name: str = Field(..., examples=["Wheat"])
    type: str = Field(..., examples=["Grain"])
    season: str = Field(..., examples=["Rabi"])
    base_price_per_kg: float = Field(..., description="Reference price in INR/kg", gt=0)


class Listing(BaseModel):
    """A farmer's offer to sell a quantity of a crop."""
    id: str = Field(..., examples=["L001"])
    crop: Crop
    farmer: Farmer
    quantity_kg: float = Field(..., gt=0)
    ask_price_per_kg: float = Field(..., gt=0)
    status: ListingStatus
    created_at: datetime


class ListingListResponse(BaseModel):
    """Marketplace listings."""
    listings: List[Listing]
    count: int = Field(..., description="Number of listings returned")


class DashboardResponse(BaseModel):
    """Dashboard for the signed-in farmer."""
    farmer: Farmer
    listings: List[Listing] = Field(..., description="Listings created by this farmer")
