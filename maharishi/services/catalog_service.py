"""
Catalog Service - static demo data for the dashboard and marketplace.

There is no database: the demo farmer, crops and listings below are fixed
fixtures. Callers receive copies so the fixtures cannot be mutated.
"""

import logging
from typing import List, Optional

from maharishi.schemas.catalog import Crop, Farmer, Listing, ListingStatus

logger = logging.getLogger(__name__)


DEMO_FARMER = Farmer(
    id="FARMER_001",
    name="Rajesh Kumar",
    phone="+91 98765 43210",
    language="hi",
    village="Rampur",
    district="Sitapur",
    state="Uttar Pradesh",
    pincode="261001",
    soil_type="Alluvial",
    wallet_balance=15250.75,
)

CROPS: List[Crop] = [
    Crop(id="C01", name="Wheat", type="Grain", season="Rabi", base_price_per_kg=20),
    Crop(id="C02", name="Rice (Paddy)", type="Grain", season="Kharif", base_price_per_kg=18),
    Crop(id="C03", name="Cotton", type="Fiber", season="Kharif", base_price_per_kg=60),
    Crop(id="C04", name="Sugarcane", type="Cash Crop", season="Annual", base_price_per_kg=3),
    Crop(id="C05", name="Soybean", type="Oilseed", season="Kharif", base_price_per_kg=45),
    Crop(id="C06", name="Tomato", type="Vegetable", season="All", base_price_per_kg=25),
    Crop(id="C07", name="Onion", type="Vegetable", season="Rabi", base_price_per_kg=30),
]

LISTINGS: List[Listing] = [
    Listing(
        id="L001",
        crop=CROPS[0],
        farmer=DEMO_FARMER,
        quantity_kg=500,
        ask_price_per_kg=22,
        status="OPEN",
        created_at="2023-10-26T10:00:00Z",
    ),
    Listing(
        id="L002",
        crop=CROPS[5],
        farmer=DEMO_FARMER,
        quantity_kg=250,
        ask_price_per_kg=28,
        status="OPEN",
        created_at="2023-10-25T14:30:00Z",
    ),
    Listing(
        id="L003",
        crop=CROPS[6],
        farmer=DEMO_FARMER.model_copy(update={"id": "FARMER_002", "name": "Suresh Patel", "pincode": "380001"}),
        quantity_kg=1000,
        ask_price_per_kg=35,
        status="OPEN",
        created_at="2023-10-26T11:00:00Z",
    ),
    Listing(
        id="L004",
        crop=CROPS[1],
        farmer=DEMO_FARMER.model_copy(update={"id": "FARMER_003", "name": "Meena Devi", "pincode": "800001"}),
        quantity_kg=800,
        ask_price_per_kg=20,
        status="SOLD",
        created_at="2023-10-24T09:00:00Z",
    ),
]


def get_demo_farmer() -> Farmer:
    """Every login resolves to this farmer."""
    return DEMO_FARMER.model_copy(deep=True)


def get_listings(status: Optional[ListingStatus] = "OPEN") -> List[Listing]:
    """
    Marketplace listings, newest first.

    Args:
        status: Only listings with this status; None returns all of them.
    """
    listings = [
        listing.model_copy(deep=True)
        for listing in LISTINGS
        if status is None or listing.status == status
    ]
    listings.sort(key=lambda listing: listing.created_at, reverse=True)
    logger.debug(f"get_listings(status={status}) -> {len(listings)} listings")
    return listings


def get_farmer_listings(farmer_id: str) -> List[Listing]:
    """All listings created by one farmer, any status."""
    return [
        listing
        for listing in get_listings(status=None)
        if listing.farmer.id == farmer_id
    ]
