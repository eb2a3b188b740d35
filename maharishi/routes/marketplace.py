"""
Dashboard and marketplace endpoints over the static demo catalog.

Endpoints:
- GET /dashboard: Demo farmer profile and their listings
- GET /marketplace/listings: Listings filtered by status (default OPEN)
"""

import logging
from typing import Optional

from fastapi import APIRouter, Query

from maharishi.schemas.catalog import DashboardResponse, ListingListResponse, ListingStatus
from maharishi.services.catalog_service import (
    get_demo_farmer,
    get_farmer_listings,
    get_listings,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["marketplace"])


@router.get(
    "/dashboard",
    response_model=DashboardResponse,
    summary="Farmer dashboard",
)
async def get_dashboard() -> DashboardResponse:
    """Profile, wallet balance and own listings of the demo farmer."""
    farmer = get_demo_farmer()
    listings = get_farmer_listings(farmer.id)
    logger.debug(f"Dashboard for farmer_id={farmer.id}: {len(listings)} listings")
    return DashboardResponse(farmer=farmer, listings=listings)


@router.get(
    "/marketplace/listings",
    response_model=ListingListResponse,
    summary="Browse marketplace listings",
)
async def list_marketplace_listings(
    status: Optional[ListingStatus] = Query(
        "OPEN",
        description="Only listings with this status"
    ),
    include_all: bool = Query(
        False,
        description="Ignore the status filter and return every listing"
    ),
) -> ListingListResponse:
    listings = get_listings(status=None if include_all else status)
    return ListingListResponse(listings=listings, count=len(listings))
