"""
Demo login endpoint.

Any identifier and password are accepted and resolve to the demo farmer.
There is no token: the other endpoints are public.
"""

import logging

from fastapi import APIRouter

from maharishi.schemas.auth import LoginRequest, LoginResponse
from maharishi.services.catalog_service import get_demo_farmer

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post(
    "/login",
    response_model=LoginResponse,
    summary="Demo login",
)
async def login(request: LoginRequest) -> LoginResponse:
    # Credentials are intentionally not logged
    farmer = get_demo_farmer()
    logger.info(f"Demo login resolved to farmer_id={farmer.id}")
    return LoginResponse(status="ok", farmer=farmer)
