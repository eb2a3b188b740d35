"""
Demo login schemas.

The login accepts any identifier and password; there is no real
authentication behind it.
"""

from pydantic import BaseModel, Field

from maharishi.schemas.catalog import Farmer


class LoginRequest(BaseModel):
    """Credentials typed into the login form (not checked)."""
    identifier: str = Field(
        "",
        description="Email or phone number",
        max_length=200,
        examples=["farmer@maharishi.dev"]
    )
    password: str = Field(
        "",
        max_length=200,
        examples=["password"]
    )


class LoginResponse(BaseModel):
    """Profile of the demo farmer every login resolves to."""
    status: str = Field("ok", examples=["ok"])
    farmer: Farmer
