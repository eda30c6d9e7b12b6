"""
Authentication schemas.
"""
from pydantic import Field
from jobly.schemas.base import BaseSchema, RequestSchema


class TokenRequest(RequestSchema):
    """Login request body."""

    username: str = Field(..., min_length=1, max_length=25)
    password: str = Field(..., min_length=5, max_length=20)


class TokenResponse(BaseSchema):
    """Token response after successful authentication."""

    token: str
    token_type: str = "bearer"
    expires_in: int  # seconds
