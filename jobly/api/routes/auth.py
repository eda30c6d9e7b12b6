"""
Authentication routes.
"""
from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from jobly.core.database import get_db
from jobly.core.rate_limit import RATE_AUTH, limiter
from jobly.services.auth_service import AuthService
from jobly.schemas.auth import TokenRequest, TokenResponse
from jobly.schemas.user import UserRegister

router = APIRouter(prefix="/auth", tags=["auth"])

auth_service = AuthService()


@router.post("/token", response_model=TokenResponse)
@limiter.limit(RATE_AUTH)
async def login(
    request: Request,
    data: TokenRequest,
    db: AsyncSession = Depends(get_db),
):
    """
    Exchange username and password for an access token.
    """
    return await auth_service.login(
        db,
        username=data.username,
        password=data.password,
    )


@router.post("/register", response_model=TokenResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit(RATE_AUTH)
async def register(
    request: Request,
    data: UserRegister,
    db: AsyncSession = Depends(get_db),
):
    """
    Register a new (non-admin) user.

    Returns an access token on successful registration.
    """
    return await auth_service.register(db, data)
