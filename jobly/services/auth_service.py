"""
Authentication service - handles registration and login.
"""
from sqlalchemy.ext.asyncio import AsyncSession

from jobly.core.config import settings
from jobly.core.logging import get_logger
from jobly.core.security import create_access_token
from jobly.repositories.base import Record
from jobly.repositories.user_repository import UserRepository
from jobly.schemas.auth import TokenResponse
from jobly.schemas.user import UserRegister

logger = get_logger(__name__)


class AuthService:
    """Handles all authentication business logic."""

    def __init__(self):
        self.user_repo = UserRepository()

    async def register(
        self,
        db: AsyncSession,
        data: UserRegister,
    ) -> TokenResponse:
        """
        Register a new (non-admin) user and return a token.

        Raises:
            DuplicateUserException: If the username is taken.
        """
        user = await self.user_repo.create(db, **data.model_dump(), is_admin=False)
        await db.commit()
        logger.info("user_registered", username=user["username"])

        return self._generate_token(user)

    async def login(
        self,
        db: AsyncSession,
        *,
        username: str,
        password: str,
    ) -> TokenResponse:
        """
        Authenticate user and return a token.

        Raises:
            InvalidCredentialsException: If username/password is wrong.
        """
        user = await self.user_repo.authenticate(db, username, password)
        return self._generate_token(user)

    def _generate_token(self, user: Record) -> TokenResponse:
        return TokenResponse(
            token=create_access_token(user["username"], bool(user["isAdmin"])),
            expires_in=settings.access_token_expire_minutes * 60,
        )
