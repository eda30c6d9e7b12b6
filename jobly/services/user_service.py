"""
User service - business logic for user account management.

Routes never touch the database directly - they call methods here.
"""
from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from jobly.core.logging import get_logger
from jobly.core.security import create_access_token
from jobly.repositories.user_repository import UserRepository
from jobly.schemas.user import (
    UserCreate,
    UserCreatedResponse,
    UserDetail,
    UserResponse,
    UserUpdate,
)

logger = get_logger(__name__)


class UserService:
    """Handles user account operations."""

    def __init__(self):
        self.user_repo = UserRepository()

    async def list_users(self, db: AsyncSession) -> List[UserResponse]:
        rows = await self.user_repo.find_all(db)
        return [UserResponse.model_validate(row) for row in rows]

    async def get_user(self, db: AsyncSession, username: str) -> UserDetail:
        """
        Get a user with the ids of the jobs they applied to.

        Raises:
            UserNotFoundException: If the username is unknown.
        """
        row = await self.user_repo.get_with_jobs(db, username)
        return UserDetail.model_validate(row)

    async def create_user(
        self,
        db: AsyncSession,
        data: UserCreate,
    ) -> UserCreatedResponse:
        """
        Admin-only creation; unlike registration it can create admins.

        Raises:
            DuplicateUserException: If the username is taken.
        """
        row = await self.user_repo.create(db, **data.model_dump())
        await db.commit()
        logger.info("user_created", username=row["username"], is_admin=bool(row["isAdmin"]))

        return UserCreatedResponse(
            user=UserResponse.model_validate(row),
            token=create_access_token(row["username"], bool(row["isAdmin"])),
        )

    async def update_user(
        self,
        db: AsyncSession,
        username: str,
        data: UserUpdate,
    ) -> UserResponse:
        """
        Raises:
            BadRequestException: If no field was supplied.
            UserNotFoundException: If the username is unknown.
        """
        row = await self.user_repo.update(
            db,
            username,
            data.model_dump(by_alias=True, exclude_none=True),
        )
        await db.commit()
        return UserResponse.model_validate(row)

    async def delete_user(self, db: AsyncSession, username: str) -> None:
        await self.user_repo.remove(db, username)
        await db.commit()
        logger.info("user_deleted", username=username)
