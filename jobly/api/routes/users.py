"""
User routes.

Thin controllers - all business logic lives in UserService / JobService.
Listing and creating users is admin-only; everything under
/users/{username} is open to admins and to that user.
"""
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from jobly.core.database import get_db
from jobly.api.deps import require_admin, require_admin_or_owner
from jobly.services.job_service import JobService
from jobly.services.user_service import UserService
from jobly.schemas.base import DeletedResponse
from jobly.schemas.job import ApplicationResponse
from jobly.schemas.user import (
    UserCreate,
    UserCreatedResponse,
    UserDetail,
    UserResponse,
    UserUpdate,
)

router = APIRouter(prefix="/users", tags=["users"])

user_service = UserService()
job_service = JobService()


@router.post(
    "",
    response_model=UserCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
async def create_user(
    data: UserCreate,
    db: AsyncSession = Depends(get_db),
):
    """Create a user (possibly an admin) and return a token for them."""
    return await user_service.create_user(db, data)


@router.get(
    "",
    response_model=List[UserResponse],
    dependencies=[Depends(require_admin)],
)
async def list_users(db: AsyncSession = Depends(get_db)):
    """List all users."""
    return await user_service.list_users(db)


@router.get(
    "/{username}",
    response_model=UserDetail,
    dependencies=[Depends(require_admin_or_owner)],
)
async def get_user(
    username: str,
    db: AsyncSession = Depends(get_db),
):
    """Get a user and the jobs they applied to."""
    return await user_service.get_user(db, username)


@router.patch(
    "/{username}",
    response_model=UserResponse,
    dependencies=[Depends(require_admin_or_owner)],
)
async def update_user(
    username: str,
    data: UserUpdate,
    db: AsyncSession = Depends(get_db),
):
    """Update name, email or password."""
    return await user_service.update_user(db, username, data)


@router.delete(
    "/{username}",
    response_model=DeletedResponse,
    dependencies=[Depends(require_admin_or_owner)],
)
async def delete_user(
    username: str,
    db: AsyncSession = Depends(get_db),
):
    """Delete a user account."""
    await user_service.delete_user(db, username)
    return DeletedResponse(deleted=username)


@router.post(
    "/{username}/jobs/{job_id}",
    response_model=ApplicationResponse,
    dependencies=[Depends(require_admin_or_owner)],
)
async def apply_to_job(
    username: str,
    job_id: int,
    db: AsyncSession = Depends(get_db),
):
    """Apply to a job on behalf of the user."""
    applied = await job_service.apply(db, username, job_id)
    return ApplicationResponse(applied=applied)
