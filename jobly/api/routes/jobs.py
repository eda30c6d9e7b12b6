"""
Job routes.

Reads are public; writes require an admin.
"""
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from jobly.core.database import get_db
from jobly.api.deps import require_admin, validate_query
from jobly.services.job_service import JobService
from jobly.schemas.job import JobCreate, JobFilter, JobResponse, JobUpdate
from jobly.schemas.base import DeletedResponse

router = APIRouter(prefix="/jobs", tags=["jobs"])

job_service = JobService()


@router.post(
    "",
    response_model=JobResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
async def create_job(
    data: JobCreate,
    db: AsyncSession = Depends(get_db),
):
    """Post a job for an existing company."""
    return await job_service.create_job(db, data)


@router.get("", response_model=List[JobResponse])
async def list_jobs(
    filters: JobFilter = Depends(validate_query(JobFilter)),
    db: AsyncSession = Depends(get_db),
):
    """
    List jobs, optionally filtered by title (substring) and salary
    (minSalary / maxSalary).
    """
    return await job_service.list_jobs(db, filters)


@router.get("/{job_id}", response_model=JobResponse)
async def get_job(
    job_id: int,
    db: AsyncSession = Depends(get_db),
):
    """Get job details by ID."""
    return await job_service.get_job(db, job_id)


@router.patch(
    "/{job_id}",
    response_model=JobResponse,
    dependencies=[Depends(require_admin)],
)
async def update_job(
    job_id: int,
    data: JobUpdate,
    db: AsyncSession = Depends(get_db),
):
    """Update title, salary or equity of a job."""
    return await job_service.update_job(db, job_id, data)


@router.delete(
    "/{job_id}",
    response_model=DeletedResponse,
    dependencies=[Depends(require_admin)],
)
async def delete_job(
    job_id: int,
    db: AsyncSession = Depends(get_db),
):
    """Delete a job."""
    await job_service.delete_job(db, job_id)
    return DeletedResponse(deleted=str(job_id))
