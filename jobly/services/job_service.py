"""
Job service - orchestration for job CRUD and applications.
"""
from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from jobly.core.logging import get_logger
from jobly.repositories.job_repository import JobRepository
from jobly.schemas.job import JobCreate, JobFilter, JobResponse, JobUpdate

logger = get_logger(__name__)


class JobService:
    """Handles job search, detail retrieval and applications."""

    def __init__(self):
        self.job_repo = JobRepository()

    async def list_jobs(
        self,
        db: AsyncSession,
        filters: JobFilter,
    ) -> List[JobResponse]:
        """List jobs matching the filters, ordered by title."""
        rows = await self.job_repo.find_all(
            db,
            filters.model_dump(by_alias=True, exclude_none=True),
        )
        return [JobResponse.model_validate(row) for row in rows]

    async def get_job(self, db: AsyncSession, job_id: int) -> JobResponse:
        """
        Raises:
            JobNotFoundException: If job doesn't exist.
        """
        row = await self.job_repo.get(db, job_id)
        return JobResponse.model_validate(row)

    async def create_job(self, db: AsyncSession, data: JobCreate) -> JobResponse:
        """
        Raises:
            CompanyNotFoundException: If the company doesn't exist.
            DuplicateJobException: If the company already posted this title.
        """
        row = await self.job_repo.create(db, **data.model_dump())
        await db.commit()
        logger.info("job_created", job_id=row["id"], company=row["companyHandle"])
        return JobResponse.model_validate(row)

    async def update_job(
        self,
        db: AsyncSession,
        job_id: int,
        data: JobUpdate,
    ) -> JobResponse:
        """
        Raises:
            BadRequestException: If no field was supplied.
            JobNotFoundException: If job doesn't exist.
        """
        row = await self.job_repo.update(
            db,
            job_id,
            data.model_dump(by_alias=True, exclude_none=True),
        )
        await db.commit()
        return JobResponse.model_validate(row)

    async def delete_job(self, db: AsyncSession, job_id: int) -> None:
        await self.job_repo.remove(db, job_id)
        await db.commit()
        logger.info("job_deleted", job_id=job_id)

    async def apply(self, db: AsyncSession, username: str, job_id: int) -> int:
        """
        Record an application and return the job id.

        Raises:
            JobNotFoundException: If job doesn't exist.
            UserNotFoundException: If user doesn't exist.
            DuplicateApplicationException: If the user already applied.
        """
        await self.job_repo.apply(db, job_id, username)
        await db.commit()
        logger.info("job_applied", job_id=job_id, username=username)
        return job_id
