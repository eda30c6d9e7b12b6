"""
Company service - orchestration for company CRUD.

The repository does the work; the service shapes responses and owns the
transaction (commit after every mutation).
"""
from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from jobly.core.logging import get_logger
from jobly.repositories.company_repository import CompanyRepository
from jobly.schemas.company import (
    CompanyCreate,
    CompanyDetail,
    CompanyFilter,
    CompanyResponse,
    CompanyUpdate,
)

logger = get_logger(__name__)


class CompanyService:
    """Handles company listing and management."""

    def __init__(self):
        self.company_repo = CompanyRepository()

    async def list_companies(
        self,
        db: AsyncSession,
        filters: CompanyFilter,
    ) -> List[CompanyResponse]:
        """List companies matching the filters, ordered by name."""
        rows = await self.company_repo.find_all(
            db,
            filters.model_dump(by_alias=True, exclude_none=True),
        )
        return [CompanyResponse.model_validate(row) for row in rows]

    async def get_company(self, db: AsyncSession, handle: str) -> CompanyDetail:
        """
        Get a company with its jobs.

        Raises:
            CompanyNotFoundException: If the handle is unknown.
        """
        row = await self.company_repo.get_with_jobs(db, handle)
        return CompanyDetail.model_validate(row)

    async def create_company(
        self,
        db: AsyncSession,
        data: CompanyCreate,
    ) -> CompanyResponse:
        """
        Raises:
            DuplicateCompanyException: If the handle is taken.
            DuplicateCompanyNameException: If the name is taken.
        """
        row = await self.company_repo.create(db, **data.model_dump())
        await db.commit()
        logger.info("company_created", handle=row["handle"])
        return CompanyResponse.model_validate(row)

    async def update_company(
        self,
        db: AsyncSession,
        handle: str,
        data: CompanyUpdate,
    ) -> CompanyResponse:
        """
        Raises:
            BadRequestException: If no field was supplied.
            CompanyNotFoundException: If the handle is unknown.
        """
        row = await self.company_repo.update(
            db,
            handle,
            data.model_dump(by_alias=True, exclude_none=True),
        )
        await db.commit()
        return CompanyResponse.model_validate(row)

    async def delete_company(self, db: AsyncSession, handle: str) -> None:
        """Hard delete; the company's jobs go with it."""
        await self.company_repo.remove(db, handle)
        await db.commit()
        logger.info("company_deleted", handle=handle)
