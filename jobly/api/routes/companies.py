"""
Company routes.

Thin controllers - CompanyService handles persistence and response shaping.
Reads are public; writes require an admin.
"""
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from jobly.core.database import get_db
from jobly.api.deps import require_admin, validate_query
from jobly.services.company_service import CompanyService
from jobly.schemas.company import (
    CompanyCreate,
    CompanyDetail,
    CompanyFilter,
    CompanyResponse,
    CompanyUpdate,
)
from jobly.schemas.base import DeletedResponse

router = APIRouter(prefix="/companies", tags=["companies"])

company_service = CompanyService()


@router.post(
    "",
    response_model=CompanyResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
async def create_company(
    data: CompanyCreate,
    db: AsyncSession = Depends(get_db),
):
    """Create a new company."""
    return await company_service.create_company(db, data)


@router.get("", response_model=List[CompanyResponse])
async def list_companies(
    filters: CompanyFilter = Depends(validate_query(CompanyFilter)),
    db: AsyncSession = Depends(get_db),
):
    """
    List companies, optionally filtered by name (substring) and employee
    count (minEmployees / maxEmployees).
    """
    return await company_service.list_companies(db, filters)


@router.get("/{handle}", response_model=CompanyDetail)
async def get_company(
    handle: str,
    db: AsyncSession = Depends(get_db),
):
    """Get a company and its jobs."""
    return await company_service.get_company(db, handle)


@router.patch(
    "/{handle}",
    response_model=CompanyResponse,
    dependencies=[Depends(require_admin)],
)
async def update_company(
    handle: str,
    data: CompanyUpdate,
    db: AsyncSession = Depends(get_db),
):
    """Update some of a company's fields."""
    return await company_service.update_company(db, handle, data)


@router.delete(
    "/{handle}",
    response_model=DeletedResponse,
    dependencies=[Depends(require_admin)],
)
async def delete_company(
    handle: str,
    db: AsyncSession = Depends(get_db),
):
    """Delete a company."""
    await company_service.delete_company(db, handle)
    return DeletedResponse(deleted=handle)
