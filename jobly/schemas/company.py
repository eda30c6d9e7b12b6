"""
Company schemas.
"""
from typing import List, Optional
from pydantic import Field
from jobly.schemas.base import BaseSchema, RequestSchema


class CompanyCreate(RequestSchema):
    """Company creation body."""

    handle: str = Field(..., min_length=1, max_length=25)
    name: str = Field(..., min_length=1)
    description: str
    num_employees: Optional[int] = Field(None, ge=0)
    logo_url: Optional[str] = None


class CompanyUpdate(RequestSchema):
    """Company partial update body. The handle cannot be changed."""

    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    num_employees: Optional[int] = Field(None, ge=0)
    logo_url: Optional[str] = None


class CompanyFilter(RequestSchema):
    """Company list query parameters."""

    name: Optional[str] = Field(None, min_length=1)
    min_employees: Optional[int] = Field(None, ge=0)
    max_employees: Optional[int] = Field(None, ge=0)


class CompanyResponse(BaseSchema):
    """Company response schema."""

    handle: str
    name: str
    description: str
    num_employees: Optional[int] = None
    logo_url: Optional[str] = None


class CompanyJob(BaseSchema):
    """Job summary nested in a company detail."""

    id: int
    title: str
    salary: Optional[int] = None
    equity: Optional[str] = None


class CompanyDetail(CompanyResponse):
    """Company with its jobs."""

    jobs: List[CompanyJob] = []
