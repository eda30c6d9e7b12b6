"""
Job schemas.
"""
from decimal import Decimal
from typing import Optional
from pydantic import Field
from jobly.schemas.base import BaseSchema, RequestSchema


class JobCreate(RequestSchema):
    """Job creation body."""

    title: str = Field(..., min_length=1)
    salary: Optional[int] = Field(None, ge=0)
    equity: Optional[Decimal] = Field(None, ge=0, le=1)
    company_handle: str = Field(..., min_length=1, max_length=25)


class JobUpdate(RequestSchema):
    """Job partial update body. Id and company cannot be changed."""

    title: Optional[str] = Field(None, min_length=1)
    salary: Optional[int] = Field(None, ge=0)
    equity: Optional[Decimal] = Field(None, ge=0, le=1)


class JobFilter(RequestSchema):
    """Job list query parameters."""

    title: Optional[str] = Field(None, min_length=1)
    min_salary: Optional[int] = Field(None, ge=0)
    max_salary: Optional[int] = Field(None, ge=0)


class JobResponse(BaseSchema):
    """Job response; equity is a decimal string such as "0.375"."""

    id: int
    title: str
    salary: Optional[int] = None
    equity: Optional[str] = None
    company_handle: str


class ApplicationResponse(BaseSchema):
    """Job application confirmation."""

    applied: int
