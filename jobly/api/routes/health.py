"""
Health check route.
"""
from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from jobly.core.config import settings
from jobly.core.database import get_db
from jobly.core.logging import get_logger
from jobly.schemas.base import BaseSchema

router = APIRouter(tags=["health"])

logger = get_logger(__name__)


class HealthResponse(BaseSchema):
    status: str
    version: str
    database: str
    timestamp: datetime


async def _check_database(db: AsyncSession) -> str:
    try:
        await db.execute(text("SELECT 1"))
    except SQLAlchemyError as exc:
        logger.warning("health_database_unreachable", error=type(exc).__name__)
        return "unreachable"
    return "ok"


@router.get("/health", response_model=HealthResponse)
async def health_check(db: AsyncSession = Depends(get_db)):
    """
    Liveness plus a database round trip.

    Always answers 200; ``status`` is "degraded" when the database is down.
    """
    database = await _check_database(db)
    return HealthResponse(
        status="healthy" if database == "ok" else "degraded",
        version=settings.app_version,
        database=database,
        timestamp=datetime.now(timezone.utc),
    )
