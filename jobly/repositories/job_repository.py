"""
Job repository - data access for the jobs and applications tables.
"""
from decimal import Decimal
from typing import Any, Mapping, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from jobly.core.exceptions import (
    CompanyNotFoundException,
    DuplicateApplicationException,
    DuplicateJobException,
    JobNotFoundException,
    UserNotFoundException,
)
from jobly.core.sql import FilterField, FilterOp, FilterSpec
from jobly.repositories.base import BaseRepository, Record

JOB_FILTERS = FilterSpec(
    fields={
        "title": FilterField("title", FilterOp.CONTAINS),
        "minSalary": FilterField("salary", FilterOp.GTE),
        "maxSalary": FilterField("salary", FilterOp.LTE),
    },
    order_by="title",
    bounds=(("minSalary", "maxSalary", "salary"),),
)


def to_decimal(value: Any) -> Optional[Decimal]:
    """Coerce an equity value for binding; floats go through str to keep their digits."""
    if value is None or isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def format_equity(value: Any) -> Optional[str]:
    """Render equity as a plain decimal string: Decimal("0.250") -> "0.25"."""
    if value is None:
        return None
    return format(to_decimal(value).normalize(), "f")


def shape_job(row: Mapping[str, Any]) -> Record:
    record = dict(row)
    if "equity" in record:
        record["equity"] = format_equity(record["equity"])
    return record


class JobRepository(BaseRepository):
    table = "jobs"
    key_column = "id"
    columns = 'id, title, salary, equity, company_handle AS "companyHandle"'
    updatable = frozenset({"title", "salary", "equity"})
    immutable = frozenset({"id", "companyHandle"})
    filter_spec = JOB_FILTERS
    not_found = JobNotFoundException

    def _to_record(self, row: Mapping[str, Any]) -> Record:
        return shape_job(row)

    async def create(
        self,
        db: AsyncSession,
        *,
        title: str,
        company_handle: str,
        salary: Optional[int] = None,
        equity: Any = None,
    ) -> Record:
        """
        Insert a job for an existing company.

        Raises:
            CompanyNotFoundException: If the company does not exist.
            DuplicateJobException: If the company already has a job with this title.
        """
        company = await self._fetch(
            db,
            "SELECT handle FROM companies WHERE handle = :p1",
            [company_handle],
        )
        if not company:
            raise CompanyNotFoundException(company_handle)

        if await self._title_taken(db, title, company_handle):
            raise DuplicateJobException(title, company_handle)

        rows = await self._fetch(
            db,
            f"""INSERT INTO jobs
                (title, salary, equity, company_handle)
                VALUES (:p1, :p2, :p3, :p4)
                RETURNING {self.columns}""",
            [title, salary, to_decimal(equity), company_handle],
            conflict=DuplicateJobException(title, company_handle),
        )
        return rows[0]

    async def _title_taken(self, db: AsyncSession, title: str, company_handle: str) -> bool:
        rows = await self._fetch(
            db,
            "SELECT id FROM jobs WHERE title = :p1 AND company_handle = :p2",
            [title, company_handle],
        )
        return bool(rows)

    async def update(
        self,
        db: AsyncSession,
        key: Any,
        data: Mapping[str, Any],
    ) -> Record:
        if "equity" in data:
            data = {**data, "equity": to_decimal(data["equity"])}
        return await super().update(db, key, data)

    async def apply(self, db: AsyncSession, job_id: int, username: str) -> None:
        """
        Record that ``username`` applied to ``job_id``.

        Raises:
            JobNotFoundException: If the job does not exist.
            UserNotFoundException: If the user does not exist.
            DuplicateApplicationException: If the user already applied.
        """
        if not await self.exists(db, job_id):
            raise JobNotFoundException(job_id)

        user = await self._fetch(
            db,
            "SELECT username FROM users WHERE username = :p1",
            [username],
        )
        if not user:
            raise UserNotFoundException(username)

        await self._fetch(
            db,
            """INSERT INTO applications (username, job_id)
               VALUES (:p1, :p2)
               RETURNING job_id""",
            [username, job_id],
            conflict=DuplicateApplicationException(username, job_id),
        )
