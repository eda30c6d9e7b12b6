"""
Company repository - data access for the companies table.
"""
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from jobly.core.exceptions import (
    CompanyNotFoundException,
    DuplicateCompanyException,
    DuplicateCompanyNameException,
)
from jobly.core.sql import FilterField, FilterOp, FilterSpec
from jobly.repositories.base import BaseRepository, Record
from jobly.repositories.job_repository import shape_job

COMPANY_FILTERS = FilterSpec(
    fields={
        "name": FilterField("name", FilterOp.CONTAINS),
        "minEmployees": FilterField("num_employees", FilterOp.GTE),
        "maxEmployees": FilterField("num_employees", FilterOp.LTE),
    },
    order_by="name",
    bounds=(("minEmployees", "maxEmployees", "employees"),),
)


class CompanyRepository(BaseRepository):
    table = "companies"
    key_column = "handle"
    columns = (
        'handle, name, description, '
        'num_employees AS "numEmployees", logo_url AS "logoUrl"'
    )
    js_to_sql = {
        "numEmployees": "num_employees",
        "logoUrl": "logo_url",
    }
    updatable = frozenset({"name", "description", "numEmployees", "logoUrl"})
    immutable = frozenset({"handle"})
    filter_spec = COMPANY_FILTERS
    not_found = CompanyNotFoundException

    async def create(
        self,
        db: AsyncSession,
        *,
        handle: str,
        name: str,
        description: str,
        num_employees: Optional[int] = None,
        logo_url: Optional[str] = None,
    ) -> Record:
        """
        Insert a company.

        Raises:
            DuplicateCompanyException: If the handle is taken.
            DuplicateCompanyNameException: If another company has this name.
        """
        if await self.exists(db, handle):
            raise DuplicateCompanyException(handle)
        if await self._name_taken(db, name):
            raise DuplicateCompanyNameException(name)

        try:
            rows = await self._fetch(
                db,
                f"""INSERT INTO companies
                    (handle, name, description, num_employees, logo_url)
                    VALUES (:p1, :p2, :p3, :p4, :p5)
                    RETURNING {self.columns}""",
                [handle, name, description, num_employees, logo_url],
                conflict=DuplicateCompanyException(handle),
            )
        except DuplicateCompanyException as exc:
            # Lost a race; the constraint text says which key collided
            if "name" in str(exc.__cause__.orig):
                raise DuplicateCompanyNameException(name) from exc.__cause__
            raise
        return rows[0]

    async def _name_taken(self, db: AsyncSession, name: str) -> bool:
        rows = await self._fetch(
            db,
            "SELECT handle FROM companies WHERE name = :p1",
            [name],
        )
        return bool(rows)

    async def get_with_jobs(self, db: AsyncSession, handle: str) -> Record:
        """
        Get a company plus its jobs, ordered by title.

        Raises:
            CompanyNotFoundException: If the handle is unknown.
        """
        company = await self.get(db, handle)
        jobs = await self._fetch(
            db,
            """SELECT id, title, salary, equity
               FROM jobs
               WHERE company_handle = :p1
               ORDER BY title""",
            [handle],
        )
        company["jobs"] = [shape_job(job) for job in jobs]
        return company
