"""
Base repository with the shared find/get/update/remove operations.

Every statement is plain SQL run through ``AsyncSession.execute(text(...))``.
Filter and update statements are assembled by ``jobly.core.sql`` from the
per-entity tables declared on each subclass.
"""
import asyncio
from typing import Any, Callable, ClassVar, Dict, FrozenSet, List, Mapping, Optional, Sequence

from sqlalchemy import text
from sqlalchemy.exc import IntegrityError, InterfaceError, OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from jobly.core.exceptions import (
    BadRequestException,
    ConflictException,
    NotFoundException,
    ServiceUnavailableException,
)
from jobly.core.logging import get_logger
from jobly.core.sql import (
    FilterSpec,
    bind_params,
    placeholder,
    sql_for_filters,
    sql_for_partial_update,
)

logger = get_logger(__name__)

Record = Dict[str, Any]

# SQLSTATE unique_violation; asyncpg exposes it as sqlstate, psycopg as pgcode
UNIQUE_VIOLATION = "23505"


def is_unique_violation(exc: IntegrityError) -> bool:
    """True if ``exc`` came from a unique or primary key constraint."""
    orig = exc.orig
    codes = {
        getattr(orig, "sqlstate", None),
        getattr(orig, "pgcode", None),
        getattr(getattr(orig, "__cause__", None), "sqlstate", None),
    }
    return UNIQUE_VIOLATION in codes or "UNIQUE constraint failed" in str(orig)


class BaseRepository:
    """
    Base repository providing standard list/get/update/remove operations.

    Subclasses describe their table:

        class CompanyRepository(BaseRepository):
            table = "companies"
            key_column = "handle"
            columns = 'handle, name, num_employees AS "numEmployees"'
            js_to_sql = {"numEmployees": "num_employees"}
            updatable = frozenset({"name", "numEmployees"})
            filter_spec = COMPANY_FILTERS
            not_found = CompanyNotFoundException
    """

    table: ClassVar[str]
    key_column: ClassVar[str]
    # Select list; aliases produce the camelCase keys callers see
    columns: ClassVar[str]
    js_to_sql: ClassVar[Mapping[str, str]] = {}
    updatable: ClassVar[FrozenSet[str]] = frozenset()
    # Identity fields a caller may try to send but can never change
    immutable: ClassVar[FrozenSet[str]] = frozenset()
    filter_spec: ClassVar[FilterSpec]
    not_found: ClassVar[Callable[[Any], NotFoundException]]

    async def _fetch(
        self,
        db: AsyncSession,
        sql: str,
        values: Optional[Sequence[Any]] = None,
        *,
        conflict: Optional[ConflictException] = None,
    ) -> List[Record]:
        """
        Run one statement and return its rows as dicts.

        Raises:
            ConflictException: On a unique violation (``conflict`` if given).
            IntegrityError: On any other constraint violation.
            ServiceUnavailableException: If the store cannot be reached.
        """
        try:
            result = await db.execute(text(sql), bind_params(values))
        except IntegrityError as exc:
            await db.rollback()
            if not is_unique_violation(exc):
                logger.error("constraint_rejected", table=self.table, error=str(exc.orig))
                raise
            logger.info("constraint_violation", table=self.table, error=str(exc.orig))
            raise (conflict or ConflictException(f"Conflicting {self.table} record")) from exc
        except (OperationalError, InterfaceError, asyncio.TimeoutError) as exc:
            logger.error("store_unavailable", table=self.table, error=str(exc))
            raise ServiceUnavailableException() from exc

        return [self._to_record(row) for row in result.mappings().all()]

    def _to_record(self, row: Mapping[str, Any]) -> Record:
        """Hook for per-entity value shaping (e.g. decimals)."""
        return dict(row)

    async def find_all(
        self,
        db: AsyncSession,
        filters: Optional[Mapping[str, Any]] = None,
    ) -> List[Record]:
        """
        List rows matching ``filters``, ordered by the entity's display column.

        Raises:
            BadRequestException: If a filter is unknown or min exceeds max.
        """
        where, values = sql_for_filters(filters or {}, self.filter_spec)
        tail = where or f'ORDER BY "{self.filter_spec.order_by}"'
        return await self._fetch(
            db,
            f"SELECT {self.columns} FROM {self.table} {tail}",
            values,
        )

    async def get(self, db: AsyncSession, key: Any) -> Record:
        """
        Get a single row by its key.

        Raises:
            NotFoundException: If no row has that key.
        """
        rows = await self._fetch(
            db,
            f"SELECT {self.columns} FROM {self.table} WHERE {self.key_column} = :p1",
            [key],
        )
        if not rows:
            raise self.not_found(key)
        return rows[0]

    async def exists(self, db: AsyncSession, key: Any) -> bool:
        rows = await self._fetch(
            db,
            f"SELECT {self.key_column} FROM {self.table} WHERE {self.key_column} = :p1",
            [key],
        )
        return bool(rows)

    def _check_update(self, data: Mapping[str, Any]) -> None:
        if not data:
            raise BadRequestException("No data")

        for name in data:
            if name in self.immutable:
                raise BadRequestException(f"{name} cannot be changed")
            if name not in self.updatable:
                raise BadRequestException(f"{name} is not an updatable field")

    async def update(
        self,
        db: AsyncSession,
        key: Any,
        data: Mapping[str, Any],
    ) -> Record:
        """
        Partial update: only the fields present in ``data`` change.

        Raises:
            BadRequestException: If ``data`` is empty or names a field that
                cannot be updated.
            NotFoundException: If no row has that key.
        """
        self._check_update(data)
        set_cols, values = sql_for_partial_update(data, self.js_to_sql)
        key_idx = placeholder(len(values) + 1)

        rows = await self._fetch(
            db,
            f"UPDATE {self.table} SET {set_cols} "
            f"WHERE {self.key_column} = {key_idx} "
            f"RETURNING {self.columns}",
            [*values, key],
        )
        if not rows:
            raise self.not_found(key)
        return rows[0]

    async def remove(self, db: AsyncSession, key: Any) -> None:
        """
        Hard delete a row by its key.

        Raises:
            NotFoundException: If no row has that key.
        """
        rows = await self._fetch(
            db,
            f"DELETE FROM {self.table} WHERE {self.key_column} = :p1 RETURNING {self.key_column}",
            [key],
        )
        if not rows:
            raise self.not_found(key)
