"""
User repository - data access for the users table.

Passwords are hashed on the way in and never selected on the way out,
except by ``authenticate``.
"""
from typing import Any, Mapping

from sqlalchemy.ext.asyncio import AsyncSession

from jobly.core.exceptions import (
    DuplicateUserException,
    InvalidCredentialsException,
    UserNotFoundException,
)
from jobly.core.security import hash_password, verify_password
from jobly.core.sql import FilterSpec
from jobly.repositories.base import BaseRepository, Record

USER_FILTERS = FilterSpec(fields={}, order_by="username")


class UserRepository(BaseRepository):
    table = "users"
    key_column = "username"
    columns = (
        'username, first_name AS "firstName", last_name AS "lastName", '
        'email, is_admin AS "isAdmin"'
    )
    js_to_sql = {
        "firstName": "first_name",
        "lastName": "last_name",
        "isAdmin": "is_admin",
    }
    updatable = frozenset({"firstName", "lastName", "password", "email", "isAdmin"})
    immutable = frozenset({"username"})
    filter_spec = USER_FILTERS
    not_found = UserNotFoundException

    async def authenticate(
        self,
        db: AsyncSession,
        username: str,
        password: str,
    ) -> Record:
        """
        Check a username/password pair.

        Raises:
            InvalidCredentialsException: If the user is unknown or the password is wrong.
        """
        rows = await self._fetch(
            db,
            f"SELECT {self.columns}, password FROM users WHERE username = :p1",
            [username],
        )
        if rows:
            user = rows[0]
            hashed = user.pop("password")
            if verify_password(password, hashed):
                return user

        raise InvalidCredentialsException()

    async def create(
        self,
        db: AsyncSession,
        *,
        username: str,
        password: str,
        first_name: str,
        last_name: str,
        email: str,
        is_admin: bool = False,
    ) -> Record:
        """
        Insert a user with a hashed password.

        Raises:
            DuplicateUserException: If the username is taken.
        """
        if await self.exists(db, username):
            raise DuplicateUserException(username)

        rows = await self._fetch(
            db,
            f"""INSERT INTO users
                (username, password, first_name, last_name, email, is_admin)
                VALUES (:p1, :p2, :p3, :p4, :p5, :p6)
                RETURNING {self.columns}""",
            [username, hash_password(password), first_name, last_name, email, is_admin],
            conflict=DuplicateUserException(username),
        )
        return rows[0]

    async def get_with_jobs(self, db: AsyncSession, username: str) -> Record:
        """
        Get a user plus the ids of the jobs they applied to.

        Raises:
            UserNotFoundException: If the username is unknown.
        """
        user = await self.get(db, username)
        applications = await self._fetch(
            db,
            "SELECT job_id FROM applications WHERE username = :p1 ORDER BY job_id",
            [username],
        )
        user["jobs"] = [row["job_id"] for row in applications]
        return user

    async def update(
        self,
        db: AsyncSession,
        key: Any,
        data: Mapping[str, Any],
    ) -> Record:
        if data.get("password") is not None:
            data = {**data, "password": hash_password(data["password"])}
        return await super().update(db, key, data)
