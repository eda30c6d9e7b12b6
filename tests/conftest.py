import asyncio
import os
import sqlite3
from decimal import Decimal

# Settings are read at import time, so these must be set before jobly loads
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["ENVIRONMENT"] = "test"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

import jobly.models  # noqa: F401
from jobly.core.database import Base, get_db
from jobly.core.security import create_access_token
from jobly.main import app
from jobly.repositories import CompanyRepository, JobRepository, UserRepository

# SQLite has no decimal type; equity is stored as REAL
sqlite3.register_adapter(Decimal, float)


@pytest.fixture
def session_maker(tmp_path):
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'jobly.db'}",
        poolclass=NullPool,
    )

    @event.listens_for(engine.sync_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async def create_tables():
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    asyncio.run(create_tables())
    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    asyncio.run(engine.dispose())


@pytest.fixture
def run_db(session_maker):
    """Run ``fn(db)`` in a fresh session and commit if it succeeds."""

    def _run(fn):
        async def _go():
            async with session_maker() as db:
                result = await fn(db)
                await db.commit()
                return result

        return asyncio.run(_go())

    return _run


@pytest.fixture
def seeded(run_db):
    """Three companies, three jobs, two regular users and one admin."""
    companies = CompanyRepository()
    jobs = JobRepository()
    users = UserRepository()

    async def seed(db):
        await companies.create(
            db, handle="c1", name="C1", description="Desc1", num_employees=1, logo_url="http://c1.img"
        )
        await companies.create(
            db, handle="c2", name="C2", description="Desc2", num_employees=2, logo_url="http://c2.img"
        )
        await companies.create(
            db, handle="c3", name="C3", description="Desc3", num_employees=3, logo_url="http://c3.img"
        )

        job_ids = {}
        for title, salary, equity, handle in (
            ("Data Scientist", 118000, "0.625", "c3"),
            ("Full Stack Developer", 110000, "0.25", "c1"),
            ("Machine Learning Engineer", 128000, "0.45", "c2"),
        ):
            job = await jobs.create(
                db, title=title, salary=salary, equity=equity, company_handle=handle
            )
            job_ids[title] = job["id"]

        await users.create(
            db, username="u1", password="password1", first_name="U1F",
            last_name="U1L", email="user1@user.com",
        )
        await users.create(
            db, username="u2", password="password2", first_name="U2F",
            last_name="U2L", email="user2@user.com",
        )
        await users.create(
            db, username="admin", password="password3", first_name="AdF",
            last_name="AdL", email="admin@user.com", is_admin=True,
        )
        return job_ids

    return run_db(seed)


@pytest.fixture
def client(session_maker):
    async def override_get_db():
        async with session_maker() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    # No context manager: table creation is handled by session_maker, not lifespan
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def u1_headers():
    return {"Authorization": f"Bearer {create_access_token('u1')}"}


@pytest.fixture
def admin_headers():
    return {"Authorization": f"Bearer {create_access_token('admin', is_admin=True)}"}
