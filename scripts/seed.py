"""
Seed script - populates the database with sample data for development.

Usage:
    python -m scripts.seed

This script is IDEMPOTENT - running it twice won't create duplicates.
Each record is checked for before it is inserted.
"""
import asyncio
import sys
import os

# Add project root to path so imports work
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from jobly.core.database import async_session_maker, init_db
from jobly.repositories import CompanyRepository, JobRepository, UserRepository


# ─── Users ─────────────────────────────────────────────────────

TEST_USER = {
    "username": "dev",
    "password": "password123",
    "first_name": "Dev",
    "last_name": "User",
    "email": "dev@jobly.dev",
}

ADMIN_USER = {
    "username": "admin",
    "password": "admin123",
    "first_name": "Admin",
    "last_name": "User",
    "email": "admin@jobly.dev",
    "is_admin": True,
}


# ─── Companies ─────────────────────────────────────────────────

COMPANIES = [
    {
        "handle": "anderson-arias-morrow",
        "name": "Anderson, Arias and Morrow",
        "description": "Somebody program how I. Face give away discussion view act inside.",
        "num_employees": 245,
        "logo_url": "/logos/logo3.png",
    },
    {
        "handle": "bauer-gallagher",
        "name": "Bauer-Gallagher",
        "description": "Difficult ready trip question produce produce someone.",
        "num_employees": 862,
    },
    {
        "handle": "watson-davis",
        "name": "Watson-Davis",
        "description": "Year join loss.",
        "num_employees": 819,
        "logo_url": "/logos/logo3.png",
    },
]


# ─── Jobs ──────────────────────────────────────────────────────

SAMPLE_JOBS = [
    {"title": "Data Scientist", "salary": 118000, "equity": "0.625", "company_handle": "watson-davis"},
    {"title": "Full Stack Developer", "salary": 110000, "equity": "0.25", "company_handle": "anderson-arias-morrow"},
    {"title": "Machine Learning Engineer", "salary": 128000, "equity": "0.45", "company_handle": "bauer-gallagher"},
    {"title": "Conservator, furniture", "salary": 110000, "equity": "0", "company_handle": "watson-davis"},
    {"title": "Information officer", "salary": 200000, "equity": None, "company_handle": "bauer-gallagher"},
]


async def seed():
    print("Seeding database...")

    await init_db()
    print("  Tables created")

    company_repo = CompanyRepository()
    job_repo = JobRepository()
    user_repo = UserRepository()

    async with async_session_maker() as db:

        # ── Users ──────────────────────────────────────────
        for user in (TEST_USER, ADMIN_USER):
            if await user_repo.exists(db, user["username"]):
                print(f"  User {user['username']} already exists, skipping...")
                continue
            await user_repo.create(db, **user)
            print(f"  Created user {user['username']}")

        # ── Companies ──────────────────────────────────────
        for company in COMPANIES:
            if await company_repo.exists(db, company["handle"]):
                continue
            await company_repo.create(db, **company)
        print(f"  Ensured {len(COMPANIES)} companies")

        # ── Jobs ───────────────────────────────────────────
        existing = {
            (job["title"], job["companyHandle"])
            for job in await job_repo.find_all(db)
        }
        created = 0
        for job in SAMPLE_JOBS:
            if (job["title"], job["company_handle"]) in existing:
                continue
            await job_repo.create(db, **job)
            created += 1
        print(f"  Created {created} jobs")

        # Commit everything
        await db.commit()
        print()
        print("Seed complete!")
        print(f"  Login: {TEST_USER['username']} / {TEST_USER['password']}")
        print(f"  Admin: {ADMIN_USER['username']} / {ADMIN_USER['password']}")


if __name__ == "__main__":
    asyncio.run(seed())
