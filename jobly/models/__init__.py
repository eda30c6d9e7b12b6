"""
Table definitions for Jobly.

These describe the schema for ``init_db``; repositories query the tables
with plain SQL rather than through the ORM.
"""
from jobly.models.company import Company
from jobly.models.job import Job
from jobly.models.user import User
from jobly.models.application import Application

__all__ = [
    "Company",
    "Job",
    "User",
    "Application",
]
