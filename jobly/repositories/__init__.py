"""
Repository layer - data access abstraction.

Repositories own every SQL statement, keeping queries out of the service
and route layers. They depend on jobly.core only, never on jobly.api.
"""
from jobly.repositories.base import BaseRepository
from jobly.repositories.company_repository import CompanyRepository
from jobly.repositories.job_repository import JobRepository
from jobly.repositories.user_repository import UserRepository

__all__ = [
    "BaseRepository",
    "CompanyRepository",
    "JobRepository",
    "UserRepository",
]
