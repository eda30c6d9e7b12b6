"""
Pydantic schemas for API validation and serialization.
"""
from jobly.schemas.base import (
    BaseSchema,
    RequestSchema,
    DeletedResponse,
    ErrorResponse,
)
from jobly.schemas.auth import (
    TokenRequest,
    TokenResponse,
)
from jobly.schemas.company import (
    CompanyCreate,
    CompanyUpdate,
    CompanyFilter,
    CompanyResponse,
    CompanyDetail,
)
from jobly.schemas.job import (
    JobCreate,
    JobUpdate,
    JobFilter,
    JobResponse,
    ApplicationResponse,
)
from jobly.schemas.user import (
    UserRegister,
    UserCreate,
    UserUpdate,
    UserResponse,
    UserDetail,
    UserCreatedResponse,
)

__all__ = [
    # Base
    "BaseSchema",
    "RequestSchema",
    "DeletedResponse",
    "ErrorResponse",
    # Auth
    "TokenRequest",
    "TokenResponse",
    # Company
    "CompanyCreate",
    "CompanyUpdate",
    "CompanyFilter",
    "CompanyResponse",
    "CompanyDetail",
    # Job
    "JobCreate",
    "JobUpdate",
    "JobFilter",
    "JobResponse",
    "ApplicationResponse",
    # User
    "UserRegister",
    "UserCreate",
    "UserUpdate",
    "UserResponse",
    "UserDetail",
    "UserCreatedResponse",
]
