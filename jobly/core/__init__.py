"""Core module exports."""
from jobly.core.config import settings, get_settings
from jobly.core.database import Base, get_db, init_db, close_db, engine, async_session_maker
from jobly.core.security import (
    verify_password,
    hash_password,
    create_access_token,
    decode_access_token,
)
from jobly.core.exceptions import (
    APIException,
    BadRequestException,
    UnauthorizedException,
    NotFoundException,
    ConflictException,
    ServiceUnavailableException,
    InvalidCredentialsException,
    CompanyNotFoundException,
    JobNotFoundException,
    UserNotFoundException,
    DuplicateCompanyException,
    DuplicateCompanyNameException,
    DuplicateJobException,
    DuplicateUserException,
    DuplicateApplicationException,
)
from jobly.core.authorization import (
    Actor,
    ANONYMOUS,
    authorize,
    is_admin,
    is_admin_or_owner,
    is_logged_in,
)
from jobly.core.sql import (
    FilterField,
    FilterOp,
    FilterSpec,
    bind_params,
    placeholder,
    sql_for_filters,
    sql_for_partial_update,
)

__all__ = [
    "settings",
    "get_settings",
    "Base",
    "get_db",
    "init_db",
    "close_db",
    "engine",
    "async_session_maker",
    "verify_password",
    "hash_password",
    "create_access_token",
    "decode_access_token",
    "APIException",
    "BadRequestException",
    "UnauthorizedException",
    "NotFoundException",
    "ConflictException",
    "ServiceUnavailableException",
    "InvalidCredentialsException",
    "CompanyNotFoundException",
    "JobNotFoundException",
    "UserNotFoundException",
    "DuplicateCompanyException",
    "DuplicateCompanyNameException",
    "DuplicateJobException",
    "DuplicateUserException",
    "DuplicateApplicationException",
    "Actor",
    "ANONYMOUS",
    "authorize",
    "is_admin",
    "is_admin_or_owner",
    "is_logged_in",
    "FilterField",
    "FilterOp",
    "FilterSpec",
    "bind_params",
    "placeholder",
    "sql_for_filters",
    "sql_for_partial_update",
]
