"""
Error taxonomy for Jobly.

Everything a caller can cause derives from APIException and is rendered by
the handler in ``jobly.main`` as ``{"error": code, "message", "details"}``.
Subclasses only pick a status, a machine-readable code and a message.
"""
from typing import Any, Optional


class APIException(Exception):
    status_code: int = 500
    code: str = "INTERNAL_ERROR"
    message: str = "Internal error"

    def __init__(
        self,
        message: Optional[str] = None,
        code: Optional[str] = None,
        details: Optional[Any] = None,
    ):
        self.message = message or self.message
        self.code = code or self.code
        self.details = details
        super().__init__(self.message)


class BadRequestException(APIException):
    """400: malformed, empty or contradictory input."""

    status_code = 400
    code = "BAD_REQUEST"
    message = "Bad request"


class UnauthorizedException(APIException):
    """401: an authorization predicate failed."""

    status_code = 401
    code = "UNAUTHORIZED"
    message = "Unauthorized"


class NotFoundException(APIException):
    status_code = 404
    code = "NOT_FOUND"
    message = "Resource not found"


class ConflictException(APIException):
    """409: the natural key is already taken."""

    status_code = 409
    code = "CONFLICT"
    message = "Resource conflict"


class ServiceUnavailableException(APIException):
    status_code = 503
    code = "SERVICE_UNAVAILABLE"
    message = "Database unavailable"


class InvalidCredentialsException(UnauthorizedException):
    code = "INVALID_CREDENTIALS"
    message = "Invalid username/password"


# Not found, per entity

class CompanyNotFoundException(NotFoundException):
    code = "COMPANY_NOT_FOUND"

    def __init__(self, handle: Any):
        super().__init__(f"No company: {handle}")


class JobNotFoundException(NotFoundException):
    code = "JOB_NOT_FOUND"

    def __init__(self, job_id: Any):
        super().__init__(f"No job with id: {job_id}")


class UserNotFoundException(NotFoundException):
    code = "USER_NOT_FOUND"

    def __init__(self, username: Any):
        super().__init__(f"No user: {username}")


# Duplicates

class DuplicateCompanyException(ConflictException):
    code = "COMPANY_EXISTS"

    def __init__(self, handle: str):
        super().__init__(f"Duplicate company: {handle}")


class DuplicateCompanyNameException(ConflictException):
    code = "COMPANY_NAME_EXISTS"

    def __init__(self, name: str):
        super().__init__(f"Duplicate company name: {name}")


class DuplicateJobException(ConflictException):
    code = "JOB_EXISTS"

    def __init__(self, title: str, company_handle: str):
        super().__init__(f"Duplicate job: {title} at {company_handle}")


class DuplicateUserException(ConflictException):
    code = "USERNAME_EXISTS"

    def __init__(self, username: str):
        super().__init__(f"Duplicate username: {username}")


class DuplicateApplicationException(ConflictException):
    code = "ALREADY_APPLIED"

    def __init__(self, username: str, job_id: Any):
        super().__init__(f"{username} already applied to job {job_id}")
