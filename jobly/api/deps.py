"""
API dependencies for dependency injection.

Authorization guards run as dependencies, so a failing guard rejects the
request before the route body (and any repository call) executes.
"""
from typing import Callable, Optional, Type, TypeVar

from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from pydantic import ValidationError

from jobly.core.authorization import (
    ANONYMOUS,
    Actor,
    authorize,
    is_admin,
    is_admin_or_owner,
)
from jobly.core.exceptions import BadRequestException
from jobly.core.security import decode_access_token
from jobly.schemas.base import RequestSchema, format_validation_errors

SchemaT = TypeVar("SchemaT", bound=RequestSchema)

# Security scheme
security = HTTPBearer(auto_error=False)


async def get_actor(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Actor:
    """
    Resolve the acting user from the bearer token.

    A missing, invalid or expired token yields the anonymous actor; the
    guards below decide whether that is acceptable.
    """
    actor = ANONYMOUS

    if credentials:
        claims = decode_access_token(credentials.credentials)
        if claims:
            actor = Actor(
                username=claims["sub"],
                is_admin=bool(claims.get("is_admin", False)),
            )

    request.state.actor = actor
    return actor


async def require_admin(actor: Actor = Depends(get_actor)) -> Actor:
    """
    Raises:
        UnauthorizedException: If the actor is not an admin.
    """
    authorize(is_admin(actor), "Admin access required")
    return actor


async def require_admin_or_owner(
    username: str,
    actor: Actor = Depends(get_actor),
) -> Actor:
    """
    Guard for ``/users/{username}`` routes: admins, or the user themselves.

    Raises:
        UnauthorizedException: If the actor is neither.
    """
    authorize(is_admin_or_owner(actor, username), "Admin or account owner required")
    return actor


def validate_query(schema: Type[SchemaT]) -> Callable[[Request], SchemaT]:
    """
    Build a dependency that validates the raw query string against ``schema``.

    Unknown parameters fail validation because request schemas forbid extras.
    """

    async def dependency(request: Request) -> SchemaT:
        try:
            return schema.model_validate(dict(request.query_params))
        except ValidationError as exc:
            raise BadRequestException(
                "Invalid query parameters",
                details=format_validation_errors(exc.errors()),
            ) from exc

    return dependency
