"""
Rate limiting configuration using slowapi.

Storage defaults to in-process memory; point RATE_LIMIT_STORAGE_URI at a
shared backend when running several workers.
"""
from slowapi import Limiter
from slowapi.util import get_remote_address
from starlette.requests import Request

from jobly.core.config import settings


def _get_actor_or_ip(request: Request) -> str:
    """
    Rate-limit key: the token's username if one was resolved, otherwise client IP.

    Login and register are anonymous, so in practice they are limited per IP.
    """
    actor = getattr(request.state, "actor", None)
    if actor is not None and actor.username:
        return actor.username
    return get_remote_address(request)


limiter = Limiter(
    key_func=_get_actor_or_ip,
    storage_uri=settings.rate_limit_storage_uri,
    strategy="fixed-window",
    enabled=settings.rate_limit_enabled,
)

# Rate limit strings for route decorators:
#   @limiter.limit(RATE_AUTH)
RATE_AUTH = "5/minute"  # token, register: brute-force protection
