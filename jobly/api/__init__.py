"""
API package.
"""
from jobly.api.routes import api_router
from jobly.api.deps import (
    get_actor,
    require_admin,
    require_admin_or_owner,
    validate_query,
)

__all__ = [
    "api_router",
    "get_actor",
    "require_admin",
    "require_admin_or_owner",
    "validate_query",
]
