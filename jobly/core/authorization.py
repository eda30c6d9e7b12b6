"""
Authorization predicates.

Pure decisions over the acting user and the target resource. Route guards in
``jobly.api.deps`` evaluate them before any repository call is made.
"""
from dataclasses import dataclass
from typing import Optional

from jobly.core.exceptions import UnauthorizedException


@dataclass(frozen=True)
class Actor:
    """Identity carried by the request token; username is None when anonymous."""

    username: Optional[str] = None
    is_admin: bool = False


ANONYMOUS = Actor()


def is_logged_in(actor: Actor) -> bool:
    return actor.username is not None


def is_admin(actor: Actor) -> bool:
    return is_logged_in(actor) and actor.is_admin


def is_admin_or_owner(actor: Actor, username: str) -> bool:
    """True for admins, and for a logged-in user acting on their own account."""
    if is_admin(actor):
        return True
    return is_logged_in(actor) and actor.username == username


def authorize(allowed: bool, message: str = "Unauthorized") -> None:
    """Raise UnauthorizedException unless ``allowed``."""
    if not allowed:
        raise UnauthorizedException(message)
