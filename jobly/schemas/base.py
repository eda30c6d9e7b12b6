"""
Base schemas and common response models.
"""
from typing import Any, List, Optional
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BaseSchema(BaseModel):
    """
    Base schema with common configuration.

    Fields are snake_case in Python and camelCase on the wire.
    """

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )


class RequestSchema(BaseSchema):
    """Base for request bodies and query filters: unknown keys are rejected."""

    model_config = ConfigDict(extra="forbid")


class DeletedResponse(BaseSchema):
    """Delete confirmation."""

    deleted: str


class ErrorResponse(BaseSchema):
    """Error response format."""

    error: str
    message: str
    details: Optional[Any] = None


def format_validation_errors(errors: List[dict]) -> List[str]:
    """Flatten pydantic error dicts into ``"field: message"`` strings."""
    formatted = []
    for err in errors:
        loc = [str(part) for part in err.get("loc", ()) if part not in ("body", "query")]
        field = ".".join(loc)
        formatted.append(f"{field}: {err['msg']}" if field else err["msg"])
    return formatted
