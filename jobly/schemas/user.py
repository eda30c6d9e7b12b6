"""
User schemas.
"""
from typing import List, Optional
from pydantic import EmailStr, Field
from jobly.schemas.base import BaseSchema, RequestSchema


class UserRegister(RequestSchema):
    """Self-registration body."""

    username: str = Field(..., min_length=1, max_length=25)
    password: str = Field(..., min_length=5, max_length=20)
    first_name: str = Field(..., min_length=1, max_length=30)
    last_name: str = Field(..., min_length=1, max_length=30)
    email: EmailStr


class UserCreate(UserRegister):
    """Admin user creation body; may create other admins."""

    is_admin: bool = False


class UserUpdate(RequestSchema):
    """User partial update body. The username cannot be changed."""

    password: Optional[str] = Field(None, min_length=5, max_length=20)
    first_name: Optional[str] = Field(None, min_length=1, max_length=30)
    last_name: Optional[str] = Field(None, min_length=1, max_length=30)
    email: Optional[EmailStr] = None


class UserResponse(BaseSchema):
    """User response schema. The password hash is never included."""

    username: str
    first_name: str
    last_name: str
    email: str
    is_admin: bool = False


class UserDetail(UserResponse):
    """User with the ids of jobs applied to."""

    jobs: List[int] = []


class UserCreatedResponse(BaseSchema):
    """Admin-created user plus a token for them."""

    user: UserResponse
    token: str
