"""
Pydantic models for user accounts.

Passwords are accepted on registration and login only; no response
schema has a password field, so hashes never leave the service.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import Field, field_validator

from .base import CamelModel, IdStr
from .blog import BlogRead


class UserBase(CamelModel):
    first_name: str = Field(..., min_length=1, examples=["Ada"])
    last_name: str = Field(..., min_length=1, examples=["Lovelace"])
    bio: str = Field("", examples=["Writes about analytical engines."])
    email: str = Field(..., min_length=3, examples=["ada@example.com"])

    @field_validator("email")
    @classmethod
    def normalise_email(cls, v: str) -> str:
        v = v.strip()
        if "@" not in v:
            raise ValueError("Email must contain '@'")
        return v


class UserCreate(UserBase):
    """Schema for registering a user."""

    password: str = Field(..., min_length=1, examples=["strongpassword"])


class UserLogin(CamelModel):
    """Schema for logging in.

    Both fields are optional at the schema level so a missing value
    produces the API's own "Email and password are required" message.
    """

    email: Optional[str] = None
    password: Optional[str] = None


class UserRead(UserBase):
    """Schema for reading a user from the API."""

    id: IdStr
    created_at: Optional[datetime] = None


class UserWithBlogs(UserRead):
    """A user joined with the posts they authored, newest first."""

    blogs: List[BlogRead] = Field(default_factory=list)
