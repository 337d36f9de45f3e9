"""
Pydantic models for blog posts and their engagement data.

Posts embed an ``AuthorSnapshot`` of their author, and every comment
embeds an ``AuthorSnapshot`` of the commenter.  Snapshots are copied
from the account when the post or comment is written and are never
refreshed afterwards: they describe the account as it was at that
moment, not as it is now.  Fetch ``/profile/{id}`` for the live
account.

Boolean flags (``isFavourite``, ``like``) are strict: ``"true"`` or
``1`` are rejected rather than coerced.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import ConfigDict, Field, StrictBool, field_validator

from .base import CamelModel, IdStr


class AuthorSnapshot(CamelModel):
    """Point-in-time copy of an account's displayable fields."""

    model_config = ConfigDict(frozen=True)

    id: IdStr = Field(..., description="Identifier of the account the snapshot was taken from")
    first_name: str = ""
    last_name: str = ""
    bio: str = ""
    email: str = ""


class CommentSnapshot(CamelModel):
    """A comment together with a snapshot of its author at write time."""

    model_config = ConfigDict(frozen=True)

    id: IdStr
    author: AuthorSnapshot = Field(..., description="Commenter as they were when the comment was written")
    text: str
    created_at: datetime


class BlogBase(CamelModel):
    title: str = Field(..., min_length=1, examples=["Getting started with FastAPI"])
    content: str = Field("", examples=["FastAPI is a modern web framework..."])
    thumbnail: Optional[str] = Field(None, examples=["https://example.com/thumb.png"])
    tags: List[str] = Field(default_factory=list, examples=[["python", "tech"]])
    is_favourite: StrictBool = False


class BlogCreate(BlogBase):
    """Schema for creating a post.  ``author`` is the author's account id."""

    author: str = Field(..., examples=["64b7f0c2a1b2c3d4e5f60718"])


class BlogUpdate(CamelModel):
    """Schema for editing a post.

    All fields are optional; only provided, non-null fields are applied.
    """

    title: Optional[str] = Field(None, min_length=1)
    content: Optional[str] = None
    thumbnail: Optional[str] = None
    tags: Optional[List[str]] = None
    is_favourite: Optional[StrictBool] = None


class BlogRead(BlogBase):
    """Schema for reading a post from the API."""

    id: IdStr
    author: AuthorSnapshot = Field(..., description="Author as they were when the post was created")
    created_at: datetime
    favourited_by: List[IdStr] = Field(default_factory=list)
    likes: List[IdStr] = Field(default_factory=list)
    comments: List[CommentSnapshot] = Field(default_factory=list)


class LikeRequest(CamelModel):
    user_id: str
    like: StrictBool


class LikeCount(CamelModel):
    likes: int


class CommentCreate(CamelModel):
    user_id: str
    comment: str = Field(..., min_length=1)

    @field_validator("comment")
    @classmethod
    def strip_comment(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Comment must not be blank")
        return v


class FavouriteRequest(CamelModel):
    user_id: str
    is_favourite: StrictBool


class Message(CamelModel):
    message: str
