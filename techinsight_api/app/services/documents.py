"""
Mapping between stored MongoDB documents and API schemas.

Stored documents use ``_id`` and ``ObjectId`` references; the API
exposes plain string ``id`` values and never the password hash.  The
post lookup by author lives here too because both services need it:
the account endpoints join accounts with their posts through it.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from bson import ObjectId
from pymongo import DESCENDING

from ..core.db import Database
from ..schemas.blog import AuthorSnapshot, BlogRead
from ..schemas.user import UserRead, UserWithBlogs


# Newest first; ``_id`` breaks ties between posts created in the same millisecond.
BLOG_SORT = [("createdAt", DESCENDING), ("_id", DESCENDING)]


def utcnow() -> datetime:
    """Current UTC time at the millisecond precision MongoDB stores.

    Truncating up front makes the value returned by a write identical to
    the one later read back.
    """
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


def to_public(doc: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    """Rename ``_id`` to ``id`` and drop the password hash."""
    if not doc:
        return doc
    d = {**doc}
    _id = d.pop("_id", None)
    if _id is not None:
        d["id"] = str(_id)
    d.pop("password", None)
    return d


def author_snapshot(user_doc: Dict[str, Any]) -> AuthorSnapshot:
    return AuthorSnapshot(
        id=str(user_doc["_id"]),
        first_name=user_doc.get("firstName", ""),
        last_name=user_doc.get("lastName", ""),
        bio=user_doc.get("bio", ""),
        email=user_doc.get("email", ""),
    )


def snapshot_document(snapshot: AuthorSnapshot) -> Dict[str, Any]:
    """Embedded form of a snapshot; the account id is kept as an ``ObjectId``."""
    doc = snapshot.model_dump(by_alias=True)
    doc["id"] = ObjectId(snapshot.id)
    return doc


def blog_from_document(doc: Dict[str, Any]) -> BlogRead:
    return BlogRead.model_validate(to_public(doc))


def user_from_document(doc: Dict[str, Any]) -> UserRead:
    return UserRead.model_validate(to_public(doc))


def find_blogs_by_author(database: Database, author_id: ObjectId) -> List[BlogRead]:
    cursor = database.blogs.find({"author.id": author_id}).sort(BLOG_SORT)
    return [blog_from_document(doc) for doc in cursor]


def user_with_blogs(database: Database, doc: Dict[str, Any]) -> UserWithBlogs:
    public = to_public(doc)
    public["blogs"] = find_blogs_by_author(database, doc["_id"])
    return UserWithBlogs.model_validate(public)
