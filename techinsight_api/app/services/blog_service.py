"""
Business logic for blog posts.

``BlogService`` creates, reads, edits and deletes posts and manages
their engagement data.  Authors and commenters are embedded as
``AuthorSnapshot`` copies taken at write time, so later profile edits
do not rewrite history.

Likes and favourites are sets of account ids.  Membership changes are
sent as a single ``$addToSet``/``$pull`` update so the database applies
them atomically per document; two concurrent toggles on one post can
not overwrite each other the way a read, modify in memory, write back
sequence would.
"""

import logging
import re
from typing import Any, Dict, List, Optional

from bson import ObjectId
from pymongo import ReturnDocument

from ..core.db import Database, parse_object_id
from ..core.errors import InvalidParameter, NotFound, ValidationError
from ..schemas.blog import BlogCreate, BlogRead, BlogUpdate
from .documents import (
    BLOG_SORT,
    blog_from_document,
    snapshot_document,
    utcnow,
)
from .user_service import UserService


logger = logging.getLogger(__name__)


def _require_bool(value: Any, name: str) -> bool:
    if not isinstance(value, bool):
        raise InvalidParameter(f"'{name}' must be a boolean")
    return value


class BlogService:
    """Content store backed by the ``blogs`` collection."""

    def __init__(self, database: Database, users: UserService) -> None:
        self.database = database
        self.users = users

    def create_blog(self, data: BlogCreate) -> BlogRead:
        """Create a post authored by ``data.author``.

        The author must exist: their display fields are copied into the
        post.  Engagement fields start empty.
        """
        author = self.users.get_snapshot(data.author)
        doc = {
            "title": data.title,
            "content": data.content,
            "thumbnail": data.thumbnail,
            "author": snapshot_document(author),
            "tags": list(data.tags),
            "createdAt": utcnow(),
            "isFavourite": data.is_favourite,
            "favouritedBy": [],
            "likes": [],
            "comments": [],
        }
        result = self.database.blogs.insert_one(doc)
        doc["_id"] = result.inserted_id
        logger.info("User %s created blog %s '%s'", author.id, result.inserted_id, data.title)
        return blog_from_document(doc)

    def list_blogs(self) -> List[BlogRead]:
        """Return all posts, newest first."""
        return [blog_from_document(doc) for doc in self.database.blogs.find().sort(BLOG_SORT)]

    def get_blog(self, blog_id: str) -> BlogRead:
        oid = parse_object_id(blog_id, "blog id")
        doc = self.database.blogs.find_one({"_id": oid})
        if doc is None:
            raise NotFound("Blog not found")
        return blog_from_document(doc)

    def update_blog(self, blog_id: str, updates: BlogUpdate) -> BlogRead:
        """Apply the provided fields of ``updates`` to a post.

        The identifier is validated before the database is consulted.
        An update without fields returns the post unchanged.
        """
        oid = parse_object_id(blog_id, "blog id")
        fields = {
            key: value
            for key, value in updates.model_dump(exclude_unset=True, by_alias=True).items()
            if value is not None
        }
        if not fields:
            return self.get_blog(blog_id)
        doc = self.database.blogs.find_one_and_update(
            {"_id": oid},
            {"$set": fields},
            return_document=ReturnDocument.AFTER,
        )
        if doc is None:
            raise NotFound("Blog not found")
        logger.info("Updated blog %s fields %s", blog_id, sorted(fields))
        return blog_from_document(doc)

    def delete_blog(self, blog_id: str) -> None:
        oid = parse_object_id(blog_id, "blog id")
        result = self.database.blogs.delete_one({"_id": oid})
        if result.deleted_count == 0:
            raise NotFound("Blog not found")
        logger.info("Deleted blog %s", blog_id)

    def set_like(self, blog_id: str, user_id: str, like: Any) -> int:
        """Add or remove ``user_id`` from the post's likes; return the like count.

        Liking twice or unliking a post that was never liked is a no-op.
        """
        like = _require_bool(like, "like")
        oid = parse_object_id(blog_id, "blog id")
        user_oid = self.users.ensure_exists(user_id)
        operator = "$addToSet" if like else "$pull"
        doc = self._update_engagement(oid, {operator: {"likes": user_oid}}, {"likes": 1})
        logger.info("User %s %s blog %s", user_id, "liked" if like else "unliked", blog_id)
        return len(doc.get("likes", []))

    def add_comment(self, blog_id: str, user_id: str, text: str) -> BlogRead:
        """Append a comment carrying a snapshot of the commenter."""
        if not isinstance(text, str) or not text.strip():
            raise ValidationError("Comment text is required")
        oid = parse_object_id(blog_id, "blog id")
        author = self.users.get_snapshot(user_id)
        comment = {
            "id": ObjectId(),
            "author": snapshot_document(author),
            "text": text.strip(),
            "createdAt": utcnow(),
        }
        doc = self._update_engagement(oid, {"$push": {"comments": comment}})
        logger.info("User %s commented on blog %s", user_id, blog_id)
        return blog_from_document(doc)

    def set_favourite(self, blog_id: str, user_id: str, is_favourite: Any) -> BlogRead:
        """Set the post's favourite flag and add or remove ``user_id`` from ``favouritedBy``."""
        is_favourite = _require_bool(is_favourite, "isFavourite")
        oid = parse_object_id(blog_id, "blog id")
        user_oid = self.users.ensure_exists(user_id)
        operator = "$addToSet" if is_favourite else "$pull"
        doc = self._update_engagement(
            oid,
            {"$set": {"isFavourite": is_favourite}, operator: {"favouritedBy": user_oid}},
        )
        return blog_from_document(doc)

    def search(self, query: Optional[str]) -> List[BlogRead]:
        """Case-insensitive substring search over titles and tags.

        The query is matched literally (regex metacharacters are escaped).
        An empty or missing query returns every post.
        """
        term = (query or "").strip()
        if not term:
            return self.list_blogs()
        pattern = re.compile(re.escape(term), re.IGNORECASE)
        cursor = self.database.blogs.find({"$or": [{"title": pattern}, {"tags": pattern}]}).sort(BLOG_SORT)
        return [blog_from_document(doc) for doc in cursor]

    def _update_engagement(
        self,
        oid: ObjectId,
        update: Dict[str, Any],
        projection: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        doc = self.database.blogs.find_one_and_update(
            {"_id": oid},
            update,
            projection=projection,
            return_document=ReturnDocument.AFTER,
        )
        if doc is None:
            raise NotFound("Blog not found")
        return doc
