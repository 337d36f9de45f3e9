"""
MongoDB integration.

This module provides the ``Database`` handle used by every service.
The handle is constructed explicitly, connected when the application
starts and closed when it stops; request handlers receive it through
the ``get_database`` dependency instead of reaching for a module level
connection.  Tests pass their own client (e.g. ``mongomock``) so each
test case gets an isolated store.

On connect the required indexes are created: a unique index on the
user e-mail and lookup indexes for listing posts newest first and for
joining posts with their author.
"""

import logging
from typing import Any, List, Optional

from bson import ObjectId
from bson.errors import InvalidId as BsonInvalidId
from fastapi import Request
from pymongo import ASCENDING, DESCENDING, MongoClient
from pymongo.collection import Collection

from .config import Settings, settings as default_settings
from .errors import InvalidId


logger = logging.getLogger(__name__)

USERS_COLLECTION = "users"
BLOGS_COLLECTION = "blogs"


def parse_object_id(value: Any, kind: str = "id") -> ObjectId:
    """Convert a client supplied identifier to an ``ObjectId``.

    Raises ``InvalidId`` for anything that is not a 24 character hex
    string.  No database access happens here, so callers can reject a
    malformed identifier before touching the store.
    """
    if isinstance(value, ObjectId):
        return value
    if not isinstance(value, str):
        raise InvalidId(f"Invalid {kind}: expected a string identifier")
    try:
        return ObjectId(value)
    except (BsonInvalidId, TypeError) as e:
        raise InvalidId(f"Invalid {kind}: {value!r}") from e


class Database:
    """Explicitly managed handle to the blog database."""

    def __init__(
        self,
        uri: Optional[str] = None,
        name: str = "techinsight",
        client: Optional[Any] = None,
        timeout_ms: int = 5000,
    ) -> None:
        self.uri = uri
        self.name = name
        self.timeout_ms = timeout_ms
        self._client = client
        # Clients handed in by the caller are theirs to close.
        self._owns_client = client is None
        self._db = None

    @classmethod
    def from_settings(cls, settings: Settings = default_settings) -> "Database":
        return cls(
            uri=settings.mongodb_uri,
            name=settings.db_name,
            timeout_ms=settings.mongodb_timeout_ms,
        )

    def __enter__(self) -> "Database":
        self.connect()
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    @property
    def is_connected(self) -> bool:
        return self._db is not None

    def connect(self) -> None:
        """Open the client (if needed), select the database and ensure indexes."""
        if self._db is not None:
            return
        if self._client is None:
            self._client = MongoClient(
                self.uri, serverSelectionTimeoutMS=self.timeout_ms, tz_aware=True
            )
        db = self._client[self.name]
        # Only a database with its indexes in place counts as connected.
        self.ensure_indexes(db)
        self._db = db
        logger.info("Connected to MongoDB database '%s'", self.name)

    def close(self) -> None:
        if self._db is None:
            return
        if self._owns_client and self._client is not None:
            self._client.close()
            self._client = None
        self._db = None
        logger.info("Closed MongoDB database '%s'", self.name)

    def ensure_indexes(self, db=None) -> None:
        db = self._require() if db is None else db
        db[USERS_COLLECTION].create_index([("email", ASCENDING)], unique=True)
        db[BLOGS_COLLECTION].create_index([("createdAt", DESCENDING)])
        db[BLOGS_COLLECTION].create_index([("author.id", ASCENDING)])

    def _require(self):
        if self._db is None:
            raise RuntimeError("Database is not connected; call connect() first")
        return self._db

    @property
    def users(self) -> Collection:
        return self._require()[USERS_COLLECTION]

    @property
    def blogs(self) -> Collection:
        return self._require()[BLOGS_COLLECTION]

    def collection_names(self) -> List[str]:
        """Round-trip to the server; used by the health endpoint."""
        return self._require().list_collection_names()


def get_database(request: Request) -> Database:
    """FastAPI dependency returning the handle stored on the application."""
    return request.app.state.database
