"""
Business logic for user accounts.

``UserService`` registers accounts, verifies credentials and reads
profiles joined with the posts each account authored.  Passwords are
stored as PBKDF2 hashes (see ``core.security``); e-mail uniqueness is
enforced by a unique index in addition to the up-front check, so two
concurrent registrations with one address cannot both succeed.
"""

import logging
from typing import Any, Dict, List, Optional

from bson import ObjectId
from pymongo.errors import DuplicateKeyError

from ..core.db import Database, parse_object_id
from ..core.errors import DuplicateEmail, InvalidCredential, NotFound, ValidationError
from ..core.security import hash_password, verify_password
from ..schemas.blog import AuthorSnapshot
from ..schemas.user import UserCreate, UserRead, UserWithBlogs
from .documents import author_snapshot, user_from_document, user_with_blogs, utcnow


logger = logging.getLogger(__name__)


class UserService:
    """Account store backed by the ``users`` collection."""

    def __init__(self, database: Database) -> None:
        self.database = database

    def register(self, data: UserCreate) -> UserRead:
        """Create a new account and return it without the password hash.

        Raises ``DuplicateEmail`` when the e-mail is already registered.
        """
        logger.info("Registering user %s", data.email)
        users = self.database.users
        if users.find_one({"email": data.email}, {"_id": 1}) is not None:
            raise DuplicateEmail(f"Email {data.email} is already registered")
        doc = {
            "firstName": data.first_name,
            "lastName": data.last_name,
            "bio": data.bio,
            "email": data.email,
            "password": hash_password(data.password),
            "createdAt": utcnow(),
        }
        try:
            result = users.insert_one(doc)
        except DuplicateKeyError as e:
            # Lost a race with a concurrent registration for the same address.
            raise DuplicateEmail(f"Email {data.email} is already registered") from e
        doc["_id"] = result.inserted_id
        return user_from_document(doc)

    def authenticate(self, email: str, password: str) -> UserWithBlogs:
        """Verify credentials and return the account with its posts.

        Raises ``ValidationError`` if either value is missing, ``NotFound``
        if no account has the e-mail and ``InvalidCredential`` if the
        password does not match.
        """
        if not email or not password:
            raise ValidationError("Email and password are required")
        doc = self.database.users.find_one({"email": email.strip()})
        if doc is None:
            logger.debug("Login attempt for unknown email %s", email)
            raise NotFound("User not found")
        if not verify_password(password, doc.get("password")):
            logger.warning("Invalid password for %s", email)
            raise InvalidCredential("Invalid password")
        return user_with_blogs(self.database, doc)

    def list_users(self) -> List[UserWithBlogs]:
        cursor = self.database.users.find().sort("_id", 1)
        return [user_with_blogs(self.database, doc) for doc in cursor]

    def get_user(self, user_id: str) -> UserWithBlogs:
        doc = self._get_document(user_id)
        return user_with_blogs(self.database, doc)

    def get_snapshot(self, user_id: str) -> AuthorSnapshot:
        """Copy the account's display fields for embedding in a post or comment."""
        return author_snapshot(self._get_document(user_id))

    def ensure_exists(self, user_id: str) -> ObjectId:
        """Return the account's ``ObjectId``, raising ``NotFound`` if it is absent."""
        return self._get_document(user_id, projection={"_id": 1})["_id"]

    def _get_document(self, user_id: str, projection: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        oid = parse_object_id(user_id, "user id")
        doc = self.database.users.find_one({"_id": oid}, projection)
        if doc is None:
            raise NotFound("User not found")
        return doc
