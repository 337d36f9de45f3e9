from __future__ import annotations

import unittest
from unittest import mock

import mongomock

from techinsight_api.app.core.config import settings
from techinsight_api.app.core.db import Database
from techinsight_api.app.core.errors import (
    DuplicateEmail,
    InvalidCredential,
    InvalidId,
    NotFound,
    ValidationError,
)
from techinsight_api.app.schemas.blog import BlogCreate
from techinsight_api.app.schemas.user import UserCreate
from techinsight_api.app.services import BlogService, UserService


def _user(email: str = "ada@example.com", password: str = "analytical", **overrides) -> UserCreate:
    fields = {
        "first_name": "Ada",
        "last_name": "Lovelace",
        "bio": "First programmer",
        "email": email,
        "password": password,
    }
    fields.update(overrides)
    return UserCreate(**fields)


class TestUserService(unittest.TestCase):
    def setUp(self) -> None:
        patcher = mock.patch.object(settings, "password_hash_iterations", 1000)
        patcher.start()
        self.addCleanup(patcher.stop)

        self.database = Database(client=mongomock.MongoClient(tz_aware=True), name="test")
        self.database.connect()
        self.addCleanup(self.database.close)
        self.users = UserService(self.database)
        self.blogs = BlogService(self.database, self.users)

    def test_register_stores_hash_not_password(self) -> None:
        user = self.users.register(_user())

        self.assertEqual(user.email, "ada@example.com")
        self.assertFalse(hasattr(user, "password"))
        stored = self.database.users.find_one({"email": "ada@example.com"})
        self.assertNotEqual(stored["password"], "analytical")
        self.assertTrue(stored["password"].startswith("pbkdf2_sha256$1000$"))

    def test_duplicate_email_is_rejected_and_first_account_kept(self) -> None:
        first = self.users.register(_user())

        with self.assertRaises(DuplicateEmail):
            self.users.register(_user(first_name="Impostor", password="other"))

        self.assertEqual(self.database.users.count_documents({}), 1)
        fetched = self.users.get_user(first.id)
        self.assertEqual(fetched.first_name, "Ada")
        # The original password still works.
        self.users.authenticate("ada@example.com", "analytical")

    def test_authenticate_returns_account_with_posts(self) -> None:
        user = self.users.register(_user())
        self.blogs.create_blog(BlogCreate(title="Notes", content="...", author=user.id))

        result = self.users.authenticate("ada@example.com", "analytical")

        self.assertEqual(result.id, user.id)
        self.assertEqual([b.title for b in result.blogs], ["Notes"])

    def test_authenticate_wrong_password_is_invalid_credential(self) -> None:
        self.users.register(_user())

        for attempt in ["x", "analytica", "analytical!", "ANALYTICAL", "a" * 1000]:
            with self.subTest(attempt=attempt):
                with self.assertRaises(InvalidCredential):
                    self.users.authenticate("ada@example.com", attempt)

    def test_authenticate_unknown_email_is_not_found(self) -> None:
        with self.assertRaises(NotFound):
            self.users.authenticate("nobody@example.com", "pw")

    def test_authenticate_requires_both_fields(self) -> None:
        for email, password in [(None, "pw"), ("a@example.com", None), ("", "")]:
            with self.subTest(email=email, password=password):
                with self.assertRaises(ValidationError):
                    self.users.authenticate(email, password)

    def test_list_users_joins_posts(self) -> None:
        ada = self.users.register(_user())
        grace = self.users.register(_user(email="grace@example.com", first_name="Grace"))
        self.blogs.create_blog(BlogCreate(title="Compilers", author=grace.id))

        users = self.users.list_users()

        by_id = {u.id: u for u in users}
        self.assertEqual(set(by_id), {ada.id, grace.id})
        self.assertEqual(by_id[ada.id].blogs, [])
        self.assertEqual([b.title for b in by_id[grace.id].blogs], ["Compilers"])

    def test_get_user_errors(self) -> None:
        with self.assertRaises(InvalidId):
            self.users.get_user("not-an-id")
        with self.assertRaises(NotFound):
            self.users.get_user("0123456789abcdef01234567")

    def test_get_snapshot_copies_display_fields(self) -> None:
        user = self.users.register(_user())

        snapshot = self.users.get_snapshot(user.id)

        self.assertEqual(snapshot.id, user.id)
        self.assertEqual(snapshot.first_name, "Ada")
        self.assertEqual(snapshot.email, "ada@example.com")


if __name__ == "__main__":
    unittest.main()
