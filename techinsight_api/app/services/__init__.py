"""
Service layer.

Each service encapsulates the business logic for one domain and works
against the ``Database`` handle it is constructed with, so API
handlers never touch collections directly.
"""

from .blog_service import BlogService
from .user_service import UserService

__all__ = ["BlogService", "UserService"]
