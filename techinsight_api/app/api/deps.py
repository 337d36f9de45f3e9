"""
Dependencies shared by the endpoint modules.
"""

from fastapi import Depends

from ..core.db import Database, get_database
from ..services import BlogService, UserService


def get_user_service(database: Database = Depends(get_database)) -> UserService:
    return UserService(database)


def get_blog_service(database: Database = Depends(get_database)) -> BlogService:
    return BlogService(database, UserService(database))
