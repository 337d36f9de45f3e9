"""
Top-level router.

Aggregates the domain routers.  The public paths (``/register``,
``/blogs/{id}``, ``/search``...) are declared in the endpoint modules
themselves, so no prefixes are added here.
"""

from fastapi import APIRouter

from .endpoints import blogs, info, search, users


router = APIRouter()

router.include_router(info.router, tags=["info"])
router.include_router(users.router, tags=["users"])
router.include_router(blogs.router, tags=["blogs"])
router.include_router(search.router, tags=["search"])
