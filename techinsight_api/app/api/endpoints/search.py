"""
Search endpoint.

Matches the query case-insensitively against post titles and tags.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from ...schemas.blog import BlogRead
from ...services import BlogService
from ..deps import get_blog_service


router = APIRouter()


@router.get("/search", response_model=List[BlogRead])
def search_blogs(
    query: Optional[str] = Query(None, description="Text to look for in titles and tags"),
    service: BlogService = Depends(get_blog_service),
) -> List[BlogRead]:
    """Return posts whose title or a tag contains ``query``.

    Without a query every post is returned, newest first.
    """
    return service.search(query)
