"""
Blog endpoints.

CRUD operations on posts plus likes, comments and favourites.  Each
handler delegates to ``BlogService`` and turns its errors into HTTP
responses: 400 for malformed ids or parameters, 404 for missing posts
or accounts.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from ...core.errors import BlogApiError, to_http_exception
from ...schemas.blog import (
    BlogCreate,
    BlogRead,
    BlogUpdate,
    CommentCreate,
    FavouriteRequest,
    LikeCount,
    LikeRequest,
    Message,
)
from ...services import BlogService
from ..deps import get_blog_service


router = APIRouter()


@router.post("/blog", response_model=BlogRead, status_code=status.HTTP_201_CREATED)
def create_blog(
    blog: BlogCreate,
    service: BlogService = Depends(get_blog_service),
) -> BlogRead:
    """Create a post.  404 if the author account does not exist."""
    try:
        return service.create_blog(blog)
    except BlogApiError as e:
        raise to_http_exception(e) from e


@router.get("/blogs", response_model=List[BlogRead])
def list_blogs(service: BlogService = Depends(get_blog_service)) -> List[BlogRead]:
    """List every post, newest first."""
    return service.list_blogs()


@router.get("/blogs/{blog_id}", response_model=BlogRead)
def get_blog(blog_id: str, service: BlogService = Depends(get_blog_service)) -> BlogRead:
    try:
        return service.get_blog(blog_id)
    except BlogApiError as e:
        raise to_http_exception(e) from e


@router.patch("/blogs/{blog_id}", response_model=BlogRead)
def update_blog(
    blog_id: str,
    updates: BlogUpdate,
    service: BlogService = Depends(get_blog_service),
) -> BlogRead:
    """Edit a post.

    Partial updates are supported; any unspecified fields remain
    unchanged.
    """
    try:
        return service.update_blog(blog_id, updates)
    except BlogApiError as e:
        raise to_http_exception(e) from e


@router.delete("/blogs/{blog_id}", response_model=Message)
def delete_blog(blog_id: str, service: BlogService = Depends(get_blog_service)) -> Message:
    try:
        service.delete_blog(blog_id)
    except BlogApiError as e:
        raise to_http_exception(e) from e
    return Message(message="Blog deleted successfully")


@router.post("/blogs/{blog_id}/like", response_model=LikeCount)
def like_blog(
    blog_id: str,
    body: LikeRequest,
    service: BlogService = Depends(get_blog_service),
) -> LikeCount:
    """Like (``like: true``) or unlike (``like: false``) a post.

    Repeating the same request does not change the count.
    """
    try:
        count = service.set_like(blog_id, body.user_id, body.like)
    except BlogApiError as e:
        raise to_http_exception(e) from e
    return LikeCount(likes=count)


@router.post("/blogs/{blog_id}/comment", response_model=BlogRead)
def comment_blog(
    blog_id: str,
    body: CommentCreate,
    service: BlogService = Depends(get_blog_service),
) -> BlogRead:
    try:
        return service.add_comment(blog_id, body.user_id, body.comment)
    except BlogApiError as e:
        raise to_http_exception(e) from e


@router.patch("/blogs/{blog_id}/favourite", response_model=BlogRead)
def favourite_blog(
    blog_id: str,
    body: FavouriteRequest,
    service: BlogService = Depends(get_blog_service),
) -> BlogRead:
    try:
        return service.set_favourite(blog_id, body.user_id, body.is_favourite)
    except BlogApiError as e:
        raise to_http_exception(e) from e
