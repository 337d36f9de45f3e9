"""
Account endpoints.

Provide registration, login, listing and profile lookup.  Login checks
the credentials and returns the account with its posts; no token is
issued.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from ...core.errors import BlogApiError, to_http_exception
from ...schemas.user import UserCreate, UserLogin, UserRead, UserWithBlogs
from ...services import UserService
from ..deps import get_user_service


router = APIRouter()


@router.post("/register", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def register_user(
    user: UserCreate,
    service: UserService = Depends(get_user_service),
) -> UserRead:
    """Register a new account.

    Returns 409 when the e-mail is already taken.
    """
    try:
        return service.register(user)
    except BlogApiError as e:
        raise to_http_exception(e) from e


@router.post("/login", response_model=UserWithBlogs)
def login_user(
    credentials: UserLogin,
    service: UserService = Depends(get_user_service),
) -> UserWithBlogs:
    """Check e-mail and password and return the account with its posts.

    400 if either value is missing, 404 for an unknown e-mail and 401
    for a wrong password.
    """
    try:
        return service.authenticate(credentials.email, credentials.password)
    except BlogApiError as e:
        raise to_http_exception(e) from e


@router.get("/users", response_model=List[UserWithBlogs])
def list_users(service: UserService = Depends(get_user_service)) -> List[UserWithBlogs]:
    return service.list_users()


# The original clients fetched profiles from ``/users/{id}``; newer ones
# use ``/profile/{id}``.  Both paths serve the same handler.
@router.get("/profile/{user_id}", response_model=UserWithBlogs)
@router.get("/users/{user_id}", response_model=UserWithBlogs, include_in_schema=False)
def get_profile(
    user_id: str,
    service: UserService = Depends(get_user_service),
) -> UserWithBlogs:
    """Return one account joined with the posts it authored."""
    try:
        return service.get_user(user_id)
    except BlogApiError as e:
        raise to_http_exception(e) from e
