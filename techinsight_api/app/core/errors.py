"""
Error taxonomy shared by the services and the API layer.

Services raise these exceptions; endpoints translate them into
``HTTPException`` responses with the matching status code.
"""

from fastapi import HTTPException, status


class BlogApiError(Exception):
    """Base class for all expected failures of a request."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(BlogApiError):
    """Missing or malformed input."""

    status_code = status.HTTP_400_BAD_REQUEST


class InvalidId(ValidationError):
    """An identifier that is not a valid ObjectId string."""


class InvalidParameter(ValidationError):
    """A parameter of the wrong type, such as a non-boolean like flag."""


class NotFound(BlogApiError):
    status_code = status.HTTP_404_NOT_FOUND


class InvalidCredential(BlogApiError):
    status_code = status.HTTP_401_UNAUTHORIZED


class DuplicateEmail(BlogApiError):
    status_code = status.HTTP_409_CONFLICT


def to_http_exception(exc: BlogApiError) -> HTTPException:
    """Translate a service error into the response the client receives."""
    return HTTPException(status_code=exc.status_code, detail=exc.message)
