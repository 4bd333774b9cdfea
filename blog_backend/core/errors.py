"""
Error taxonomy for the blog backend.

Every domain failure is a BlogError carrying an HTTP-equivalent status code
and an optional structured payload. The REST and GraphQL formatters turn
these into `{message, data}` / `{message, status, data}` bodies.

Guards with a fixed meaning raise the typed subclasses directly.
`raise_error` is the entry point when only a status code is at hand.
"""

# Standard library imports
from typing import Any, Dict, NoReturn, Optional, Type

DEFAULT_ERROR_MESSAGE = "An error occurred"


class BlogError(Exception):
    """Base exception for all domain errors."""

    status_code: int = 500

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        data: Optional[Any] = None,
    ):
        super().__init__(message)
        self.message = message or DEFAULT_ERROR_MESSAGE
        if status_code is not None:
            self.status_code = status_code
        self.data = data


class ValidationError(BlogError):
    """Raised when request input is malformed."""

    status_code = 422


class AuthenticationError(BlogError):
    """Raised when a protected operation has no valid identity."""

    status_code = 401


class AuthorizationError(BlogError):
    """Raised when the caller does not own the resource."""

    status_code = 401


class ConflictError(BlogError):
    """Raised when the resource already exists."""

    status_code = 403


class NotFoundError(BlogError):
    """Raised when the requested resource does not exist."""

    status_code = 404


class UnknownError(BlogError):
    status_code = 500


# 401 maps to AuthenticationError; owner checks raise AuthorizationError directly
_ERRORS_BY_STATUS: Dict[int, Type[BlogError]] = {
    422: ValidationError,
    401: AuthenticationError,
    403: ConflictError,
    404: NotFoundError,
    500: UnknownError,
}


def raise_error(message: str, status_code: int = 500, data: Optional[Any] = None) -> NoReturn:
    """
    Raise the BlogError subclass matching status_code.

    Always raises. Unlisted status codes produce a plain BlogError
    carrying that code.
    """
    error_class = _ERRORS_BY_STATUS.get(status_code, BlogError)
    raise error_class(message, status_code=status_code, data=data)


def error_body(error: BaseException) -> Dict[str, Any]:
    """Uniform `{message, data}` body for a raised error."""
    if isinstance(error, BlogError):
        return {"message": error.message, "data": error.data}
    return {"message": DEFAULT_ERROR_MESSAGE, "data": None}