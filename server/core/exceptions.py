# server/core/exceptions.py

"""
Application error hierarchy.

Services raise these; the handlers in core.handlers turn them into
``{"message": ...}`` JSON responses carrying ``status_code``.
"""

from fastapi import status


class AppError(Exception):
    """Base exception for all application errors."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    error_code = "server_error"
    default_message = "Internal server error"

    def __init__(self, message=None, **details):
        self.message = message or self.default_message
        self.details = details
        super().__init__(self.message)


# -------------------------------
# Client Errors
# -------------------------------

class ValidationError(AppError):
    """Missing or malformed input."""

    status_code = status.HTTP_400_BAD_REQUEST
    error_code = "validation_error"
    default_message = "Invalid request data"


class AuthenticationError(AppError):
    """No usable credential on the request."""

    status_code = status.HTTP_401_UNAUTHORIZED
    error_code = "authentication_error"
    default_message = "Authentication required"


class InvalidTokenError(AuthenticationError):
    error_code = "invalid_token"
    default_message = "Invalid token."


class AuthorizationError(AppError):
    """Authenticated, but not allowed to touch this resource."""

    status_code = status.HTTP_403_FORBIDDEN
    error_code = "permission_denied"
    default_message = "You do not have permission"


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    error_code = "not_found"
    default_message = "Resource not found"


class ConflictError(AppError):
    """Duplicate of a unique field."""

    status_code = status.HTTP_409_CONFLICT
    error_code = "conflict"
    default_message = "Resource conflict"


# -------------------------------
# Login / engagement specifics
# -------------------------------

class UserNotFoundError(NotFoundError):
    default_message = "User not found."


class PostNotFoundError(NotFoundError):
    default_message = "Post not found."


class BadCredentialError(ValidationError):
    """Email exists but the password does not match."""

    error_code = "bad_credential"
    default_message = "Invalid password."


class AlreadyLikedError(ValidationError):
    error_code = "already_liked"
    default_message = "You have already liked this post."
