"""
Domain error taxonomy.

Services raise these; the exception handlers registered in app.main turn them
into flat {"message", "code"} JSON bodies with the matching HTTP status.
"""

from __future__ import annotations

from fastapi import status


class MarketplaceError(Exception):
    """Base class for every error that is safe to show to the client."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    code: str = "INTERNAL_ERROR"
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(MarketplaceError):
    status_code = status.HTTP_400_BAD_REQUEST
    code = "VALIDATION_ERROR"
    default_message = "Invalid request"


class InvalidItems(ValidationError):
    code = "INVALID_ITEMS"
    default_message = "Some dishes are invalid"


class AuthenticationRequired(MarketplaceError):
    status_code = status.HTTP_401_UNAUTHORIZED
    code = "AUTHENTICATION_REQUIRED"
    default_message = "Authentication required"


class InvalidCredentials(AuthenticationRequired):
    code = "INVALID_CREDENTIALS"
    default_message = "Invalid credentials"


class AuthorizationDenied(MarketplaceError):
    status_code = status.HTTP_403_FORBIDDEN
    code = "AUTHORIZATION_DENIED"
    default_message = "Access denied"


class NotFound(MarketplaceError):
    status_code = status.HTTP_404_NOT_FOUND
    code = "NOT_FOUND"
    default_message = "Not found"


class Conflict(MarketplaceError):
    status_code = status.HTTP_409_CONFLICT
    code = "CONFLICT"
    default_message = "Conflict"


class DuplicateEmail(Conflict):
    code = "DUPLICATE_EMAIL"
    default_message = "Email already registered"


class AlreadyFavorited(Conflict):
    code = "ALREADY_FAVORITED"
    default_message = "Restaurant already in favorites"


class InvalidTransition(Conflict):
    code = "INVALID_TRANSITION"
    default_message = "Illegal order status transition"
