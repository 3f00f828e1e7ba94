# src/common/exceptions.py
"""Domain errors raised by the service layer and rendered by the handlers in main.py."""

import functools
import logging
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)


class ServiceError(Exception):
    """Base class for every error a service function may raise on purpose."""

    status_code: int = 500
    default_message: str = "Unexpected error."

    def __init__(self, message: Optional[str] = None, detail: Optional[str] = None):
        self.message = message or self.default_message
        self.detail = detail
        super().__init__(self.message)

    def to_dict(self) -> dict:
        body = {"message": self.message}
        if self.detail:
            body["error"] = self.detail
        return body


class ValidationError(ServiceError):
    status_code = 400
    default_message = "Invalid or missing field."


class InvalidState(ValidationError):
    default_message = "Invalid state."


class AuthError(ServiceError):
    status_code = 401
    default_message = "Authentication failed."


class MissingToken(AuthError):
    default_message = "Token not provided."


class InvalidToken(AuthError):
    status_code = 403
    default_message = "Invalid or expired token."


class MalformedClaims(AuthError):
    default_message = "Token does not carry an identity."


class InvalidCredentials(AuthError):
    default_message = "Invalid username or password."


class AccessDenied(ServiceError):
    status_code = 403
    default_message = "Access denied."


class CannotReview(AccessDenied):
    status_code = 400
    default_message = "A service that has not been completed cannot be reviewed."


class NotFound(ServiceError):
    status_code = 404
    default_message = "Resource not found."


class StorageError(ServiceError):
    status_code = 500
    default_message = "Storage error."


def translate_storage_errors(message: str):
    """Wrap an async service function so storage failures surface as StorageError."""

    def decorator(func):
        @functools.wraps(func)
        async def wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except SQLAlchemyError as exc:
                logger.exception("%s: %s", message, func.__name__)
                raise StorageError(message, detail=str(exc)) from exc
        return wrapper

    return decorator
