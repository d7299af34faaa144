from .base import AppError, AuthenticationError, DatabaseError, HashingError, ValidationError
from .http import error_response, register_error_handler

__all__ = [
    "AppError",
    "AuthenticationError",
    "DatabaseError",
    "HashingError",
    "ValidationError",
    "error_response",
    "register_error_handler",
]
