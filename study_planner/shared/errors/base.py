# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus
from typing import ClassVar


class AppError(Exception):
    """Base of the four request-scoped failure kinds.

    ``message`` is the detailed reason (logged); ``public_message`` is what the
    HTTP boundary is allowed to show to the caller.
    """

    kind: ClassVar[str] = "app_error"
    status: ClassVar[HTTPStatus] = HTTPStatus.INTERNAL_SERVER_ERROR
    redacted_message: ClassVar[str | None] = None

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    @property
    def public_message(self) -> str:
        return self.redacted_message or self.message

    def to_dict(self) -> dict[str, str]:
        return {"error": self.public_message}


class ValidationError(AppError):
    kind = "validation_error"
    status = HTTPStatus.BAD_REQUEST


class AuthenticationError(AppError):
    kind = "authentication_error"
    status = HTTPStatus.UNAUTHORIZED


class HashingError(AppError):
    kind = "hashing_error"
    status = HTTPStatus.INTERNAL_SERVER_ERROR
    redacted_message = "Password processing failed"


class DatabaseError(AppError):
    kind = "database_error"
    status = HTTPStatus.INTERNAL_SERVER_ERROR
    redacted_message = "Internal server error"


__all__ = [
    "AppError",
    "AuthenticationError",
    "DatabaseError",
    "HashingError",
    "ValidationError",
]
