# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from study_planner.shared.errors.base import AuthenticationError, ValidationError

ACCOUNT_CONFLICT_MESSAGE = "Username or email already exists."
INVALID_CREDENTIALS_MESSAGE = "Invalid username or password"


class AccountAlreadyExistsError(ValidationError):
    def __init__(self) -> None:
        super().__init__(ACCOUNT_CONFLICT_MESSAGE)


class InvalidCredentialsError(AuthenticationError):
    def __init__(self) -> None:
        super().__init__(INVALID_CREDENTIALS_MESSAGE)
