# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import Account, RegisteredAccount
from .exceptions import AccountAlreadyExistsError, InvalidCredentialsError
from .repositories import AccountRepository, PasswordHasher, TokenIssuer

__all__ = [
    "Account",
    "AccountAlreadyExistsError",
    "AccountRepository",
    "InvalidCredentialsError",
    "PasswordHasher",
    "RegisteredAccount",
    "TokenIssuer",
]
