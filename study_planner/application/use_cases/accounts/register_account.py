# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import uuid
from datetime import UTC, datetime

from study_planner.domain.accounts.entities import Account, RegisteredAccount
from study_planner.domain.accounts.exceptions import AccountAlreadyExistsError
from study_planner.domain.accounts.repositories import (
    AccountRepository,
    PasswordHasher,
    TokenIssuer,
)
from study_planner.domain.accounts.rules import validate_registration
from study_planner.shared.logging import logger


class RegisterAccountUseCase:
    def __init__(
        self,
        *,
        accounts: AccountRepository,
        tokens: TokenIssuer,
        password_hasher: PasswordHasher,
    ) -> None:
        self._accounts = accounts
        self._tokens = tokens
        self._password_hasher = password_hasher

    def execute(self, username: str, email: str, password: str) -> RegisteredAccount:
        validate_registration(username, email, password)

        # Pre-check only; the store's unique constraints have the final word in add().
        if self._accounts.find_by_username_or_email(username, email) is not None:
            logger.info("auth.register: rejected, username or email taken")
            raise AccountAlreadyExistsError()

        account = Account(
            id=str(uuid.uuid4()),
            username=username,
            email=email,
            password_hash=self._password_hasher.hash(password),
            created_at=datetime.now(UTC),
        )
        persisted = self._accounts.add(account)
        token = self._tokens.issue(persisted.id)

        logger.info(f"auth.register: ok account_id={persisted.id}")
        return RegisteredAccount(
            id=persisted.id,
            username=persisted.username,
            email=persisted.email,
            token=token,
            created_at=persisted.created_at,
        )
