# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from functools import cached_property

from study_planner.domain.accounts.entities import Account
from study_planner.domain.accounts.exceptions import InvalidCredentialsError
from study_planner.domain.accounts.repositories import (
    AccountRepository,
    PasswordHasher,
    TokenIssuer,
)
from study_planner.domain.accounts.rules import validate_login
from study_planner.shared.errors.base import DatabaseError
from study_planner.shared.logging import logger


class LoginAccountUseCase:
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

    @cached_property
    def _decoy_hash(self) -> str:
        # Verified against when the username is unknown, so both failure paths cost the same.
        return self._password_hasher.hash("decoy-password-for-unknown-accounts")

    def _find(self, username: str) -> Account | None:
        try:
            return self._accounts.find_by_username(username)
        except DatabaseError as exc:
            logger.warning(f"auth.login: lookup failed, reported as bad credentials: {exc.message}")
            return None

    def execute(self, username: str, password: str) -> str:
        validate_login(username, password)

        account = self._find(username)
        if account is None:
            self._password_hasher.verify(password, self._decoy_hash)
            logger.info("auth.login: invalid credentials")
            raise InvalidCredentialsError()

        if not self._password_hasher.verify(password, account.password_hash):
            logger.info(f"auth.login: invalid credentials account_id={account.id}")
            raise InvalidCredentialsError()

        token = self._tokens.issue(account.id)
        logger.info(f"auth.login: ok account_id={account.id}")
        return token
