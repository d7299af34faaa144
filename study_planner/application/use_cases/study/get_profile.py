# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from study_planner.application.services.tokens import INVALID_TOKEN_MESSAGE
from study_planner.domain.accounts.entities import Account
from study_planner.domain.accounts.repositories import AccountRepository
from study_planner.shared.errors.base import AuthenticationError


class GetProfileUseCase:
    def __init__(self, accounts: AccountRepository) -> None:
        self._accounts = accounts

    def execute(self, account_id: str) -> Account:
        account = self._accounts.find_by_id(account_id)
        if account is None:
            # A well-signed token for an account that no longer resolves.
            raise AuthenticationError(INVALID_TOKEN_MESSAGE)
        return account


__all__ = ["GetProfileUseCase"]
