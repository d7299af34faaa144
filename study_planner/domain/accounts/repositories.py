# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Protocol

from .entities import Account


class AccountRepository(Protocol):
    def find_by_username_or_email(self, username: str, email: str) -> Account | None: ...
    def find_by_username(self, username: str) -> Account | None: ...
    def find_by_id(self, account_id: str) -> Account | None: ...
    def add(self, account: Account) -> Account: ...


class PasswordHasher(Protocol):
    def hash(self, password: str) -> str: ...
    def verify(self, password: str, hashed: str) -> bool: ...


class TokenIssuer(Protocol):
    def issue(self, subject_id: str) -> str: ...
    def validate(self, token: str) -> str: ...
