# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True, frozen=True)
class Account:
    """Stored account record, including the salted password hash."""

    id: str
    username: str
    email: str
    password_hash: str
    created_at: datetime


@dataclass(slots=True, frozen=True)
class RegisteredAccount:
    """Outward view of a freshly registered account. Carries no password hash."""

    id: str
    username: str
    email: str
    token: str
    created_at: datetime
