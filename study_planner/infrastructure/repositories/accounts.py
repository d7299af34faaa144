# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import UTC, datetime

from sqlalchemy import or_, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from study_planner.domain.accounts.entities import Account
from study_planner.domain.accounts.exceptions import AccountAlreadyExistsError
from study_planner.domain.accounts.repositories import AccountRepository
from study_planner.infrastructure.db.models import User
from study_planner.infrastructure.db.session import SessionFactory, session_scope
from study_planner.shared.errors.base import DatabaseError


def _as_utc(value: datetime) -> datetime:
    # SQLite drops the offset on the way back.
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def _to_domain(row: User) -> Account:
    return Account(
        id=row.id,
        username=row.username,
        email=row.email,
        password_hash=row.password_hash,
        created_at=_as_utc(row.created_at),
    )


class SqlAlchemyAccountRepository(AccountRepository):
    def __init__(self, session_factory: SessionFactory):
        self._session_factory = session_factory

    def _first(self, *criteria) -> Account | None:
        try:
            with session_scope(self._session_factory) as session:
                row = session.scalars(select(User).where(*criteria).limit(1)).first()
                return _to_domain(row) if row else None
        except SQLAlchemyError as exc:
            raise DatabaseError(f"account lookup failed: {type(exc).__name__}") from exc

    def find_by_username_or_email(self, username: str, email: str) -> Account | None:
        return self._first(or_(User.username == username, User.email == email))

    def find_by_username(self, username: str) -> Account | None:
        return self._first(User.username == username)

    def find_by_id(self, account_id: str) -> Account | None:
        return self._first(User.id == account_id)

    def add(self, account: Account) -> Account:
        try:
            with session_scope(self._session_factory) as session:
                row = User(
                    id=account.id,
                    username=account.username,
                    email=account.email,
                    password_hash=account.password_hash,
                    created_at=account.created_at,
                )
                session.add(row)
        except IntegrityError as exc:
            # Unique constraints on username/email decide concurrent registrations.
            raise AccountAlreadyExistsError() from exc
        except SQLAlchemyError as exc:
            raise DatabaseError(f"account insert failed: {type(exc).__name__}") from exc
        return account
