# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Stateless bearer tokens (HS256 JWT)."""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from typing import Any

from jose import jwt
from jose.exceptions import JOSEError

from study_planner.domain.accounts.repositories import TokenIssuer
from study_planner.shared.config import AuthConfig
from study_planner.shared.errors.base import AuthenticationError

TOKEN_ALGORITHM = "HS256"
TOKEN_TTL = timedelta(hours=24)
INVALID_TOKEN_MESSAGE = "Invalid or expired token"


def _utcnow() -> datetime:
    return datetime.now(UTC)


class JwtTokenIssuer(TokenIssuer):
    def __init__(
        self,
        config: AuthConfig,
        *,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._config = config
        self._clock = clock

    def _secret(self) -> str:
        secret = self._config.jwt_secret
        if not secret:
            raise AuthenticationError("JWT_SECRET not set")
        return secret

    def issue(self, subject_id: str) -> str:
        try:
            expires_at = self._clock() + TOKEN_TTL
        except OverflowError as exc:
            raise AuthenticationError("Invalid expiration time") from exc

        claims = {"sub": subject_id, "exp": int(expires_at.timestamp())}
        try:
            return jwt.encode(claims, self._secret(), algorithm=TOKEN_ALGORITHM)
        except JOSEError as exc:
            raise AuthenticationError(str(exc)) from exc

    def validate(self, token: str) -> str:
        secret = self._secret()
        try:
            # Expiry is checked below against the injected clock.
            claims: dict[str, Any] = jwt.decode(
                token,
                secret,
                algorithms=[TOKEN_ALGORITHM],
                options={"verify_exp": False},
            )
        except JOSEError as exc:
            raise AuthenticationError(INVALID_TOKEN_MESSAGE) from exc

        subject = claims.get("sub")
        expires_at = claims.get("exp")
        if not isinstance(subject, str) or not subject:
            raise AuthenticationError(INVALID_TOKEN_MESSAGE)
        if not isinstance(expires_at, int) or isinstance(expires_at, bool):
            raise AuthenticationError(INVALID_TOKEN_MESSAGE)
        if expires_at < self._clock().timestamp():
            raise AuthenticationError(INVALID_TOKEN_MESSAGE)
        return subject
