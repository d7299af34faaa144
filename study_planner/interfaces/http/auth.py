# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import Any

from flask import g, request

from study_planner.domain.accounts.repositories import TokenIssuer
from study_planner.shared.errors.base import AuthenticationError
from study_planner.shared.logging import logger

MISSING_TOKEN_MESSAGE = "Missing bearer token"


def _bearer_token() -> str:
    header = request.headers.get("Authorization", "")
    scheme, _, token = header.partition(" ")
    if scheme.lower() != "bearer":
        return ""
    return token.strip()


def bearer_required(tokens: TokenIssuer) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Validate the bearer token and expose its subject as ``g.account_id``."""

    def decorator(view: Callable[..., Any]) -> Callable[..., Any]:
        @wraps(view)
        def inner(*args: Any, **kwargs: Any) -> Any:
            token = _bearer_token()
            if not token:
                logger.warning(f"No bearer token on {request.method} {request.path}")
                raise AuthenticationError(MISSING_TOKEN_MESSAGE)

            g.account_id = tokens.validate(token)
            logger.debug(f"Auth OK: account={g.account_id} {request.method} {request.path}")
            return view(*args, **kwargs)

        return inner

    return decorator


__all__ = ["bearer_required"]
