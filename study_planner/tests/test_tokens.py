from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest
from jose import jwt

from study_planner.application.services.tokens import JwtTokenIssuer
from study_planner.shared.config import AuthConfig
from study_planner.shared.errors.base import AuthenticationError

ISSUED_AT = datetime(2026, 3, 1, 12, 0, tzinfo=UTC)


class FakeClock:
    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock(ISSUED_AT)


@pytest.fixture()
def issuer(clock: FakeClock) -> JwtTokenIssuer:
    return JwtTokenIssuer(AuthConfig(jwt_secret="s3cret"), clock=clock)


def test_issued_token_carries_subject_and_24h_expiry(issuer: JwtTokenIssuer) -> None:
    token = issuer.issue("account-1")

    claims = jwt.get_unverified_claims(token)
    assert claims["sub"] == "account-1"
    assert claims["exp"] == int((ISSUED_AT + timedelta(hours=24)).timestamp())


@pytest.mark.parametrize("elapsed", [timedelta(0), timedelta(hours=23, minutes=59)])
def test_token_valid_within_window(
    issuer: JwtTokenIssuer, clock: FakeClock, elapsed: timedelta
) -> None:
    token = issuer.issue("account-1")
    clock.now = ISSUED_AT + elapsed

    assert issuer.validate(token) == "account-1"


def test_token_invalid_after_window(issuer: JwtTokenIssuer, clock: FakeClock) -> None:
    token = issuer.issue("account-1")
    clock.now = ISSUED_AT + timedelta(hours=24, minutes=1)

    with pytest.raises(AuthenticationError):
        issuer.validate(token)


def test_token_signed_with_other_secret_is_rejected(clock: FakeClock) -> None:
    foreign = JwtTokenIssuer(AuthConfig(jwt_secret="other"), clock=clock).issue("account-1")
    issuer = JwtTokenIssuer(AuthConfig(jwt_secret="s3cret"), clock=clock)

    with pytest.raises(AuthenticationError):
        issuer.validate(foreign)


@pytest.mark.parametrize("token", ["", "garbage", "a.b.c"])
def test_malformed_token_is_rejected(issuer: JwtTokenIssuer, token: str) -> None:
    with pytest.raises(AuthenticationError):
        issuer.validate(token)


def test_token_without_subject_is_rejected(issuer: JwtTokenIssuer) -> None:
    exp = int((ISSUED_AT + timedelta(hours=1)).timestamp())
    token = jwt.encode({"exp": exp}, "s3cret", algorithm="HS256")

    with pytest.raises(AuthenticationError):
        issuer.validate(token)


def test_missing_secret_fails_the_call_not_the_process(clock: FakeClock) -> None:
    config = AuthConfig(jwt_secret=None)
    issuer = JwtTokenIssuer(config, clock=clock)

    with pytest.raises(AuthenticationError) as exc_info:
        issuer.issue("account-1")
    assert exc_info.value.message == "JWT_SECRET not set"

    # Secret is read at call time.
    config.jwt_secret = "late"
    assert issuer.validate(issuer.issue("account-1")) == "account-1"


def test_expiry_overflow_is_an_authentication_error() -> None:
    issuer = JwtTokenIssuer(
        AuthConfig(jwt_secret="s3cret"),
        clock=lambda: datetime.max.replace(tzinfo=UTC) - timedelta(hours=1),
    )

    with pytest.raises(AuthenticationError) as exc_info:
        issuer.issue("account-1")
    assert exc_info.value.message == "Invalid expiration time"
