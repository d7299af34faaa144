from __future__ import annotations

from datetime import UTC, datetime
from typing import cast
from unittest.mock import MagicMock

import pytest
from flask import Flask

from study_planner.application.use_cases.accounts.login_account import LoginAccountUseCase
from study_planner.application.use_cases.accounts.register_account import (
    RegisterAccountUseCase,
)
from study_planner.domain.accounts.entities import RegisteredAccount
from study_planner.domain.accounts.exceptions import InvalidCredentialsError
from study_planner.interfaces.http.controllers.auth_controller import AuthController
from study_planner.shared.errors import register_error_handler
from study_planner.shared.errors.base import (
    AuthenticationError,
    DatabaseError,
    HashingError,
)


@pytest.fixture()
def flask_app() -> Flask:
    app = Flask(__name__)
    register_error_handler(app)
    return app


def _mount(flask_app: Flask, *, register=None, login=None) -> None:
    controller = AuthController(
        register_use_case=cast(RegisterAccountUseCase, register or MagicMock()),
        login_use_case=cast(LoginAccountUseCase, login or MagicMock()),
    )
    flask_app.register_blueprint(controller.as_blueprint())


def test_register_endpoint_returns_account_and_token(flask_app: Flask) -> None:
    register_called: dict[str, tuple[str, str, str]] = {}
    created_at = datetime(2026, 1, 2, 3, 4, 5, tzinfo=UTC)

    class StubRegister:
        def execute(self, username: str, email: str, password: str) -> RegisteredAccount:
            register_called["args"] = (username, email, password)
            return RegisteredAccount(
                id="acc-1",
                username=username,
                email=email,
                token="token123",
                created_at=created_at,
            )

    _mount(flask_app, register=StubRegister())

    with flask_app.test_client() as client:
        response = client.post(
            "/api/register",
            json={"username": "alice", "email": "alice@x.com", "password": "secret1"},
        )

    assert response.status_code == 200
    assert register_called["args"] == ("alice", "alice@x.com", "secret1")
    assert response.get_json() == {
        "id": "acc-1",
        "username": "alice",
        "email": "alice@x.com",
        "token": "token123",
        "created_at": "2026-01-02T03:04:05+00:00",
    }


def test_register_missing_field_returns_400(flask_app: Flask) -> None:
    register = MagicMock()
    _mount(flask_app, register=register)

    with flask_app.test_client() as client:
        response = client.post("/api/register", json={"username": "alice"})

    assert response.status_code == 400
    error = response.get_json()["error"]
    assert "email" in error and "password" in error
    register.execute.assert_not_called()


def test_register_non_json_body_returns_400(flask_app: Flask) -> None:
    _mount(flask_app)

    with flask_app.test_client() as client:
        response = client.post("/api/register", data="username=alice")

    assert response.status_code == 400
    assert "error" in response.get_json()


def test_register_wrong_field_type_returns_400(flask_app: Flask) -> None:
    _mount(flask_app)

    with flask_app.test_client() as client:
        response = client.post(
            "/api/register",
            json={"username": 123, "email": "alice@x.com", "password": "secret1"},
        )

    assert response.status_code == 400


@pytest.mark.parametrize(
    ("error", "status", "body"),
    [
        (DatabaseError("UNIQUE constraint failed: users.email"), 500, "Internal server error"),
        (HashingError("scrypt blew up"), 500, "Password processing failed"),
        (AuthenticationError("JWT_SECRET not set"), 401, "JWT_SECRET not set"),
    ],
)
def test_register_failures_map_to_status_and_redacted_body(
    flask_app: Flask, error: Exception, status: int, body: str
) -> None:
    register = MagicMock()
    register.execute.side_effect = error
    _mount(flask_app, register=register)

    with flask_app.test_client() as client:
        response = client.post(
            "/api/register",
            json={"username": "alice", "email": "alice@x.com", "password": "secret1"},
        )

    assert response.status_code == status
    assert response.get_json() == {"error": body}


def test_login_endpoint_returns_token_only(flask_app: Flask) -> None:
    login = MagicMock()
    login.execute.return_value = "token123"
    _mount(flask_app, login=login)

    with flask_app.test_client() as client:
        response = client.post("/api/login", json={"username": "alice", "password": "secret1"})

    assert response.status_code == 200
    assert response.get_json() == {"token": "token123"}
    login.execute.assert_called_once_with("alice", "secret1")


def test_login_invalid_credentials_returns_401(flask_app: Flask) -> None:
    login = MagicMock()
    login.execute.side_effect = InvalidCredentialsError()
    _mount(flask_app, login=login)

    with flask_app.test_client() as client:
        response = client.post("/api/login", json={"username": "alice", "password": "wrongpass"})

    assert response.status_code == 401
    assert response.get_json() == {"error": "Invalid username or password"}


def test_unexpected_error_returns_generic_500(flask_app: Flask) -> None:
    login = MagicMock()
    login.execute.side_effect = RuntimeError("boom")
    _mount(flask_app, login=login)

    with flask_app.test_client() as client:
        response = client.post("/api/login", json={"username": "alice", "password": "secret1"})

    assert response.status_code == 500
    assert response.get_json() == {"error": "Internal server error"}
