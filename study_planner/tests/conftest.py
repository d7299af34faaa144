from __future__ import annotations

from collections.abc import Iterator

import pytest
from flask import Flask
from flask.testing import FlaskClient

from study_planner.app import create_app
from study_planner.container import Container
from study_planner.shared.config import AppConfig, AuthConfig, DatabaseConfig

TEST_SECRET = "test-signing-secret"


@pytest.fixture()
def app_config() -> AppConfig:
    return AppConfig(
        app_env="test",
        database=DatabaseConfig(url="sqlite://"),
        auth=AuthConfig(jwt_secret=TEST_SECRET),
    )


@pytest.fixture()
def app(app_config: AppConfig) -> Iterator[Flask]:
    application = create_app(app_config)
    yield application
    application.extensions["study_planner.container"].engine.dispose()


@pytest.fixture()
def container(app: Flask) -> Container:
    return app.extensions["study_planner.container"]


@pytest.fixture()
def client(app: Flask) -> Iterator[FlaskClient]:
    with app.test_client() as test_client:
        yield test_client
