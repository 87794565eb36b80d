from __future__ import annotations

import pytest
from flask import Flask
from flask.testing import FlaskClient

from userauth.app import create_app
from userauth.container import Container
from userauth.shared.config import AppConfig, AuthConfig, DatabaseConfig, SecurityConfig

TEST_SECRET = "test-secret"


@pytest.fixture()
def app_config() -> AppConfig:
    return AppConfig(
        app_env="test",
        debug_logging=False,
        log_file=None,
        database=DatabaseConfig(url="sqlite+pysqlite:///:memory:"),
        auth=AuthConfig(
            jwt_secret=TEST_SECRET,
            token_ttl_seconds=3600,
            password_hash_method="pbkdf2:sha256:1000",
        ),
        security=SecurityConfig(enable_rate_limit=False),
    )


@pytest.fixture()
def container(app_config: AppConfig) -> Container:
    return Container(app_config)


@pytest.fixture()
def app(container: Container) -> Flask:
    return create_app(container=container)


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    return app.test_client()


@pytest.fixture()
def register(client: FlaskClient):
    def _register(name: str = "Ann", email: str = "ann@x.com", password: str = "secret1"):
        return client.post("/register", json={"name": name, "email": email, "password": password})

    return _register
