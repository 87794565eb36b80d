from __future__ import annotations

import pytest

from userauth.shared.config import AppConfig, AuthConfig, SecurityConfig

_ENV_KEYS = (
    "APP_ENV",
    "JWT_SECRET",
    "TOKEN_TTL_SECONDS",
    "ALLOWED_ORIGINS",
    "ENABLE_RATE_LIMIT",
    "ENABLE_HSTS",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


def test_auth_defaults() -> None:
    config = AuthConfig()

    assert config.jwt_algorithm == "HS256"
    assert config.token_ttl_seconds == 3600


def test_auth_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("JWT_SECRET", "from-env")
    monkeypatch.setenv("TOKEN_TTL_SECONDS", "120")

    config = AppConfig()

    assert config.auth.jwt_secret == "from-env"
    assert config.auth.token_ttl_seconds == 120


def test_security_parses_origin_list_and_flags(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ALLOWED_ORIGINS", "https://a.example, https://b.example")
    monkeypatch.setenv("ENABLE_RATE_LIMIT", "false")
    monkeypatch.setenv("ENABLE_HSTS", "yes")

    config = SecurityConfig()

    assert config.allowed_origins == ["https://a.example", "https://b.example"]
    assert config.enable_rate_limit is False
    assert config.enable_hsts is True


def test_production_rejects_insecure_secret(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("APP_ENV", "production")
    monkeypatch.setenv("JWT_SECRET", "dev-jwt-secret")

    with pytest.raises(SystemExit):
        AppConfig()


def test_production_accepts_strong_secret(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("APP_ENV", "production")
    monkeypatch.setenv("JWT_SECRET", "s3cure-random-value-with-entropy")

    config = AppConfig()

    assert config.is_production()
