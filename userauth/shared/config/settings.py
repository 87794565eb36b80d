# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

import sys
from functools import lru_cache
from pathlib import Path
from typing import Annotated

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

_INSECURE_SECRETS = ("dev", "development", "test", "change-me", "dev-jwt-secret", "")
_MIN_SECRET_LENGTH = 32


def _settings_config() -> SettingsConfigDict:
    return SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        validate_by_name=True,
    )


def _parse_bool(value: str | bool) -> bool:
    if isinstance(value, str):
        return value.lower() in ("1", "true", "yes")
    return bool(value)


class DatabaseConfig(BaseSettings):
    url: str = Field("sqlite:///userauth.db", alias="DATABASE_URL")
    pool_size: int = Field(10, ge=1, alias="DATABASE_POOL_SIZE")
    max_overflow: int = Field(5, ge=0, alias="DATABASE_MAX_OVERFLOW")
    pool_timeout: float = Field(30.0, ge=0.1, alias="DATABASE_POOL_TIMEOUT")

    model_config = _settings_config()


class AuthConfig(BaseSettings):
    """Token signing and credential policy, shared read-only by the auth components."""

    jwt_secret: str = Field("dev-jwt-secret", alias="JWT_SECRET")
    jwt_algorithm: str = Field("HS256", alias="JWT_ALGORITHM")
    token_ttl_seconds: int = Field(3600, ge=1, alias="TOKEN_TTL_SECONDS")
    password_hash_method: str = Field("scrypt", alias="PASSWORD_HASH_METHOD")

    model_config = _settings_config()


class SecurityConfig(BaseSettings):
    # CORS
    allowed_origins: Annotated[list[str], NoDecode] = Field(["*"], alias="ALLOWED_ORIGINS")

    # Rate limiting
    enable_rate_limit: bool = Field(True, alias="ENABLE_RATE_LIMIT")
    rate_limit_requests: int = Field(10, ge=1, alias="RL_LIMIT")
    rate_limit_window: float = Field(60.0, ge=0.1, alias="RL_WINDOW")
    rate_limit_max_keys: int = Field(10_000, ge=1, alias="RL_MAX_KEYS")

    # Reverse proxies in front of the app whose X-Forwarded-For is trusted
    trusted_proxies: int = Field(0, ge=0, alias="TRUSTED_PROXIES")

    # HSTS
    enable_hsts: bool = Field(False, alias="ENABLE_HSTS")

    model_config = _settings_config()

    @field_validator("allowed_origins", mode="before")
    @classmethod
    def _parse_origins(cls, value: str | list[str]) -> list[str]:
        if not isinstance(value, str):
            return value
        origins = (origin.strip() for origin in value.split(","))
        return [origin for origin in origins if origin]

    @field_validator("enable_rate_limit", "enable_hsts", mode="before")
    @classmethod
    def _parse_flags(cls, value: str | bool) -> bool:
        return _parse_bool(value)


def _database_config_factory() -> DatabaseConfig:
    return DatabaseConfig()  # type: ignore[call-arg]


def _auth_config_factory() -> AuthConfig:
    return AuthConfig()  # type: ignore[call-arg]


def _security_config_factory() -> SecurityConfig:
    return SecurityConfig()  # type: ignore[call-arg]


class AppConfig(BaseSettings):
    app_env: str = Field("development", alias="APP_ENV")
    debug_logging: bool = Field(False, alias="DEBUG_LOGGING")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_file: Path | None = Field(None, alias="LOG_FILE")

    database: DatabaseConfig = Field(default_factory=_database_config_factory)
    auth: AuthConfig = Field(default_factory=_auth_config_factory)
    security: SecurityConfig = Field(default_factory=_security_config_factory)

    model_config = _settings_config()

    @field_validator("debug_logging", mode="before")
    @classmethod
    def _parse_debug_logging(cls, value: str | bool) -> bool:
        return _parse_bool(value)

    @model_validator(mode="after")
    def _check_production(self) -> "AppConfig":
        if not self.is_production():
            return self

        if self.auth.jwt_secret.strip().lower() in _INSECURE_SECRETS:
            raise SystemExit(
                "JWT_SECRET is unset or a development placeholder; refusing to start "
                "with APP_ENV=production. Set it to a long random value, e.g. "
                "`openssl rand -hex 32`."
            )

        for problem in self._production_warnings():
            print(f"[userauth] production warning: {problem}", file=sys.stderr)
        return self

    def _production_warnings(self) -> list[str]:
        problems = []
        if len(self.auth.jwt_secret) < _MIN_SECRET_LENGTH:
            problems.append(f"JWT_SECRET is shorter than {_MIN_SECRET_LENGTH} characters")
        if "*" in self.security.allowed_origins:
            problems.append("ALLOWED_ORIGINS accepts any origin")
        if not self.security.enable_rate_limit:
            problems.append("rate limiting on /register and /login is off")
        if not self.security.enable_hsts:
            problems.append("HSTS header is off")
        return problems

    def is_production(self) -> bool:
        return self.app_env.strip().lower() in {"prod", "production"}


@lru_cache(maxsize=1)
def load_config() -> AppConfig:
    """Process-wide settings, read once from the environment and ``.env``."""
    return AppConfig()


__all__ = ["AppConfig", "AuthConfig", "DatabaseConfig", "SecurityConfig", "load_config"]
