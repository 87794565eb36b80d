from __future__ import annotations

from datetime import UTC, datetime, timedelta

import jwt
import pytest

from userauth.application.services.tokens import JwtTokenService
from userauth.infrastructure.auth.token_verifier import TokenVerifier, extract_bearer_token
from userauth.shared.config import AuthConfig
from userauth.shared.errors import InvalidTokenError, MissingTokenError


@pytest.fixture()
def auth_config() -> AuthConfig:
    return AuthConfig(jwt_secret="unit-secret", token_ttl_seconds=3600)


def test_issue_and_decode_round_trip(auth_config: AuthConfig) -> None:
    service = JwtTokenService(auth_config)

    issued = service.issue("user-1")

    assert issued.user_id == "user-1"
    assert service.decode(issued.token) == "user-1"
    assert issued.expires_at - datetime.now(UTC) <= timedelta(seconds=3600)


def test_token_carries_expiry_one_hour_out(auth_config: AuthConfig) -> None:
    now = datetime(2026, 1, 1, tzinfo=UTC)
    service = JwtTokenService(auth_config, clock=lambda: now)

    issued = service.issue("user-1")
    claims = jwt.decode(issued.token, options={"verify_signature": False})

    assert claims["sub"] == "user-1"
    assert claims["exp"] - claims["iat"] == 3600
    assert issued.expires_at == now + timedelta(hours=1)


def test_expired_token_is_rejected(auth_config: AuthConfig) -> None:
    past = datetime.now(UTC) - timedelta(hours=2)
    stale = JwtTokenService(auth_config, clock=lambda: past).issue("user-1")

    with pytest.raises(InvalidTokenError):
        JwtTokenService(auth_config).decode(stale.token)


def test_token_signed_with_other_secret_is_rejected(auth_config: AuthConfig) -> None:
    forged = JwtTokenService(AuthConfig(jwt_secret="someone-else")).issue("user-1")

    with pytest.raises(InvalidTokenError):
        JwtTokenService(auth_config).decode(forged.token)


@pytest.mark.parametrize("token", ["", "garbage", "a.b.c"])
def test_garbage_is_rejected(auth_config: AuthConfig, token: str) -> None:
    with pytest.raises(InvalidTokenError):
        JwtTokenService(auth_config).decode(token)


def test_token_without_subject_is_rejected(auth_config: AuthConfig) -> None:
    exp = int((datetime.now(UTC) + timedelta(minutes=5)).timestamp())
    token = jwt.encode({"exp": exp}, "unit-secret", algorithm="HS256")

    with pytest.raises(InvalidTokenError):
        JwtTokenService(auth_config).decode(token)


@pytest.mark.parametrize(
    ("header", "expected"),
    [
        ("Bearer abc.def.ghi", "abc.def.ghi"),
        ("bearer abc", "abc"),
        ("  Bearer   abc  ", "abc"),
    ],
)
def test_extract_bearer_token(header: str, expected: str) -> None:
    assert extract_bearer_token(header) == expected


@pytest.mark.parametrize("header", [None, "", "Bearer", "Bearer ", "Basic abc", "Bearer a b"])
def test_extract_bearer_token_missing(header: str | None) -> None:
    with pytest.raises(MissingTokenError):
        extract_bearer_token(header)


def test_verifier_returns_subject(auth_config: AuthConfig) -> None:
    service = JwtTokenService(auth_config)
    verifier = TokenVerifier(tokens=service)

    token = service.issue("user-7").token

    assert verifier.verify(f"Bearer {token}") == "user-7"
