# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Signed, stateless session tokens."""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime, timedelta

import jwt

from userauth.domain.users.entities import SessionToken
from userauth.domain.users.repositories import TokenIssuer
from userauth.shared.config import AuthConfig
from userauth.shared.errors import InvalidTokenError
from userauth.shared.logging import logger


def _utcnow() -> datetime:
    return datetime.now(UTC)


class JwtTokenService(TokenIssuer):
    """Issues and verifies HMAC-signed JWTs bound to a user id.

    Tokens are never stored; validity is decided by signature and the
    ``exp`` claim alone.
    """

    def __init__(self, config: AuthConfig, clock: Callable[[], datetime] = _utcnow) -> None:
        self._secret = config.jwt_secret
        self._algorithm = config.jwt_algorithm
        self._ttl = timedelta(seconds=config.token_ttl_seconds)
        self._clock = clock

    def issue(self, user_id: str) -> SessionToken:
        issued_at = self._clock()
        expires_at = issued_at + self._ttl
        payload = {
            "sub": user_id,
            "iat": int(issued_at.timestamp()),
            "exp": int(expires_at.timestamp()),
        }
        token = jwt.encode(payload, self._secret, algorithm=self._algorithm)
        logger.debug(f"tokens.issue: user={user_id} exp={expires_at.isoformat()}")
        return SessionToken(user_id=user_id, token=token, expires_at=expires_at)

    def decode(self, token: str) -> str:
        try:
            claims = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["exp", "sub"]},
            )
        except jwt.ExpiredSignatureError as exc:
            logger.info("tokens.decode: expired token")
            raise InvalidTokenError() from exc
        except jwt.InvalidTokenError as exc:
            logger.info(f"tokens.decode: rejected token ({type(exc).__name__})")
            raise InvalidTokenError() from exc

        subject = claims.get("sub")
        if not isinstance(subject, str) or not subject:
            raise InvalidTokenError()
        return subject


__all__ = ["JwtTokenService"]
