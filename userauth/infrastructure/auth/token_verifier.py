# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import Any

from flask import g, request

from userauth.domain.users.repositories import TokenIssuer
from userauth.shared.errors import MissingTokenError
from userauth.shared.logging import bind_user_id, logger

_SCHEME = "bearer"


def extract_bearer_token(header: str | None) -> str:
    """Return the credential of a ``Bearer <token>`` header or raise MissingTokenError."""
    if not header:
        raise MissingTokenError()
    scheme, _, token = header.strip().partition(" ")
    token = token.strip()
    if scheme.lower() != _SCHEME or not token or " " in token:
        raise MissingTokenError()
    return token


class TokenVerifier:
    def __init__(self, *, tokens: TokenIssuer) -> None:
        self._tokens = tokens

    def verify(self, header: str | None) -> str:
        token = extract_bearer_token(header)
        return self._tokens.decode(token)

    def require_token(self, func: Callable[..., Any]) -> Callable[..., Any]:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                user_id = self.verify(request.headers.get("Authorization"))
            except MissingTokenError:
                logger.warning(f"No bearer token on {request.method} {request.path}")
                raise

            g.user_id = user_id
            bind_user_id(user_id)
            logger.debug(f"Auth OK: user={user_id} {request.method} {request.path}")
            return func(*args, **kwargs)

        return wrapper


__all__ = ["TokenVerifier", "extract_bearer_token"]
