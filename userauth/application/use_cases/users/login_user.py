# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from userauth.domain.users.entities import SessionToken
from userauth.domain.users.exceptions import InvalidCredentialsError
from userauth.domain.users.repositories import PasswordHasher, TokenIssuer, UserRepository


class LoginUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        tokens: TokenIssuer,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._tokens = tokens
        self._password_hasher = password_hasher

    def execute(self, name: str, email: str, password: str) -> SessionToken:
        user = self._users.find_by_email(email)
        valid = (
            user is not None
            and user.name == name
            and self._password_hasher.verify(password, user.password_hash)
        )
        # one error for unknown email, name mismatch and wrong password
        if not valid:
            raise InvalidCredentialsError()
        return self._tokens.issue(user.id)
