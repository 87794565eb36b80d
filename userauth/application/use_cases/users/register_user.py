# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import UTC, datetime

from userauth.domain.users.entities import SessionToken, User
from userauth.domain.users.exceptions import UserAlreadyExistsError
from userauth.domain.users.repositories import PasswordHasher, TokenIssuer, UserRepository


class RegisterUserUseCase:
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

    def execute(self, name: str, email: str, password: str) -> tuple[User, SessionToken]:
        # add() also raises UserAlreadyExistsError when a concurrent insert wins.
        if self._users.find_by_email(email):
            raise UserAlreadyExistsError()
        hashed = self._password_hasher.hash(password)
        user = User(
            id="",
            name=name,
            email=email,
            password_hash=hashed,
            created_at=datetime.now(UTC),
        )
        persisted = self._users.add(user)
        token = self._tokens.issue(persisted.id)
        return persisted, token
