# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from .entities import SessionToken, User


class UserRepository(Protocol):
    def find_by_email(self, email: str) -> User | None: ...
    def add(self, user: User) -> User: ...
    def list_all(self) -> Sequence[User]: ...


class TokenIssuer(Protocol):
    def issue(self, user_id: str) -> SessionToken: ...
    def decode(self, token: str) -> str: ...


class PasswordHasher(Protocol):
    def hash(self, password: str) -> str: ...
    def verify(self, password: str, hashed: str) -> bool: ...
