# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import SessionToken, User, UserSummary
from .exceptions import InvalidCredentialsError, UserAlreadyExistsError
from .repositories import PasswordHasher, TokenIssuer, UserRepository

__all__ = [
    "InvalidCredentialsError",
    "PasswordHasher",
    "SessionToken",
    "TokenIssuer",
    "User",
    "UserAlreadyExistsError",
    "UserRepository",
    "UserSummary",
]
