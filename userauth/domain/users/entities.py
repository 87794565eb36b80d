# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True, frozen=True)
class User:

    id: str
    name: str
    email: str
    password_hash: str
    created_at: datetime

    def summary(self) -> UserSummary:
        return UserSummary(id=self.id, name=self.name, email=self.email)


@dataclass(slots=True, frozen=True)
class UserSummary:

    id: str
    name: str
    email: str

    def to_dict(self) -> dict[str, str]:
        return {"id": self.id, "name": self.name, "email": self.email}


@dataclass(slots=True, frozen=True)
class SessionToken:

    user_id: str
    token: str
    expires_at: datetime
