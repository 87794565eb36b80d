# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import json
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from userauth.infrastructure.db.models import AuditLog
from userauth.infrastructure.unit_of_work import unit_of_work_scope
from userauth.shared.logging import logger


class AuditAction(str, Enum):
    REGISTER = "register"
    LOGIN_SUCCESS = "login_success"
    LOGIN_FAILED = "login_failed"
    USERS_LISTED = "users_listed"


_REDACTED = "***REDACTED***"
_SENSITIVE_KEYS = ("password", "token", "secret", "key", "hash")


def _redact(details: Mapping[str, Any]) -> dict[str, Any]:
    return {
        key: _REDACTED if any(marker in key.lower() for marker in _SENSITIVE_KEYS) else value
        for key, value in details.items()
    }


@dataclass(slots=True, frozen=True)
class AuditEvent:
    action: AuditAction
    success: bool
    user_id: str | None = None
    ip_address: str | None = None
    details: dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))

    def describe(self) -> str:
        line = (
            f"AUDIT: {self.action.value} | user_id={self.user_id} | "
            f"ip={self.ip_address} | success={self.success}"
        )
        if self.details:
            line += f" | details={self.details}"
        return line

    def to_row(self) -> AuditLog:
        return AuditLog(
            timestamp=self.timestamp,
            action=self.action.value,
            user_id=self.user_id,
            ip_address=self.ip_address,
            success=self.success,
            details_json=json.dumps(self.details, default=str) if self.details else None,
        )


def _store(session_factory: Callable[[], Session], event: AuditEvent) -> None:
    try:
        with unit_of_work_scope(session_factory) as session:
            session.add(event.to_row())
    except SQLAlchemyError as exc:
        logger.warning(f"audit: failed to store {event.action.value} ({type(exc).__name__})")


class AuditLogger:
    """Records security events in the log and, when a session factory is
    given, in the ``audit_logs`` table.

    Storage is best effort: a database failure is logged and the request
    carries on.
    """

    def __init__(self, session_factory: Callable[[], Session] | None = None) -> None:
        self._session_factory = session_factory

    def log(
        self,
        action: AuditAction,
        user_id: str | None = None,
        ip_address: str | None = None,
        details: Mapping[str, Any] | None = None,
        success: bool = True,
    ) -> AuditEvent:
        event = AuditEvent(
            action=action,
            success=success,
            user_id=user_id,
            ip_address=ip_address,
            details=_redact(details or {}),
        )

        if success:
            logger.info(event.describe())
        else:
            logger.warning(event.describe())

        if self._session_factory is not None:
            _store(self._session_factory, event)
        return event


__all__ = ["AuditAction", "AuditEvent", "AuditLogger"]
