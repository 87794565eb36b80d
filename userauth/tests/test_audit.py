from __future__ import annotations

from sqlalchemy.exc import OperationalError

from userauth.infrastructure.audit import AuditAction, AuditLogger


def test_sensitive_details_are_redacted() -> None:
    event = AuditLogger().log(
        AuditAction.LOGIN_FAILED,
        details={"email": "ann@x.com", "password": "secret1", "api_key": "k"},
        success=False,
    )

    assert event.details == {
        "email": "ann@x.com",
        "password": "***REDACTED***",
        "api_key": "***REDACTED***",
    }
    assert "secret1" not in event.describe()


def test_storage_failure_does_not_propagate() -> None:
    def broken_factory():
        raise OperationalError("INSERT", {}, Exception("db down"))

    event = AuditLogger(broken_factory).log(AuditAction.REGISTER, user_id="user-1")

    assert event.action is AuditAction.REGISTER
    assert event.success is True
