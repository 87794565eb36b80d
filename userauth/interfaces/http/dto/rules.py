# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Field rules for request payloads.

Each rule is a pure function: it returns the (possibly normalized) value or
raises ``PydanticCustomError`` with a stable type and a human message.
Request DTOs attach them with ``AfterValidator`` so pydantic runs every rule
and reports all failing fields at once.
"""

from __future__ import annotations

from pydantic import validate_email
from pydantic_core import PydanticCustomError

from userauth.shared.errors.validation_types import ValidationErrorType

NAME_MIN_LENGTH = 3
NAME_MAX_LENGTH = 30
PASSWORD_MIN_LENGTH = 6


def check_present(value: str) -> str:
    value = value.strip()
    if not value:
        raise PydanticCustomError(ValidationErrorType.MISSING, "Field cannot be empty", {})
    return value


def check_not_empty(value: str) -> str:
    if not value:
        raise PydanticCustomError(ValidationErrorType.MISSING, "Field cannot be empty", {})
    return value


def check_name(value: str) -> str:
    value = value.strip()
    if not value:
        raise PydanticCustomError(ValidationErrorType.MISSING, "Name is required", {})
    if not NAME_MIN_LENGTH <= len(value) <= NAME_MAX_LENGTH:
        raise PydanticCustomError(
            ValidationErrorType.NAME_LENGTH,
            "Name must be between {min_length} and {max_length} characters",
            {"min_length": NAME_MIN_LENGTH, "max_length": NAME_MAX_LENGTH},
        )
    return value


def _invalid_email(reason: str) -> PydanticCustomError:
    return PydanticCustomError(
        ValidationErrorType.EMAIL_INVALID, "Please include a valid email", {"reason": reason}
    )


def _canonical_email(value: str) -> str:
    # validate_email also accepts "Name <addr>" and drops the name
    if "<" in value or ">" in value:
        raise _invalid_email("display names are not accepted")
    try:
        _, address = validate_email(value)
    except PydanticCustomError as exc:
        raise _invalid_email(exc.message()) from exc
    return address.lower()


def normalize_email(value: str) -> str:
    """Lookup key for an email: the exact form ``check_email`` stores."""
    value = value.strip()
    try:
        return _canonical_email(value)
    except PydanticCustomError:
        # never registrable, so the lookup simply misses
        return value.lower()


def check_email(value: str) -> str:
    value = value.strip()
    if not value:
        raise PydanticCustomError(ValidationErrorType.MISSING, "Email is required", {})
    return _canonical_email(value)


def check_password(value: str) -> str:
    if len(value) < PASSWORD_MIN_LENGTH:
        raise PydanticCustomError(
            ValidationErrorType.PASSWORD_TOO_SHORT,
            "Password must be at least {min_length} characters long",
            {"min_length": PASSWORD_MIN_LENGTH},
        )
    return value


def check_login_email(value: str) -> str:
    return normalize_email(check_present(value))


__all__ = [
    "check_email",
    "check_login_email",
    "check_name",
    "check_not_empty",
    "check_password",
    "check_present",
    "normalize_email",
]
