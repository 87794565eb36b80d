# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Masks credentials and personal data before a log line reaches a sink."""

from __future__ import annotations

import re
from typing import Any

_MASK = "***REDACTED***"

_RULES: list[tuple[re.Pattern[str], str]] = [
    # signing secret from config dumps or env echoes
    (re.compile(r"(jwt[_-]?secret\s*[:=]\s*['\"]?)([^'\"\s]{4,})", re.IGNORECASE), rf"\1{_MASK}"),
    # Authorization header and bare bearer credentials
    (re.compile(r"(authorization\s*:\s*['\"]?)([^'\"\n]{8,})", re.IGNORECASE), rf"\1{_MASK}"),
    (re.compile(r"(bearer\s+)([\w\-.]{8,})", re.IGNORECASE), rf"\1{_MASK}"),
    (re.compile(r"(token\s*[:=]\s*['\"]?)([\w\-.]{8,})", re.IGNORECASE), rf"\1{_MASK}"),
    # any JWT-shaped value left over
    (re.compile(r"\beyJ[\w\-]+\.[\w\-]+\.[\w\-]+"), "***JWT***"),
    # password fields in query strings, JSON or reprs
    (
        re.compile(r"((?:password|passwd|pwd)['\"]?\s*[:=]\s*['\"]?)([^'\"\s,}&]+)", re.IGNORECASE),
        rf"\1{_MASK}",
    ),
    # credentials embedded in database URLs
    (re.compile(r"(\w+(?:\+\w+)?://[^:/\s]+:)([^@\s]+)(@)"), rf"\1{_MASK}\3"),
    # keep the domain of an email, drop the mailbox
    (re.compile(r"[\w.%+-]+@([\w-]+(?:\.[\w-]+)*\.[A-Za-z]{2,})"), r"***@\1"),
]


def sanitize_message(message: str) -> str:
    for pattern, replacement in _RULES:
        message = pattern.sub(replacement, message)
    return message


def sanitize_record(record: dict[str, Any]) -> bool:
    """loguru filter: rewrites ``record["message"]`` in place, never drops."""
    if "message" in record:
        record["message"] = sanitize_message(record["message"])
    return True


__all__ = ["sanitize_message", "sanitize_record"]
