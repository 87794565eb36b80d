# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Logging for userauth: loguru sinks, request context and redaction."""

from .logger import (
    bind_user_id,
    clear_correlation_id,
    logger,
    set_correlation_id,
    setup_logging,
)
from .sensitive_filter import sanitize_message, sanitize_record

__all__ = [
    "bind_user_id",
    "clear_correlation_id",
    "logger",
    "sanitize_message",
    "sanitize_record",
    "set_correlation_id",
    "setup_logging",
]
