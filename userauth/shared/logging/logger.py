"""loguru setup with per-request context (correlation id and caller identity)."""

from __future__ import annotations

import logging
import sys
from contextvars import ContextVar
from pathlib import Path
from typing import Any

from loguru import logger as _logger

from .sensitive_filter import sanitize_record

_LINE = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<lvl>{level:<8}</lvl> | "
    "<magenta>{extra[correlation_id]}</magenta> "
    "<yellow>user={extra[user_id]}</yellow> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> | "
    "<lvl>{message}</lvl>"
)

_UNSET = "-"
_CORRELATION_ID: ContextVar[str] = ContextVar("correlation_id", default=_UNSET)
_USER_ID: ContextVar[str] = ContextVar("user_id", default=_UNSET)

# stdlib loggers that are too chatty at DEBUG
_QUIET_LOGGERS = {
    "werkzeug": logging.INFO,
    "sqlalchemy.engine": logging.WARNING,
    "sqlalchemy.pool": logging.WARNING,
}


def _context() -> dict[str, str]:
    return {"correlation_id": _CORRELATION_ID.get(), "user_id": _USER_ID.get()}


class _InterceptHandler(logging.Handler):
    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = _logger.level(record.levelname).name
        except ValueError:
            level = record.levelno
        _logger.opt(depth=6, exception=record.exc_info).bind(**_context()).log(
            level, record.getMessage()
        )


class ContextualLogger:
    """loguru proxy that binds the current request context on every call."""

    def __getattr__(self, name: str) -> Any:  # pragma: no cover
        return getattr(_logger.bind(**_context()), name)


def set_correlation_id(value: str | None) -> None:
    _CORRELATION_ID.set(value or _UNSET)


def bind_user_id(user_id: str | None) -> None:
    _USER_ID.set(user_id or _UNSET)


def clear_correlation_id() -> None:
    """Reset the request context; called on request teardown."""
    _CORRELATION_ID.set(_UNSET)
    _USER_ID.set(_UNSET)


def _sink_options(level: str) -> dict[str, Any]:
    return {
        "level": level,
        "format": _LINE,
        "filter": sanitize_record,
        "backtrace": False,
        "diagnose": False,
    }


def setup_logging(level: str | None = None, log_file: str | Path | None = None) -> None:
    level = (level or "INFO").upper()

    _logger.remove()
    _logger.configure(extra={"correlation_id": _UNSET, "user_id": _UNSET})
    _logger.add(sys.stderr, colorize=True, **_sink_options(level))

    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        _logger.add(
            str(path),
            colorize=False,
            enqueue=True,
            encoding="utf-8",
            rotation="10 MB",
            retention=5,
            **_sink_options(level),
        )

    logging.basicConfig(handlers=[_InterceptHandler()], level=0, force=True)
    for name, stdlib_level in _QUIET_LOGGERS.items():
        logging.getLogger(name).setLevel(stdlib_level)


logger = ContextualLogger()

__all__ = [
    "bind_user_id",
    "clear_correlation_id",
    "logger",
    "set_correlation_id",
    "setup_logging",
]
