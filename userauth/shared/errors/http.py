# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Flask, Response, g, jsonify, request
from werkzeug.exceptions import HTTPException

from userauth.shared.logging import logger

from .base import AppError, InternalError


def handle_app_error(error: AppError) -> tuple[Response, HTTPStatus]:
    return jsonify(error.to_dict()), error.status


def _where() -> str:
    return f"{request.method} {request.path}"


def register_error_handler(app: Flask, *, debug_mode: bool = False) -> None:
    @app.errorhandler(AppError)
    def _on_app_error(exc: AppError):
        if exc.status >= HTTPStatus.INTERNAL_SERVER_ERROR:
            logger.error(f"{exc.code} on {_where()}")
        else:
            logger.warning(f"{exc.code} ({int(exc.status)}) on {_where()}")
        return handle_app_error(exc)

    @app.errorhandler(HTTPException)
    def _on_http_error(exc: HTTPException):
        code = (exc.name or "http_error").lower().replace(" ", "_")
        return jsonify({"error": code}), exc.code or HTTPStatus.INTERNAL_SERVER_ERROR

    @app.errorhandler(Exception)
    def _on_unexpected(exc: Exception):
        # the client only ever sees the generic internal_error body
        if debug_mode:
            logger.opt(exception=exc).error(
                f"unhandled {type(exc).__name__} on {_where()} "
                f"user={g.get('user_id', '-')} body_size={len(request.get_data())}"
            )
        else:
            logger.opt(exception=exc).error(f"unhandled {type(exc).__name__} on {_where()}")
        return handle_app_error(InternalError())
