# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import hashlib
import re
import secrets
import time
from collections.abc import Mapping

from flask import Flask, Response, g, request

from userauth.shared.logging import clear_correlation_id, logger, set_correlation_id

_REQUEST_ID_HEADER = "X-Request-ID"
_REQUEST_ID_RE = re.compile(r"^[A-Za-z0-9._\-]{1,64}$")
_SECRET_HEADERS = frozenset({"authorization", "cookie", "x-api-key"})


def client_ip() -> str:
    """Peer address; ProxyFix rewrites it when TRUSTED_PROXIES is set."""
    return request.remote_addr or "unknown"


def _fingerprint(value: str) -> str:
    return f"<sha256:{hashlib.sha256(value.encode()).hexdigest()[:8]}>"


def _safe_headers(headers: Mapping[str, str]) -> dict[str, str]:
    return {
        key: _fingerprint(value) if key.lower() in _SECRET_HEADERS else value
        for key, value in headers.items()
    }


def _body_keys() -> list[str]:
    # field names only; auth payloads always carry a password
    payload = request.get_json(silent=True)
    return sorted(payload) if isinstance(payload, dict) else []


def _incoming_request_id() -> str:
    supplied = request.headers.get(_REQUEST_ID_HEADER, "")
    if _REQUEST_ID_RE.match(supplied):
        return supplied
    return secrets.token_hex(8)


def configure_request_logging(app: Flask, *, debug_mode: bool = False) -> None:
    @app.before_request
    def _start() -> None:
        g.correlation_id = _incoming_request_id()
        g.request_start_time = time.perf_counter()
        set_correlation_id(g.correlation_id)

        if debug_mode:
            logger.debug(
                f"-> {request.method} {request.path} ip={client_ip()} "
                f"headers={_safe_headers(request.headers)} fields={_body_keys()}"
            )
        else:
            logger.info(f"-> {request.method} {request.path} ip={client_ip()}")

    @app.after_request
    def _finish(response: Response) -> Response:
        elapsed = time.perf_counter() - g.get("request_start_time", time.perf_counter())
        line = (
            f"<- {request.method} {request.path} {response.status_code} "
            f"{elapsed * 1000:.1f}ms user={g.get('user_id', '-')}"
        )
        if response.status_code >= 500:
            logger.error(line)
        elif response.status_code >= 400:
            logger.warning(line)
        else:
            logger.info(line)

        if "correlation_id" in g:
            response.headers.setdefault(_REQUEST_ID_HEADER, g.correlation_id)
        return response

    @app.teardown_request
    def _teardown(exc: BaseException | None) -> None:
        clear_correlation_id()


__all__ = ["client_ip", "configure_request_logging"]
