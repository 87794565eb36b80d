# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from userauth.application.use_cases.users.login_user import LoginUserUseCase
from userauth.application.use_cases.users.register_user import RegisterUserUseCase
from userauth.domain.users.exceptions import InvalidCredentialsError
from userauth.infrastructure.audit import AuditAction, AuditLogger
from userauth.interfaces.http.dto.auth import (
    LoginRequestDTO,
    LoginResponseDTO,
    RegisteredUserDTO,
    RegisterRequestDTO,
    RegisterResponseDTO,
)
from userauth.shared.config import SecurityConfig
from userauth.shared.errors.validation import raise_validation_error
from userauth.shared.logging import logger
from userauth.shared.middleware.rate_limit import rate_limit
from userauth.shared.middleware.request_logger import client_ip


class AuthController:
    def __init__(
        self,
        *,
        register_use_case: RegisterUserUseCase,
        login_use_case: LoginUserUseCase,
        audit: AuditLogger,
        security: SecurityConfig,
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case
        self._audit = audit
        self._security = security

    def register(self) -> tuple[Response, int]:
        try:
            dto = RegisterRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        user, token = self._register_use_case.execute(dto.name, dto.email, dto.password)

        self._audit.log(
            AuditAction.REGISTER,
            user_id=user.id,
            ip_address=client_ip(),
            details={"email": dto.email},
            success=True,
        )

        payload = RegisterResponseDTO(token=token.token, user=RegisteredUserDTO(id=user.id))
        logger.info(f"auth.register: ok user_id={user.id}")
        return jsonify(payload.model_dump()), 201

    def login(self) -> tuple[Response, int]:
        try:
            dto = LoginRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        ip_address = client_ip()

        try:
            token = self._login_use_case.execute(dto.name, dto.email, dto.password)
        except InvalidCredentialsError:
            self._audit.log(
                AuditAction.LOGIN_FAILED,
                ip_address=ip_address,
                details={"email": dto.email},
                success=False,
            )
            raise

        self._audit.log(
            AuditAction.LOGIN_SUCCESS,
            user_id=token.user_id,
            ip_address=ip_address,
            details={"email": dto.email},
            success=True,
        )
        logger.info(f"auth.login: ok user_id={token.user_id}")
        return jsonify(LoginResponseDTO(token=token.token).model_dump()), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__)
        bp.add_url_rule(
            "/register",
            view_func=rate_limit(self._security, limit=5, window_seconds=60.0)(self.register),
            methods=["POST"],
        )
        bp.add_url_rule(
            "/login",
            view_func=rate_limit(self._security, limit=10, window_seconds=60.0)(self.login),
            methods=["POST"],
        )
        return bp
