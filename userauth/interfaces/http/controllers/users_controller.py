# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, g, jsonify

from userauth.application.use_cases.users.list_users import ListUsersUseCase
from userauth.infrastructure.audit import AuditAction, AuditLogger
from userauth.infrastructure.auth.token_verifier import TokenVerifier
from userauth.interfaces.http.dto.auth import UserSummaryDTO
from userauth.shared.middleware.request_logger import client_ip


class UsersController:
    def __init__(
        self,
        *,
        list_users_use_case: ListUsersUseCase,
        verifier: TokenVerifier,
        audit: AuditLogger,
    ) -> None:
        self._list_users_use_case = list_users_use_case
        self._verifier = verifier
        self._audit = audit

    def list_users(self) -> tuple[Response, int]:
        users = self._list_users_use_case.execute()
        self._audit.log(
            AuditAction.USERS_LISTED,
            user_id=g.user_id,
            ip_address=client_ip(),
            details={"count": len(users)},
        )
        payload = [UserSummaryDTO(**user.to_dict()).model_dump() for user in users]
        return jsonify(payload), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("users", __name__)
        bp.add_url_rule(
            "/users",
            view_func=self._verifier.require_token(self.list_users),
            methods=["GET"],
        )
        return bp
