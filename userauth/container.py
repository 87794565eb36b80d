"""Application dependency container."""

from __future__ import annotations

from functools import cached_property

from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from userauth.application.services.password_hashing import WerkzeugPasswordHasher
from userauth.application.services.tokens import JwtTokenService
from userauth.application.use_cases.users.list_users import ListUsersUseCase
from userauth.application.use_cases.users.login_user import LoginUserUseCase
from userauth.application.use_cases.users.register_user import RegisterUserUseCase
from userauth.infrastructure.audit import AuditLogger
from userauth.infrastructure.auth.token_verifier import TokenVerifier
from userauth.infrastructure.db import build_engine, build_session_factory
from userauth.infrastructure.repositories.users.sqlalchemy_user_repository import (
    SqlAlchemyUserRepository,
)
from userauth.interfaces.http.controllers.auth_controller import AuthController
from userauth.interfaces.http.controllers.misc_controller import MiscController
from userauth.interfaces.http.controllers.users_controller import UsersController
from userauth.shared.config import AppConfig


class Container:
    def __init__(self, config: AppConfig) -> None:
        self.config = config

    @cached_property
    def engine(self) -> Engine:
        return build_engine(self.config.database)

    @cached_property
    def session_factory(self) -> sessionmaker[Session]:
        return build_session_factory(self.engine)

    @cached_property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        return WerkzeugPasswordHasher(method=self.config.auth.password_hash_method)

    @cached_property
    def token_service(self) -> JwtTokenService:
        return JwtTokenService(self.config.auth)

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository(self.session_factory)

    @cached_property
    def audit_logger(self) -> AuditLogger:
        return AuditLogger(self.session_factory)

    @cached_property
    def token_verifier(self) -> TokenVerifier:
        return TokenVerifier(tokens=self.token_service)

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            users=self.user_repository,
            tokens=self.token_service,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.user_repository,
            tokens=self.token_service,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def list_users_use_case(self) -> ListUsersUseCase:
        return ListUsersUseCase(users=self.user_repository)

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            register_use_case=self.register_user_use_case,
            login_use_case=self.login_user_use_case,
            audit=self.audit_logger,
            security=self.config.security,
        )

    @cached_property
    def users_controller(self) -> UsersController:
        return UsersController(
            list_users_use_case=self.list_users_use_case,
            verifier=self.token_verifier,
            audit=self.audit_logger,
        )

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController(engine=self.engine)
