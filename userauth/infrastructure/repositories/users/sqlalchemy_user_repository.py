# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable, Sequence

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from userauth.domain.users.entities import User as DomainUser
from userauth.domain.users.exceptions import UserAlreadyExistsError
from userauth.domain.users.repositories import UserRepository
from userauth.infrastructure.db.models import User
from userauth.infrastructure.unit_of_work import unit_of_work_scope
from userauth.shared.errors import InternalError
from userauth.shared.logging import logger


def _to_domain(row: User) -> DomainUser:
    return DomainUser(
        id=row.id,
        name=row.name,
        email=row.email,
        password_hash=row.password_hash,
        created_at=row.created_at,
    )


class SqlAlchemyUserRepository(UserRepository):
    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def find_by_email(self, email: str) -> DomainUser | None:
        try:
            with unit_of_work_scope(self._session_factory, read_only=True) as session:
                row = session.query(User).filter(User.email == email).first()
                return _to_domain(row) if row else None
        except SQLAlchemyError as exc:
            logger.opt(exception=exc).error("users.find_by_email: query failed")
            raise InternalError() from exc

    def add(self, user: DomainUser) -> DomainUser:
        try:
            with unit_of_work_scope(self._session_factory) as session:
                row = User(
                    name=user.name,
                    email=user.email,
                    password_hash=user.password_hash,
                    created_at=user.created_at,
                )
                session.add(row)
                session.flush()
                session.refresh(row)
                return _to_domain(row)
        except IntegrityError as exc:
            logger.info("users.add: email already registered")
            raise UserAlreadyExistsError() from exc
        except SQLAlchemyError as exc:
            logger.opt(exception=exc).error("users.add: insert failed")
            raise InternalError() from exc

    def list_all(self) -> Sequence[DomainUser]:
        try:
            with unit_of_work_scope(self._session_factory, read_only=True) as session:
                rows = session.query(User).order_by(User.created_at.asc(), User.id.asc()).all()
                return [_to_domain(row) for row in rows]
        except SQLAlchemyError as exc:
            logger.opt(exception=exc).error("users.list_all: query failed")
            raise InternalError() from exc
