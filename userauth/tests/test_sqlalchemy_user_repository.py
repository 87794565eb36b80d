from __future__ import annotations

from datetime import UTC, datetime

import pytest
from sqlalchemy.exc import OperationalError

from userauth.domain.users.entities import User
from userauth.domain.users.exceptions import UserAlreadyExistsError
from userauth.infrastructure.db import build_engine, build_session_factory, init_db
from userauth.infrastructure.repositories.users.sqlalchemy_user_repository import (
    SqlAlchemyUserRepository,
)
from userauth.shared.config import DatabaseConfig
from userauth.shared.errors import InternalError


@pytest.fixture()
def repository() -> SqlAlchemyUserRepository:
    engine = build_engine(DatabaseConfig(url="sqlite+pysqlite:///:memory:"))
    init_db(engine)
    return SqlAlchemyUserRepository(build_session_factory(engine))


def _user(name: str = "Ann", email: str = "ann@x.com") -> User:
    return User(id="", name=name, email=email, password_hash="h", created_at=datetime.now(UTC))


def test_add_assigns_opaque_id(repository: SqlAlchemyUserRepository) -> None:
    stored = repository.add(_user())

    assert stored.id
    assert repository.find_by_email("ann@x.com") == stored


def test_add_duplicate_email_raises(repository: SqlAlchemyUserRepository) -> None:
    repository.add(_user())

    with pytest.raises(UserAlreadyExistsError):
        repository.add(_user(name="Annie"))

    assert len(repository.list_all()) == 1


def test_find_unknown_email_returns_none(repository: SqlAlchemyUserRepository) -> None:
    assert repository.find_by_email("nobody@x.com") is None


def test_list_all_in_insertion_order(repository: SqlAlchemyUserRepository) -> None:
    repository.add(_user("Ann", "ann@x.com"))
    repository.add(_user("Bob", "bob@mail.org"))

    assert [u.name for u in repository.list_all()] == ["Ann", "Bob"]


def test_database_failure_becomes_internal_error() -> None:
    def broken_factory():
        raise OperationalError("SELECT 1", {}, Exception("db down"))

    repository = SqlAlchemyUserRepository(broken_factory)

    with pytest.raises(InternalError):
        repository.list_all()
