# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Transactional session scope shared by the SQLAlchemy adapters."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager

from sqlalchemy.orm import Session

from userauth.shared.logging import logger


@contextmanager
def unit_of_work_scope(
    factory: Callable[[], Session], *, read_only: bool = False
) -> Iterator[Session]:
    """Yield a session that commits on success and rolls back on error.

    Read-only scopes never commit; whatever the block did is rolled back
    when it exits.
    """
    session = factory()
    try:
        yield session
        if read_only:
            session.rollback()
        else:
            session.commit()
    except Exception as exc:
        logger.debug(f"uow: rollback ({type(exc).__name__})")
        session.rollback()
        raise
    finally:
        session.close()


__all__ = ["unit_of_work_scope"]
