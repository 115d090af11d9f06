from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.orm import Session

from .connection import DatabaseConnection


class TransactionManager:
    """Opens one transaction per public service operation."""

    def __init__(self, conn: DatabaseConnection):
        self._conn = conn

    @contextmanager
    def scope(self) -> Iterator[Session]:
        session = self._conn.session()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            self._conn.remove()
