from __future__ import annotations

import urllib.parse
from dataclasses import dataclass

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, scoped_session, sessionmaker
from sqlalchemy.pool import StaticPool


@dataclass
class DBConfig:
    host: str
    port: int
    user: str
    password: str
    database: str

    @classmethod
    def from_dict(cls, db_config: dict) -> "DBConfig":
        return cls(
            host=str(db_config.get("host", "localhost")),
            port=int(db_config.get("port", 3306)),
            user=str(db_config.get("user", "root")),
            password=str(db_config.get("password", "")),
            database=str(db_config.get("database", "office_db")),
        )

    def url(self) -> str:
        # Quote the password so characters like '@' survive the URL.
        password = urllib.parse.quote_plus(self.password)
        return f"mysql+mysqlconnector://{self.user}:{password}@{self.host}:{self.port}/{self.database}"


def _create_engine(url: str, *, echo: bool) -> Engine:
    if url.startswith("sqlite"):
        # In-memory SQLite lives in a single connection shared across sessions.
        return create_engine(
            url,
            echo=echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_engine(url, echo=echo, pool_pre_ping=True, pool_recycle=3600)


class DatabaseConnection:
    """Engine plus a thread-local session registry.

    Repositories call ``session()`` and get the session of the transaction
    scope currently open on this thread.
    """

    def __init__(self, url: str, *, echo: bool = False):
        self._engine = _create_engine(url, echo=echo)
        self._sessions = scoped_session(
            sessionmaker(bind=self._engine, autoflush=False, expire_on_commit=False)
        )

    @property
    def engine(self) -> Engine:
        return self._engine

    def session(self) -> Session:
        return self._sessions()

    def remove(self) -> None:
        self._sessions.remove()

    def dispose(self) -> None:
        self.remove()
        self._engine.dispose()
