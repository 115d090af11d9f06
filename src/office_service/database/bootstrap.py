from __future__ import annotations

import logging
from typing import Iterable, Optional, Tuple

import mysql.connector
from sqlalchemy import inspect, select

from ..core.constants import DEFAULT_ROLES
from .connection import DatabaseConnection, DBConfig
from .models import Base, RoleRecord
from .transaction import TransactionManager

logger = logging.getLogger(__name__)


def ensure_database_exists(db_config: dict) -> None:
    """Create the MySQL database named in ``db_config`` if it is missing."""

    target = DBConfig.from_dict(db_config)
    conn = mysql.connector.connect(
        host=target.host,
        port=target.port,
        user=target.user,
        password=target.password,
        use_pure=True,
    )
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{target.database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci;"
        )
        conn.commit()
    finally:
        conn.close()
    logger.info("Database %s ready on %s:%s", target.database, target.host, target.port)


def create_schema(conn: DatabaseConnection) -> None:
    # Idempotent: only missing tables are created.
    Base.metadata.create_all(conn.engine)


def drop_schema(conn: DatabaseConnection) -> None:
    Base.metadata.drop_all(conn.engine)


def seed_roles(
    conn: DatabaseConnection,
    roles: Optional[Iterable[Tuple[str, Optional[str]]]] = None,
) -> int:
    """Insert the default roles that do not exist yet.

    Returns the number of roles created.
    """

    wanted = list(roles) if roles is not None else list(DEFAULT_ROLES)
    created = 0
    with TransactionManager(conn).scope() as session:
        existing = set(session.scalars(select(RoleRecord.name)).all())
        for name, description in wanted:
            if name in existing:
                continue
            session.add(RoleRecord(name=name, description=description))
            existing.add(name)
            created += 1

    if created:
        logger.info("Seeded %d role(s)", created)
    return created


def list_tables(conn: DatabaseConnection) -> list[str]:
    return sorted(inspect(conn.engine).get_table_names())
