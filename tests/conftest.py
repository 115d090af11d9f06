from __future__ import annotations

import pytest

from office_service.database.bootstrap import create_schema, drop_schema, seed_roles
from office_service.database.connection import DatabaseConnection
from office_service.main import create_app

SQLITE_MEMORY_URL = "sqlite+pysqlite:///:memory:"


@pytest.fixture
def conn():
    conn = DatabaseConnection(SQLITE_MEMORY_URL)
    create_schema(conn)
    yield conn
    conn.remove()
    drop_schema(conn)
    conn.dispose()


@pytest.fixture
def seeded_conn(conn):
    # Default roles: ADMIN -> id 1, USER -> id 2
    seed_roles(conn)
    return conn


@pytest.fixture
def app():
    app = create_app("config.testing")
    yield app
    app.extensions["container"].conn.dispose()


@pytest.fixture
def client(app):
    return app.test_client()
