from __future__ import annotations

import pytest

from office_service.database.transaction import TransactionManager
from office_service.offices.model import Office
from office_service.offices.sql_office_repository import SqlOfficeRepository


def test_scope_commits_on_success(conn):
    tx = TransactionManager(conn)
    offices = SqlOfficeRepository(conn)

    with tx.scope():
        saved = offices.save(Office(office_id=None, name="Main"))

    with tx.scope():
        assert offices.find_by_id(saved.office_id).name == "Main"


def test_scope_rolls_back_every_write_on_failure(conn):
    tx = TransactionManager(conn)
    offices = SqlOfficeRepository(conn)

    with pytest.raises(RuntimeError):
        with tx.scope():
            offices.save(Office(office_id=None, name="First"))
            offices.save(Office(office_id=None, name="Second"))
            raise RuntimeError("fail after writes")

    with tx.scope():
        assert offices.find_by_name("First") is None
        assert offices.find_by_name("Second") is None


def test_scope_hands_out_the_repository_session(conn):
    tx = TransactionManager(conn)

    with tx.scope() as session:
        assert session is conn.session()
