from __future__ import annotations

from sqlalchemy import func, select

from office_service.common.pagination import PageRequest
from office_service.database.models import user_roles
from office_service.database.transaction import TransactionManager
from office_service.roles.sql_role_repository import SqlRoleRepository
from office_service.users.model import User
from office_service.users.sql_user_repository import SqlUserRepository


def _user(n: int, roles=()) -> User:
    return User(user_id=None, username=f"u{n}", email=f"u{n}@example.com", name="N", last_name="L", roles=tuple(roles))


def test_save_assigns_id_and_links_roles(seeded_conn):
    tx = TransactionManager(seeded_conn)
    users = SqlUserRepository(seeded_conn)
    roles = SqlRoleRepository(seeded_conn)

    with tx.scope():
        admin = roles.find_by_name("ADMIN")
        saved = users.save(_user(1, [admin]))

    assert saved.user_id is not None
    with tx.scope():
        loaded = users.find_by_id(saved.user_id)
    assert loaded.username == "u1"
    assert [r.name for r in loaded.roles] == ["ADMIN"]


def test_find_by_username_and_email(seeded_conn):
    tx = TransactionManager(seeded_conn)
    users = SqlUserRepository(seeded_conn)

    with tx.scope():
        users.save(_user(1))

    with tx.scope():
        assert users.find_by_username("u1").email == "u1@example.com"
        assert users.find_by_email("u1@example.com").username == "u1"
        assert users.find_by_username("missing") is None
        assert users.find_by_email("missing@example.com") is None
        assert users.find_by_id(999) is None


def test_find_all_pages_sorted_by_id(seeded_conn):
    tx = TransactionManager(seeded_conn)
    users = SqlUserRepository(seeded_conn)

    with tx.scope():
        for n in range(1, 26):
            users.save(_user(n))

    with tx.scope():
        page = users.find_all(PageRequest.from_offset(20, 10))

    assert page.total_elements == 25
    assert [u.username for u in page.items] == ["u21", "u22", "u23", "u24", "u25"]


def test_save_existing_user_replaces_roles(seeded_conn):
    tx = TransactionManager(seeded_conn)
    users = SqlUserRepository(seeded_conn)
    roles = SqlRoleRepository(seeded_conn)

    with tx.scope():
        admin, regular = roles.find_by_name("ADMIN"), roles.find_by_name("USER")
        saved = users.save(_user(1, [admin]))

    with tx.scope():
        users.save(User(saved.user_id, "u1b", "u1b@example.com", "N", "L", (regular,)))

    with tx.scope():
        loaded = users.find_by_id(saved.user_id)
    assert loaded.username == "u1b"
    assert [r.name for r in loaded.roles] == ["USER"]


def test_delete_removes_user_and_role_links(seeded_conn):
    tx = TransactionManager(seeded_conn)
    users = SqlUserRepository(seeded_conn)
    roles = SqlRoleRepository(seeded_conn)

    with tx.scope():
        admin = roles.find_by_name("ADMIN")
        first = users.save(_user(1, [admin]))
        second = users.save(_user(2, [admin]))

    with tx.scope():
        users.delete(first)

    with tx.scope() as session:
        assert users.find_by_id(first.user_id) is None
        assert users.find_by_id(second.user_id) is not None
        links = session.scalar(select(func.count()).select_from(user_roles))
    assert links == 1
