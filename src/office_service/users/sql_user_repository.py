from __future__ import annotations

from typing import Optional

from sqlalchemy import func, select

from ..common.pagination import Page, PageRequest
from ..database.connection import DatabaseConnection
from ..database.models import RoleRecord, UserRecord
from ..roles.sql_role_repository import to_role
from .model import User
from .repository import UserRepository


def to_user(record: UserRecord) -> User:
    return User(
        user_id=int(record.id),
        username=record.username,
        email=record.email,
        name=record.name,
        last_name=record.last_name,
        roles=tuple(to_role(r) for r in record.roles),
    )


class SqlUserRepository(UserRepository):
    def __init__(self, conn: DatabaseConnection):
        self._conn = conn

    def find_all(self, page: PageRequest) -> Page[User]:
        session = self._conn.session()
        total = session.scalar(select(func.count()).select_from(UserRecord)) or 0
        records = session.scalars(
            select(UserRecord).order_by(UserRecord.id).offset(page.offset).limit(page.size)
        ).all()
        return Page(items=[to_user(r) for r in records], total_elements=int(total))

    def find_by_id(self, user_id: int) -> Optional[User]:
        if user_id is None:
            return None
        record = self._conn.session().get(UserRecord, int(user_id))
        return to_user(record) if record else None

    def find_by_username(self, username: str) -> Optional[User]:
        record = self._conn.session().scalars(select(UserRecord).where(UserRecord.username == username)).first()
        return to_user(record) if record else None

    def find_by_email(self, email: str) -> Optional[User]:
        record = self._conn.session().scalars(select(UserRecord).where(UserRecord.email == email)).first()
        return to_user(record) if record else None

    def save(self, user: User) -> User:
        session = self._conn.session()
        record = session.get(UserRecord, user.user_id) if user.user_id is not None else None
        if record is None:
            record = UserRecord()
            session.add(record)

        record.username = user.username
        record.email = user.email
        record.name = user.name
        record.last_name = user.last_name
        record.roles = [session.get(RoleRecord, r.role_id) for r in user.roles]

        session.flush()
        return to_user(record)

    def delete(self, user: User) -> None:
        session = self._conn.session()
        record = session.get(UserRecord, user.user_id)
        if record is not None:
            session.delete(record)
            session.flush()
