from __future__ import annotations

from typing import Optional, Sequence

from sqlalchemy import select

from ..database.connection import DatabaseConnection
from ..database.models import RoleRecord
from .model import Role
from .repository import RoleRepository


def to_role(record: RoleRecord) -> Role:
    return Role(role_id=int(record.id), name=record.name, description=record.description)


class SqlRoleRepository(RoleRepository):
    def __init__(self, conn: DatabaseConnection):
        self._conn = conn

    def find_by_id(self, role_id: Optional[int]) -> Optional[Role]:
        if role_id is None:
            return None
        record = self._conn.session().get(RoleRecord, int(role_id))
        return to_role(record) if record else None

    def find_by_name(self, name: str) -> Optional[Role]:
        record = self._conn.session().scalars(select(RoleRecord).where(RoleRecord.name == name)).first()
        return to_role(record) if record else None

    def find_all(self) -> Sequence[Role]:
        records = self._conn.session().scalars(select(RoleRecord).order_by(RoleRecord.id)).all()
        return [to_role(r) for r in records]
