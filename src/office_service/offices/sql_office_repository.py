from __future__ import annotations

from typing import Optional

from sqlalchemy import func, select

from ..common.pagination import Page, PageRequest
from ..database.connection import DatabaseConnection
from ..database.models import OfficeRecord
from .model import Office
from .repository import OfficeRepository


def to_office(record: OfficeRecord) -> Office:
    return Office(office_id=int(record.id), name=record.name, address=record.address)


class SqlOfficeRepository(OfficeRepository):
    def __init__(self, conn: DatabaseConnection):
        self._conn = conn

    def find_all(self, page: PageRequest) -> Page[Office]:
        session = self._conn.session()
        total = session.scalar(select(func.count()).select_from(OfficeRecord)) or 0
        records = session.scalars(
            select(OfficeRecord).order_by(OfficeRecord.id).offset(page.offset).limit(page.size)
        ).all()
        return Page(items=[to_office(r) for r in records], total_elements=int(total))

    def find_by_id(self, office_id: int) -> Optional[Office]:
        if office_id is None:
            return None
        record = self._conn.session().get(OfficeRecord, int(office_id))
        return to_office(record) if record else None

    def find_by_name(self, name: str) -> Optional[Office]:
        record = self._conn.session().scalars(select(OfficeRecord).where(OfficeRecord.name == name)).first()
        return to_office(record) if record else None

    def save(self, office: Office) -> Office:
        session = self._conn.session()
        record = session.get(OfficeRecord, office.office_id) if office.office_id is not None else None
        if record is None:
            record = OfficeRecord()
            session.add(record)

        record.name = office.name
        record.address = office.address
        session.flush()
        return to_office(record)

    def delete(self, office: Office) -> None:
        session = self._conn.session()
        record = session.get(OfficeRecord, office.office_id)
        if record is not None:
            session.delete(record)
            session.flush()
