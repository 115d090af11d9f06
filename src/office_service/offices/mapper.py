from __future__ import annotations

from typing import Optional

from .dto import OfficeDto
from .model import Office


def to_dto(office: Office) -> OfficeDto:
    return OfficeDto(id=office.office_id, name=office.name, address=office.address)


def to_entity(dto: OfficeDto, *, office_id: Optional[int] = None) -> Office:
    return Office(office_id=office_id, name=dto.name, address=dto.address)
