from __future__ import annotations

from typing import Optional, Protocol

from ..common.pagination import Page, PageRequest
from .model import Office


class OfficeRepository(Protocol):
    def find_all(self, page: PageRequest) -> Page[Office]:
        raise NotImplementedError

    def find_by_id(self, office_id: int) -> Optional[Office]:
        raise NotImplementedError

    def find_by_name(self, name: str) -> Optional[Office]:
        raise NotImplementedError

    def save(self, office: Office) -> Office:
        raise NotImplementedError

    def delete(self, office: Office) -> None:
        raise NotImplementedError
