from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Role


class RoleRepository(Protocol):
    def find_by_id(self, role_id: Optional[int]) -> Optional[Role]:
        raise NotImplementedError

    def find_by_name(self, name: str) -> Optional[Role]:
        raise NotImplementedError

    def find_all(self) -> Sequence[Role]:
        raise NotImplementedError
