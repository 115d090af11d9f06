from __future__ import annotations

from .dto import RoleDto
from .model import Role


def to_dto(role: Role) -> RoleDto:
    return RoleDto(id=role.role_id, name=role.name, description=role.description)
