from __future__ import annotations

from typing import Iterable, Optional

from ..roles import mapper as role_mapper
from ..roles.model import Role
from .dto import UserDto
from .model import User


def to_dto(user: User) -> UserDto:
    return UserDto(
        id=user.user_id,
        username=user.username,
        email=user.email,
        name=user.name,
        last_name=user.last_name,
        roles=[role_mapper.to_dto(r) for r in user.roles],
    )


def to_entity(dto: UserDto, *, roles: Iterable[Role] = (), user_id: Optional[int] = None) -> User:
    """Build a User from a DTO.

    The DTO id is ignored: new users get their id from the store.
    """

    return User(
        user_id=user_id,
        username=dto.username,
        email=dto.email,
        name=dto.name,
        last_name=dto.last_name,
        roles=tuple(roles),
    )
