from __future__ import annotations

import logging
from dataclasses import replace
from typing import List, Optional, Tuple, Union

from ..common.pagination import PageRequest, PaginatedRequestDto
from ..common.responses import GenericResponseDto, PaginatedResponseDto, error_response
from ..core.enums import ErrorCode
from ..core.exceptions import BusinessError
from ..database.transaction import TransactionManager
from ..roles.dto import RoleDto
from ..roles.model import Role
from ..roles.repository import RoleRepository
from . import mapper
from .dto import UserDto
from .model import User
from .repository import UserRepository

logger = logging.getLogger(__name__)

USERNAME_EXISTS_MESSAGE = "Error. Username already exists."
EMAIL_EXISTS_MESSAGE = "Error. Email already exists."
NOT_ROLE_SELECTED_MESSAGE = "Error. You must select at least one role."
ROLE_NOT_FOUND_MESSAGE = "Error. Role selected does not exist."
USER_NOT_FOUND_MESSAGE = "Error. User does not exist."


class UserService:
    """Use case: manage users and their role assignments.

    Validation failures on create/update come back as envelopes with an
    error header. A missing user on update/delete raises ``BusinessError``.
    Every public method runs in its own transaction scope.
    """

    def __init__(self, users: UserRepository, roles: RoleRepository, transactions: TransactionManager):
        self._users = users
        self._roles = roles
        self._tx = transactions

    def find_users(self, request: PaginatedRequestDto) -> PaginatedResponseDto[UserDto]:
        logger.debug("find_users %s", request)
        page_request = PageRequest.from_offset(request.offset, request.limit)

        with self._tx.scope():
            page = self._users.find_all(page_request)
            data = [mapper.to_dto(u) for u in page.items]

        return PaginatedResponseDto[UserDto](
            page=page_request.page,
            size=page_request.size,
            total_elements=page.total_elements,
            data=data,
        )

    def find(self, user_id: int) -> Optional[GenericResponseDto[UserDto]]:
        """Return the user wrapped in an envelope, or None when it does not exist."""

        with self._tx.scope():
            user = self._users.find_by_id(user_id)
            if user is None:
                return None
            return GenericResponseDto[UserDto](body=mapper.to_dto(user))

    def create(self, dto: UserDto) -> GenericResponseDto[UserDto]:
        with self._tx.scope():
            if self._exist_username(dto.username):
                return self._reject(ErrorCode.USERNAME_ALREADY_EXISTS, USERNAME_EXISTS_MESSAGE)

            if self._exist_email(dto.email):
                return self._reject(ErrorCode.EMAIL_ALREADY_EXISTS, EMAIL_EXISTS_MESSAGE)

            roles = self._resolve_roles(dto.roles)
            if isinstance(roles, GenericResponseDto):
                return roles

            saved = self._users.save(mapper.to_entity(dto, roles=roles))

        dto.id = saved.user_id
        logger.info("Created user %s (id=%s)", saved.username, saved.user_id)
        return GenericResponseDto[UserDto](body=dto)

    def update(self, dto: UserDto) -> GenericResponseDto[bool]:
        with self._tx.scope():
            current = self._users.find_by_id(dto.id)
            if current is None:
                raise BusinessError(ErrorCode.USER_NOT_FOUND, USER_NOT_FOUND_MESSAGE)

            if self._taken_by_other(self._users.find_by_username(dto.username), current):
                return self._reject(ErrorCode.USERNAME_ALREADY_EXISTS, USERNAME_EXISTS_MESSAGE)

            if self._taken_by_other(self._users.find_by_email(dto.email), current):
                return self._reject(ErrorCode.EMAIL_ALREADY_EXISTS, EMAIL_EXISTS_MESSAGE)

            roles = current.roles
            if dto.roles is not None:
                resolved = self._resolve_roles(dto.roles)
                if isinstance(resolved, GenericResponseDto):
                    return resolved
                roles = resolved

            updated = replace(
                current,
                username=dto.username,
                email=dto.email,
                name=dto.name,
                last_name=dto.last_name,
                roles=roles,
            )
            self._users.save(updated)

        logger.info("Updated user id=%s", current.user_id)
        return GenericResponseDto[bool](body=True)

    def delete(self, user_id: int) -> GenericResponseDto[bool]:
        with self._tx.scope():
            user = self._users.find_by_id(user_id)
            if user is None:
                raise BusinessError(ErrorCode.USER_NOT_FOUND, USER_NOT_FOUND_MESSAGE)

            self._users.delete(user)

        logger.info("Deleted user id=%s", user_id)
        return GenericResponseDto[bool](body=True)

    def exist_username(self, username: str) -> bool:
        with self._tx.scope():
            return self._exist_username(username)

    def exist_email(self, email: str) -> bool:
        with self._tx.scope():
            return self._exist_email(email)

    def exist_role(self, role_id: int) -> bool:
        with self._tx.scope():
            return self._exist_role(role_id)

    def _exist_username(self, username: str) -> bool:
        return self._users.find_by_username(username) is not None

    def _exist_email(self, email: str) -> bool:
        return self._users.find_by_email(email) is not None

    def _exist_role(self, role_id: Optional[int]) -> bool:
        return self._roles.find_by_id(role_id) is not None

    @staticmethod
    def _taken_by_other(match: Optional[User], current: User) -> bool:
        # The store may compare case-insensitively, so a match can be the user itself.
        return match is not None and match.user_id != current.user_id

    def _resolve_roles(self, requested: Optional[List[RoleDto]]) -> Union[Tuple[Role, ...], GenericResponseDto]:
        """Check the requested roles and load them, or return the error envelope."""

        if requested is None or len(requested) == 0:
            return self._reject(ErrorCode.NOT_ROLE_SELECTED, NOT_ROLE_SELECTED_MESSAGE)

        if any(not self._exist_role(r.id) for r in requested):
            return self._reject(ErrorCode.ROLE_NOT_FOUND, ROLE_NOT_FOUND_MESSAGE)

        # Existence was checked above; repeated ids collapse into one link.
        role_ids = dict.fromkeys(r.id for r in requested)
        return tuple(self._roles.find_by_id(role_id) for role_id in role_ids)

    def _reject(self, code: ErrorCode, message: str) -> GenericResponseDto:
        logger.info("User request rejected: %s", code.name)
        return error_response(code, message)
