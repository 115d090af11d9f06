from __future__ import annotations

from typing import Optional, Protocol

from ..common.pagination import Page, PageRequest
from .model import User


class UserRepository(Protocol):
    """Repository interface for User.

    The service layer depends on this interface, not on a concrete database.
    """

    def find_all(self, page: PageRequest) -> Page[User]:
        """Return one page of users sorted by id, plus the total count."""

        raise NotImplementedError

    def find_by_id(self, user_id: int) -> Optional[User]:
        raise NotImplementedError

    def find_by_username(self, username: str) -> Optional[User]:
        raise NotImplementedError

    def find_by_email(self, email: str) -> Optional[User]:
        raise NotImplementedError

    def save(self, user: User) -> User:
        """Insert when ``user_id`` is None, update otherwise.

        Returns the stored user with its assigned id.
        """

        raise NotImplementedError

    def delete(self, user: User) -> None:
        raise NotImplementedError
