from __future__ import annotations

from enum import Enum


class ErrorCode(int, Enum):
    """Error codes carried in response headers and business exceptions."""

    UNKNOWN_ERROR = 0
    REQUIRED_FIELD = 1
    EXCEEDS_MAX_LENGTH = 2

    # Validation errors
    OFFICE_ALREADY_EXISTS = 100
    OFFICE_NOT_FOUND = 101

    USERNAME_ALREADY_EXISTS = 200
    EMAIL_ALREADY_EXISTS = 201
    NOT_ROLE_SELECTED = 202
    ROLE_NOT_FOUND = 203
    USER_NOT_FOUND = 204

    @property
    def code(self) -> int:
        return int(self.value)


NOT_FOUND_CODES = frozenset({ErrorCode.OFFICE_NOT_FOUND, ErrorCode.USER_NOT_FOUND})
