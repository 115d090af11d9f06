from __future__ import annotations

from typing import Optional

from .enums import ErrorCode


class DomainError(Exception):
    """Base exception for business rule violations."""

    default_code = ErrorCode.UNKNOWN_ERROR

    def __init__(self, message: str = "", error_code: Optional[ErrorCode] = None):
        self.error_code = error_code or self.default_code
        super().__init__(message or self.error_code.name)

    @property
    def message(self) -> str:
        return str(self)


class ValidationError(DomainError):
    """Raised when input data is invalid."""

    default_code = ErrorCode.REQUIRED_FIELD


class BusinessError(DomainError):
    """Raised when an operation cannot proceed, e.g. the target entity is missing.

    The HTTP layer translates it into a failure envelope carrying ``error_code``.
    """

    def __init__(self, error_code: ErrorCode, message: str = ""):
        super().__init__(message, error_code)
