"""Response envelopes shared by every service.

A ``GenericResponseDto`` carries either a body or a header with a nonzero
error code. Callers must check ``is_error`` before trusting the body.
"""

from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ..core.enums import ErrorCode

T = TypeVar("T")


class HeaderDto(BaseModel):
    """Error header: numeric code plus human-readable message."""

    code: int = ErrorCode.UNKNOWN_ERROR.code
    message: Optional[str] = None


class GenericResponseDto(BaseModel, Generic[T]):
    header: Optional[HeaderDto] = None
    body: Optional[T] = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @property
    def is_error(self) -> bool:
        """True for a header with a nonzero code.

        ``UNKNOWN_ERROR`` is code 0, so failures without a specific code
        (500s, out-of-range paging) are not flagged here; the HTTP status
        is what marks them as errors.
        """

        return self.header is not None and self.header.code != ErrorCode.UNKNOWN_ERROR.code


class PaginatedResponseDto(BaseModel, Generic[T]):
    page: int
    size: int
    total_elements: int
    data: List[T] = Field(default_factory=list)

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def error_response(code: ErrorCode, message: str) -> GenericResponseDto:
    return GenericResponseDto(header=HeaderDto(code=code.code, message=message))
