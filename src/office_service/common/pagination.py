from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, Sequence, TypeVar

from pydantic import BaseModel, Field

from ..core.constants import DEFAULT_PAGE_LIMIT
from ..core.exceptions import ValidationError

T = TypeVar("T")


class PaginatedRequestDto(BaseModel):
    """Offset/limit paging as sent by API clients."""

    offset: int = Field(default=0, ge=0)
    limit: int = Field(default=DEFAULT_PAGE_LIMIT, gt=0)


@dataclass(frozen=True)
class PageRequest:
    """Zero-based page index plus page size, always sorted by id."""

    page: int
    size: int

    @classmethod
    def from_offset(cls, offset: int, limit: int) -> "PageRequest":
        # Offsets that are not a multiple of limit truncate to the containing page.
        if limit <= 0:
            raise ValidationError("limit must be greater than zero")
        if offset < 0:
            raise ValidationError("offset must not be negative")
        return cls(page=offset // limit, size=limit)

    @property
    def offset(self) -> int:
        return self.page * self.size


@dataclass(frozen=True)
class Page(Generic[T]):
    items: Sequence[T] = field(default_factory=tuple)
    total_elements: int = 0
