"""Role transfer object."""

from typing import Optional

from pydantic import BaseModel, Field

from ..core.constants import ROLE_DESCRIPTION_MAX_LENGTH, ROLE_NAME_MAX_LENGTH


class RoleDto(BaseModel):
    """Role reference; only ``id`` is required when assigning roles to a user."""

    id: Optional[int] = None
    name: Optional[str] = Field(default=None, max_length=ROLE_NAME_MAX_LENGTH)
    description: Optional[str] = Field(default=None, max_length=ROLE_DESCRIPTION_MAX_LENGTH)
