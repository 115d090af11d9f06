"""User transfer object (API contract)."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ..core.constants import EMAIL_MAX_LENGTH, PERSON_NAME_MAX_LENGTH, USERNAME_MAX_LENGTH
from ..roles.dto import RoleDto


class UserDto(BaseModel):
    """User data for requests and responses.

    ``roles`` left out (None) and ``roles`` empty are different requests:
    on update, None keeps the current role assignments.
    """

    id: Optional[int] = None
    username: str = Field(..., min_length=1, max_length=USERNAME_MAX_LENGTH)
    email: str = Field(..., min_length=1, max_length=EMAIL_MAX_LENGTH)
    name: Optional[str] = Field(default=None, max_length=PERSON_NAME_MAX_LENGTH)
    last_name: Optional[str] = Field(default=None, max_length=PERSON_NAME_MAX_LENGTH)
    roles: Optional[List[RoleDto]] = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, str_strip_whitespace=True)
