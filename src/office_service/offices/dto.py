from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ..core.constants import OFFICE_ADDRESS_MAX_LENGTH, OFFICE_NAME_MAX_LENGTH


class OfficeDto(BaseModel):
    id: Optional[int] = None
    name: str = Field(..., min_length=1, max_length=OFFICE_NAME_MAX_LENGTH)
    address: Optional[str] = Field(default=None, max_length=OFFICE_ADDRESS_MAX_LENGTH)

    model_config = ConfigDict(str_strip_whitespace=True)
