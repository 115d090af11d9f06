from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Office:
    office_id: Optional[int]
    name: str
    address: Optional[str] = None
