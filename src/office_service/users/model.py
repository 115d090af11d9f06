from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

from ..roles.model import Role


@dataclass(frozen=True)
class User:
    """Domain entity: User.

    Plain data object; ``user_id`` stays ``None`` until the store saves it.
    """

    user_id: Optional[int]
    username: str
    email: str
    name: Optional[str] = None
    last_name: Optional[str] = None
    roles: Tuple[Role, ...] = field(default_factory=tuple)
