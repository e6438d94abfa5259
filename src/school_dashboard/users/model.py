from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class SessionUser:
    """The identity of the current session.

    No credentials are stored: whoever logs in is taken at their word.
    """

    id: str
    name: str
    email: str
    role: Role
    avatar: Optional[str] = None
