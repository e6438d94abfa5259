from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import LeaveStatus, Role


@dataclass(frozen=True)
class LeaveApplication:
    id: str
    user_id: str
    user_name: str
    user_role: Role
    from_date: date
    to_date: date
    reason: str
    status: LeaveStatus
    applied_on: date
    # Students only
    class_name: Optional[str] = None
    section: Optional[str] = None
    # Teachers only
    designation: Optional[str] = None
