from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one student's status for one calendar day."""

    id: str
    student_id: str
    date: date
    status: AttendanceStatus

    @property
    def key(self) -> tuple[str, date]:
        return (self.student_id, self.date)


@dataclass(frozen=True)
class AttendanceEntry:
    """One line of a batch submission."""

    student_id: str
    status: AttendanceStatus
