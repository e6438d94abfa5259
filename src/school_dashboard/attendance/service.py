from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Mapping, Optional

from ..common.permissions import require_staff
from ..communications.model import CommunicationLog
from ..core.enums import AttendanceStatus, Role
from ..core.exceptions import NotFoundError, ValidationError
from ..store.store import SchoolStore
from ..users.model import SessionUser
from .model import AttendanceEntry, AttendanceRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AttendanceSubmission:
    entries: list[AttendanceEntry]
    notifications: list[CommunicationLog]

    @property
    def absentees(self) -> int:
        return sum(1 for e in self.entries if e.status == AttendanceStatus.ABSENT)


def parse_status(value) -> AttendanceStatus:
    try:
        return AttendanceStatus(value)
    except ValueError:
        raise ValidationError("invalid_status")


class AttendanceService:
    def __init__(self, store: SchoolStore):
        self._store = store

    def _section_students(self, class_name: str, section: str):
        return [s for s in self._store.students if s.class_name == class_name and s.section == section]

    def is_section_marked(self, class_name: str, section: str, *, today: Optional[date] = None) -> bool:
        """True when every student of the section already has a record for today."""
        today = today or self._store.today()
        students = self._section_students(class_name, section)
        return bool(students) and all(self._store.get_attendance(s.id, today) for s in students)

    def roster(self, class_name: str, section: str) -> list[dict]:
        """Section roster with today's status; unmarked students default to Present."""
        today = self._store.today()
        rows = []
        for s in self._section_students(class_name, section):
            record = self._store.get_attendance(s.id, today)
            rows.append(
                {
                    "student_id": s.id,
                    "name": s.name,
                    "emis_number": s.emis_number,
                    "status": (record.status if record else AttendanceStatus.PRESENT).value,
                    "marked": record is not None,
                }
            )
        return rows

    def submit_class(
        self,
        *,
        current_role: Role,
        class_name: str,
        section: str,
        statuses: Mapping[str, object],
    ) -> AttendanceSubmission:
        """Record a whole section in one batch.

        Teachers get one submission per section per day; Admin may overwrite.
        """
        role = require_staff(current_role)

        if role == Role.TEACHER and self.is_section_marked(class_name, section):
            raise ValidationError("attendance_locked")

        section_ids = {s.id for s in self._section_students(class_name, section)}
        entries: list[AttendanceEntry] = []
        for student_id, status in statuses.items():
            if student_id not in section_ids:
                raise NotFoundError("student_not_found")
            entries.append(AttendanceEntry(student_id=student_id, status=parse_status(status)))

        if not entries:
            raise ValidationError("empty_batch")

        logs = self._store.mark_batch_attendance(entries)
        return AttendanceSubmission(entries=entries, notifications=logs)

    def mark_student(self, *, current_role: Role, student_id: str, status) -> None:
        require_staff(current_role)
        if not self._store.get_student(student_id):
            raise NotFoundError("student_not_found")
        self._store.mark_attendance(student_id, parse_status(status))

    def my_today(self, user: SessionUser) -> Optional[AttendanceRecord]:
        """Today's record for a logged-in student, matched on the profile name."""
        if user.role != Role.STUDENT:
            return None
        profile = next((s for s in self._store.students if s.name == user.name), None)
        if not profile:
            return None
        return self._store.get_attendance(profile.id, self._store.today())

    def section_summary(self, class_name: str, section: str) -> dict:
        today = self._store.today()
        counts = {status: 0 for status in AttendanceStatus}
        for s in self._section_students(class_name, section):
            record = self._store.get_attendance(s.id, today)
            if record:
                counts[record.status] += 1
        return {
            "present": counts[AttendanceStatus.PRESENT],
            "absent": counts[AttendanceStatus.ABSENT],
            "late": counts[AttendanceStatus.LATE],
            "leave": counts[AttendanceStatus.LEAVE],
        }

    def school_present_count(self) -> int:
        today = self._store.today()
        return sum(1 for a in self._store.attendance if a.date == today and a.status == AttendanceStatus.PRESENT)

    def history_for_student(self, student_id: str) -> list[AttendanceRecord]:
        return sorted(
            (a for a in self._store.attendance if a.student_id == student_id),
            key=lambda a: a.date,
            reverse=True,
        )
