from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.constants import DEFAULT_TOTAL_MARKS, PASS_MARK_PERCENT, RECENT_LOGS_LIMIT
from ..core.enums import AttendanceStatus, Gender
from ..store.store import SchoolStore


@dataclass(frozen=True)
class DashboardData:
    totals: dict
    attendance_today: dict
    exam_results: dict
    gender_split: dict
    recent_logs: list[dict]


def _percent(part: int, whole: int) -> str:
    return f"{part / whole * 100:.1f}" if whole else "0"


class DashboardService:
    def __init__(self, store: SchoolStore, *, pass_mark_percent: int = PASS_MARK_PERCENT):
        self._store = store
        self._pass_mark = pass_mark_percent

    def exam_results(self) -> dict:
        """Pass / fail over every recorded mark, scored as a percentage of the exam total."""
        totals = {e.id: e.total_marks for e in self._store.exams}
        passed = failed = 0
        for mark in self._store.marks:
            total = totals.get(mark.exam_id) or DEFAULT_TOTAL_MARKS
            if mark.obtained_marks / total * 100 >= self._pass_mark:
                passed += 1
            else:
                failed += 1

        recorded = passed + failed
        return {
            "pass": passed,
            "fail": failed,
            "pass_percentage": _percent(passed, recorded),
            "fail_percentage": _percent(failed, recorded),
        }

    def build(self, *, log_limit: Optional[int] = RECENT_LOGS_LIMIT) -> DashboardData:
        today = self._store.today()
        todays = [a for a in self._store.attendance if a.date == today]

        logs = self._store.communication_logs
        if log_limit is not None:
            logs = logs[:log_limit]

        return DashboardData(
            totals={
                "students": len(self._store.students),
                "teachers": len(self._store.teachers),
                "documents": len(self._store.documents),
                "notices": len(self._store.notices),
            },
            attendance_today={
                "date": today.isoformat(),
                "present": sum(1 for a in todays if a.status == AttendanceStatus.PRESENT),
                "absent": sum(1 for a in todays if a.status == AttendanceStatus.ABSENT),
            },
            exam_results=self.exam_results(),
            gender_split={
                "boys": sum(1 for s in self._store.students if s.gender == Gender.MALE),
                "girls": sum(1 for s in self._store.students if s.gender == Gender.FEMALE),
            },
            recent_logs=[
                {
                    "id": log.id,
                    "student_name": log.student_name,
                    "parent_phone": log.parent_phone,
                    "message": log.message,
                    "type": log.type.value,
                    "timestamp": log.timestamp.isoformat(timespec="seconds"),
                    "status": log.status.value,
                }
                for log in logs
            ],
        )
