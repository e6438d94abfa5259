"""Pure state transitions: ``(snapshot, payload) -> snapshot``.

Natural-key writes only drop the existing records whose key the write
touches, then append; records under other keys are carried over as-is.
"""

from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime
from typing import Callable, Hashable, Iterable, Sequence, TypeVar

from ..attendance.model import AttendanceEntry, AttendanceRecord
from ..common.ids import new_id
from ..communications.model import CommunicationLog
from ..communications.notifier import build_absence_notifications
from ..core.enums import LeaveStatus
from ..documents.model import DocumentItem
from ..exams.model import Exam, Mark
from ..leaves.model import LeaveApplication
from ..notices.model import Notice
from ..students.model import Student
from ..teachers.model import Teacher
from ..timetables.model import TimeTable
from .snapshot import SchoolSnapshot

T = TypeVar("T")


def _last_per_key(items: Iterable[T], key: Callable[[T], Hashable]) -> list[T]:
    # Within one batch the last record for a key wins.
    return list({key(item): item for item in items}.values())


def _without_keys(items: Iterable[T], key: Callable[[T], Hashable], keys: set) -> tuple[T, ...]:
    return tuple(item for item in items if key(item) not in keys)


def add_student(state: SchoolSnapshot, student: Student) -> SchoolSnapshot:
    return replace(state, students=state.students + (student,))


def update_student(state: SchoolSnapshot, student: Student) -> SchoolSnapshot:
    return replace(state, students=tuple(student if s.id == student.id else s for s in state.students))


def add_teacher(state: SchoolSnapshot, teacher: Teacher) -> SchoolSnapshot:
    return replace(state, teachers=state.teachers + (teacher,))


def add_document(state: SchoolSnapshot, document: DocumentItem) -> SchoolSnapshot:
    return replace(state, documents=(document,) + state.documents)


def add_exam(state: SchoolSnapshot, exam: Exam) -> SchoolSnapshot:
    return replace(state, exams=state.exams + (exam,))


def add_notice(state: SchoolSnapshot, notice: Notice) -> SchoolSnapshot:
    return replace(state, notices=(notice,) + state.notices)


def delete_notice(state: SchoolSnapshot, notice_id: str) -> SchoolSnapshot:
    return replace(state, notices=tuple(n for n in state.notices if n.id != notice_id))


def save_timetable(state: SchoolSnapshot, timetable: TimeTable) -> SchoolSnapshot:
    positions = [i for i, t in enumerate(state.timetables) if t.key == timetable.key]
    if not positions:
        return replace(state, timetables=state.timetables + (timetable,))
    # The first record under the key is replaced in place.
    first = positions[0]
    return replace(
        state,
        timetables=tuple(
            timetable if i == first else t
            for i, t in enumerate(state.timetables)
            if i == first or t.key != timetable.key
        ),
    )


def save_batch_marks(state: SchoolSnapshot, marks: Sequence[Mark]) -> SchoolSnapshot:
    incoming = _last_per_key(marks, lambda m: m.key)
    kept = _without_keys(state.marks, lambda m: m.key, {m.key for m in incoming})
    return replace(state, marks=kept + tuple(incoming))


def apply_leave(state: SchoolSnapshot, leave: LeaveApplication) -> SchoolSnapshot:
    pending = replace(leave, status=LeaveStatus.PENDING)
    return replace(state, leaves=(pending,) + state.leaves)


def update_leave_status(state: SchoolSnapshot, leave_id: str, status: LeaveStatus) -> SchoolSnapshot:
    return replace(
        state,
        leaves=tuple(replace(leave, status=status) if leave.id == leave_id else leave for leave in state.leaves),
    )


def record_attendance(
    state: SchoolSnapshot,
    entries: Sequence[AttendanceEntry],
    *,
    today: date,
    id_factory: Callable[[], str] = new_id,
) -> SchoolSnapshot:
    """Write today's status for every entry, replacing earlier records for today."""
    records = _last_per_key(
        (
            AttendanceRecord(id=id_factory(), student_id=entry.student_id, date=today, status=entry.status)
            for entry in entries
        ),
        lambda a: a.key,
    )
    if not records:
        return state
    kept = _without_keys(state.attendance, lambda a: a.key, {a.key for a in records})
    return replace(state, attendance=kept + tuple(records))


def prepend_logs(state: SchoolSnapshot, logs: Sequence[CommunicationLog]) -> SchoolSnapshot:
    if not logs:
        return state
    return replace(state, communication_logs=tuple(logs) + state.communication_logs)


def mark_batch_attendance(
    state: SchoolSnapshot,
    entries: Sequence[AttendanceEntry],
    *,
    now: datetime,
    id_factory: Callable[[], str] = new_id,
) -> tuple[SchoolSnapshot, list[CommunicationLog]]:
    """Record the batch for ``now``'s day and derive the absentee notifications.

    Returns the new snapshot and the logs that were emitted.
    """
    today = now.date()
    state = record_attendance(state, entries, today=today, id_factory=id_factory)

    students_by_id = {s.id: s for s in state.students}
    logs = build_absence_notifications(
        entries,
        students_by_id,
        today=today,
        timestamp=now,
        id_factory=id_factory,
    )
    return prepend_logs(state, logs), logs
