from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Callable, Iterable, Optional, Sequence

from ..attendance.model import AttendanceEntry, AttendanceRecord
from ..common.datetime_utils import now_local
from ..common.ids import new_id
from ..communications.model import CommunicationLog
from ..core.enums import AttendanceStatus, LeaveStatus
from ..documents.model import DocumentItem
from ..exams.model import Exam, Mark
from ..leaves.model import LeaveApplication
from ..notices.model import Notice
from ..students.model import Student
from ..teachers.model import Teacher
from ..timetables.model import TimeTable
from . import reducers
from .snapshot import SchoolSnapshot

logger = logging.getLogger(__name__)


class SchoolStore:
    """Owns the canonical school collections.

    All mutation goes through the methods below; each one computes a new
    snapshot with a pure reducer and swaps it in with a single assignment.
    Readers get tuples, so nothing outside the store can edit a collection.
    """

    def __init__(
        self,
        initial: Optional[SchoolSnapshot] = None,
        *,
        clock: Callable[[], datetime] = now_local,
        id_factory: Callable[[], str] = new_id,
    ):
        self._state = initial or SchoolSnapshot()
        self._clock = clock
        self._new_id = id_factory

    @property
    def snapshot(self) -> SchoolSnapshot:
        return self._state

    @property
    def students(self) -> tuple[Student, ...]:
        return self._state.students

    @property
    def teachers(self) -> tuple[Teacher, ...]:
        return self._state.teachers

    @property
    def documents(self) -> tuple[DocumentItem, ...]:
        return self._state.documents

    @property
    def exams(self) -> tuple[Exam, ...]:
        return self._state.exams

    @property
    def attendance(self) -> tuple[AttendanceRecord, ...]:
        return self._state.attendance

    @property
    def notices(self) -> tuple[Notice, ...]:
        return self._state.notices

    @property
    def communication_logs(self) -> tuple[CommunicationLog, ...]:
        return self._state.communication_logs

    @property
    def timetables(self) -> tuple[TimeTable, ...]:
        return self._state.timetables

    @property
    def marks(self) -> tuple[Mark, ...]:
        return self._state.marks

    @property
    def leaves(self) -> tuple[LeaveApplication, ...]:
        return self._state.leaves

    def today(self) -> date:
        return self._clock().date()

    def new_id(self) -> str:
        return self._new_id()

    # Lookups (null-object: a miss returns None)
    def get_student(self, student_id: str) -> Optional[Student]:
        return next((s for s in self._state.students if s.id == student_id), None)

    def get_exam(self, exam_id: str) -> Optional[Exam]:
        return next((e for e in self._state.exams if e.id == exam_id), None)

    def get_leave(self, leave_id: str) -> Optional[LeaveApplication]:
        return next((leave for leave in self._state.leaves if leave.id == leave_id), None)

    def get_attendance(self, student_id: str, day: date) -> Optional[AttendanceRecord]:
        return next((a for a in self._state.attendance if a.student_id == student_id and a.date == day), None)

    def get_timetable(self, class_name: str, section: str) -> Optional[TimeTable]:
        return next((t for t in self._state.timetables if t.key == (class_name, section)), None)

    # Mutations
    def add_student(self, student: Student) -> None:
        self._state = reducers.add_student(self._state, student)
        logger.info("Student %s added (%s-%s)", student.id, student.class_name, student.section)

    def update_student(self, student: Student) -> None:
        self._state = reducers.update_student(self._state, student)
        logger.info("Student %s updated", student.id)

    def add_teacher(self, teacher: Teacher) -> None:
        self._state = reducers.add_teacher(self._state, teacher)
        logger.info("Teacher %s added", teacher.id)

    def add_document(self, document: DocumentItem) -> None:
        self._state = reducers.add_document(self._state, document)
        logger.info("Document %s added (%s)", document.id, document.title)

    def add_exam(self, exam: Exam) -> None:
        self._state = reducers.add_exam(self._state, exam)
        logger.info("Exam %s added for class %s", exam.id, exam.class_name)

    def add_notice(self, notice: Notice) -> None:
        self._state = reducers.add_notice(self._state, notice)
        logger.info("Notice %s posted", notice.id)

    def delete_notice(self, notice_id: str) -> None:
        self._state = reducers.delete_notice(self._state, notice_id)
        logger.info("Notice %s deleted", notice_id)

    def save_timetable(self, timetable: TimeTable) -> None:
        self._state = reducers.save_timetable(self._state, timetable)
        logger.info("Timetable saved for %s-%s", timetable.class_name, timetable.section)

    def save_batch_marks(self, marks: Sequence[Mark]) -> None:
        marks = list(marks)
        self._state = reducers.save_batch_marks(self._state, marks)
        logger.info("Saved %d marks", len(marks))

    def apply_leave(self, leave: LeaveApplication) -> None:
        self._state = reducers.apply_leave(self._state, leave)
        logger.info("Leave %s applied by %s (%s)", leave.id, leave.user_name, leave.user_role.value)

    def update_leave_status(self, leave_id: str, status: LeaveStatus) -> None:
        self._state = reducers.update_leave_status(self._state, leave_id, LeaveStatus(status))
        logger.info("Leave %s set to %s", leave_id, LeaveStatus(status).value)

    def mark_attendance(self, student_id: str, status: AttendanceStatus) -> None:
        """Record a single student's status for today. No parent notification."""
        entry = AttendanceEntry(student_id=student_id, status=AttendanceStatus(status))
        self._state = reducers.record_attendance(self._state, [entry], today=self.today(), id_factory=self._new_id)
        logger.info("Attendance for %s set to %s", student_id, entry.status.value)

    def mark_batch_attendance(self, entries: Iterable[AttendanceEntry]) -> list[CommunicationLog]:
        """Record a class roster for today and notify parents of absentees.

        Returns the communication logs produced by this batch.
        """
        entries = list(entries)
        self._state, logs = reducers.mark_batch_attendance(
            self._state,
            entries,
            now=self._clock(),
            id_factory=self._new_id,
        )
        logger.info("Attendance batch of %d recorded, %d parent notifications sent", len(entries), len(logs))
        return logs
