from __future__ import annotations

from dataclasses import dataclass

from ..attendance.model import AttendanceRecord
from ..communications.model import CommunicationLog
from ..documents.model import DocumentItem
from ..exams.model import Exam, Mark
from ..leaves.model import LeaveApplication
from ..notices.model import Notice
from ..students.model import Student
from ..teachers.model import Teacher
from ..timetables.model import TimeTable


@dataclass(frozen=True)
class SchoolSnapshot:
    """Immutable view of every collection the school holds.

    Collections are ordered tuples; every mutation produces a new snapshot.
    """

    students: tuple[Student, ...] = ()
    teachers: tuple[Teacher, ...] = ()
    documents: tuple[DocumentItem, ...] = ()
    exams: tuple[Exam, ...] = ()
    attendance: tuple[AttendanceRecord, ...] = ()
    notices: tuple[Notice, ...] = ()
    communication_logs: tuple[CommunicationLog, ...] = ()
    timetables: tuple[TimeTable, ...] = ()
    marks: tuple[Mark, ...] = ()
    leaves: tuple[LeaveApplication, ...] = ()

    @classmethod
    def of(cls, **collections) -> "SchoolSnapshot":
        """Build a snapshot from any iterables (lists from fixtures, ...)."""
        return cls(**{name: tuple(items) for name, items in collections.items()})
