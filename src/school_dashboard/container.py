from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional

from .attendance.service import AttendanceService
from .common.datetime_utils import now_local
from .core.constants import MAX_DOCUMENT_BYTES
from .documents.service import DocumentService
from .exams.service import ExamService
from .leaves.service import LeaveService
from .notices.service import NoticeService
from .reports.service import DashboardService
from .seed.fixtures import demo_snapshot
from .store.snapshot import SchoolSnapshot
from .store.store import SchoolStore
from .students.service import StudentService
from .teachers.service import TeacherService
from .timetables.service import TimeTableService
from .users.service import SessionService


@dataclass(frozen=True)
class Container:
    store: SchoolStore

    session_service: SessionService
    student_service: StudentService
    teacher_service: TeacherService
    document_service: DocumentService
    notice_service: NoticeService
    exam_service: ExamService
    attendance_service: AttendanceService
    timetable_service: TimeTableService
    leave_service: LeaveService
    dashboard_service: DashboardService


def build_container(
    *,
    snapshot: Optional[SchoolSnapshot] = None,
    seed_demo_data: bool = False,
    clock: Callable[[], datetime] = now_local,
    max_document_bytes: int = MAX_DOCUMENT_BYTES,
) -> Container:
    if snapshot is None and seed_demo_data:
        snapshot = demo_snapshot(clock().date())

    store = SchoolStore(snapshot, clock=clock)

    return Container(
        store=store,
        session_service=SessionService(),
        student_service=StudentService(store),
        teacher_service=TeacherService(store),
        document_service=DocumentService(store, max_bytes=max_document_bytes),
        notice_service=NoticeService(store),
        exam_service=ExamService(store),
        attendance_service=AttendanceService(store),
        timetable_service=TimeTableService(store),
        leave_service=LeaveService(store),
        dashboard_service=DashboardService(store),
    )
