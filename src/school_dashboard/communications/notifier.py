"""Automated parent notification for absentees.

The rule is a pure function of the attendance batch and the student
directory so it can be exercised without a store.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Callable, Iterable, Mapping, Optional

from ..attendance.model import AttendanceEntry
from ..common.ids import new_id
from ..students.model import Student
from .factory import NotificationChannelFactory
from .model import CommunicationLog

ABSENCE_MESSAGE = "Dear Parent, your child {name} is absent today ({today}). Please check."


def absence_message(*, student_name: str, today: date) -> str:
    return ABSENCE_MESSAGE.format(name=student_name, today=today.isoformat())


def build_absence_notifications(
    entries: Iterable[AttendanceEntry],
    students_by_id: Mapping[str, Student],
    *,
    today: date,
    timestamp: datetime,
    id_factory: Callable[[], str] = new_id,
    factory: Optional[NotificationChannelFactory] = None,
) -> list[CommunicationLog]:
    """Return the logs to emit for ``entries``, in batch order.

    Students missing from the directory are skipped without error.
    """
    factory = factory or NotificationChannelFactory()
    logs: list[CommunicationLog] = []

    for entry in entries:
        channels = factory.for_status(entry.status)
        if not channels:
            continue

        student = students_by_id.get(entry.student_id)
        if not student:
            continue

        text = absence_message(student_name=student.name, today=today)
        for channel in channels:
            rendered = channel.render(text)
            logs.append(
                CommunicationLog(
                    id=id_factory(),
                    student_name=student.name,
                    parent_phone=student.phone,
                    message=rendered,
                    type=channel.channel,
                    timestamp=timestamp,
                    status=channel.deliver(parent_phone=student.phone, message=rendered),
                )
            )

    return logs
