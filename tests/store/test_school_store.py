from __future__ import annotations

from collections import Counter
from dataclasses import replace
from datetime import date, datetime

from school_dashboard.attendance.model import AttendanceEntry, AttendanceRecord
from school_dashboard.core.enums import AttendanceStatus, LeaveStatus, MessageChannel, NoticeType, Role
from school_dashboard.exams.model import Mark
from school_dashboard.leaves.model import LeaveApplication
from school_dashboard.notices.model import Notice
from school_dashboard.store.snapshot import SchoolSnapshot
from school_dashboard.store.store import SchoolStore
from school_dashboard.timetables.model import TimeTable, TimeTableDay


def _day(name: str, subject: str) -> TimeTableDay:
    return TimeTableDay(day=name, periods=(subject,) * 8)


def test_batch_attendance_writes_today_and_notifies_absentees(store, fixed_now):
    store.mark_batch_attendance(
        [
            AttendanceEntry("s1", AttendanceStatus.PRESENT),
            AttendanceEntry("s2", AttendanceStatus.ABSENT),
        ]
    )

    today = fixed_now.date()
    assert store.get_attendance("s1", today).status == AttendanceStatus.PRESENT
    assert store.get_attendance("s2", today).status == AttendanceStatus.ABSENT

    logs = store.communication_logs
    assert len(logs) == 2
    assert {log.type for log in logs} == {MessageChannel.SMS, MessageChannel.VOICE_NOTE}
    assert all(log.student_name == "Priya Dharshini" for log in logs)
    assert all(log.parent_phone == "9876543211" for log in logs)
    assert all(log.status.value == "Sent" for log in logs)
    assert not any("Karthik" in log.message for log in logs)


def test_batch_attendance_keeps_one_record_per_student_per_day(store, fixed_now):
    store.mark_batch_attendance([AttendanceEntry("s1", AttendanceStatus.ABSENT)])
    store.mark_batch_attendance([AttendanceEntry("s1", AttendanceStatus.LATE)])
    store.mark_batch_attendance([AttendanceEntry("s1", AttendanceStatus.PRESENT), AttendanceEntry("s3", AttendanceStatus.LEAVE)])

    keys = Counter((a.student_id, a.date) for a in store.attendance)
    assert max(keys.values()) == 1
    assert store.get_attendance("s1", fixed_now.date()).status == AttendanceStatus.PRESENT


def test_batch_attendance_keeps_other_days():
    yesterday = datetime(2026, 2, 1, 9, 0)
    today = datetime(2026, 2, 2, 9, 0)
    clock = iter([yesterday, today])
    store = SchoolStore(clock=lambda: next(clock))

    store.mark_batch_attendance([AttendanceEntry("s1", AttendanceStatus.ABSENT)])
    store.mark_batch_attendance([AttendanceEntry("s1", AttendanceStatus.PRESENT)])

    assert [(a.date, a.status) for a in store.attendance] == [
        (date(2026, 2, 1), AttendanceStatus.ABSENT),
        (date(2026, 2, 2), AttendanceStatus.PRESENT),
    ]


def test_empty_batch_changes_nothing(store):
    before = store.snapshot

    logs = store.mark_batch_attendance([])

    assert logs == []
    assert list(store.attendance) == list(before.attendance)
    assert list(store.communication_logs) == list(before.communication_logs)


def _record(record_id, student_id, day, status=AttendanceStatus.PRESENT):
    return AttendanceRecord(id=record_id, student_id=student_id, date=day, status=status)


def test_batches_leave_untouched_keys_as_injected():
    old_day = date(2026, 1, 5)
    snapshot = SchoolSnapshot.of(
        attendance=[_record("a1", "s9", old_day), _record("a2", "s9", old_day, AttendanceStatus.ABSENT)],
        marks=[Mark("m1", "e9", "s9", 40), Mark("m2", "e9", "s9", 45)],
    )
    store = SchoolStore(snapshot, clock=lambda: datetime(2026, 2, 2, 9, 0))

    store.mark_batch_attendance([])
    assert store.attendance == snapshot.attendance

    store.mark_batch_attendance([AttendanceEntry("s1", AttendanceStatus.PRESENT)])
    assert [a.id for a in store.attendance][:2] == ["a1", "a2"]

    store.save_batch_marks([Mark("x", "e1", "s1", 50)])
    assert [m.id for m in store.marks] == ["m1", "m2", "x"]


def test_save_timetable_replaces_only_its_key():
    snapshot = SchoolSnapshot.of(
        timetables=[
            TimeTable("tt1", "9", "B", (_day("Monday", "Art"),)),
            TimeTable("tt2", "10", "A", (_day("Monday", "Maths"),)),
        ]
    )
    store = SchoolStore(snapshot)

    store.save_timetable(TimeTable("tt2", "10", "A", (_day("Monday", "Science"),)))

    assert [t.id for t in store.timetables] == ["tt1", "tt2"]
    assert store.timetables[0] is snapshot.timetables[0]
    assert store.get_timetable("10", "A").schedule[0].periods[0] == "Science"


def test_new_logs_are_prepended_newest_first(store):
    store.mark_batch_attendance([AttendanceEntry("s2", AttendanceStatus.ABSENT)])
    store.mark_batch_attendance([AttendanceEntry("s3", AttendanceStatus.ABSENT)])

    names = [log.student_name for log in store.communication_logs]
    assert names == ["Abdul Basith", "Abdul Basith", "Priya Dharshini", "Priya Dharshini"]


def test_single_mark_attendance_sends_no_notification(store, fixed_now):
    store.mark_attendance("s1", AttendanceStatus.ABSENT)

    assert store.get_attendance("s1", fixed_now.date()).status == AttendanceStatus.ABSENT
    assert store.communication_logs == ()


def test_save_batch_marks_last_write_wins(store):
    store.save_batch_marks([Mark("x1", "e1", "s1", 40), Mark("x2", "e1", "s3", 55)])
    store.save_batch_marks([Mark("x3", "e1", "s1", 60)])

    pairs = Counter(m.key for m in store.marks)
    assert max(pairs.values()) == 1
    by_key = {m.key: m for m in store.marks}
    assert by_key[("e1", "s1")].obtained_marks == 60
    assert by_key[("e1", "s3")].obtained_marks == 55
    # Untouched pairs survive.
    assert by_key[("e2", "s1")].obtained_marks == 78


def test_save_batch_marks_duplicate_keys_in_one_batch():
    store = SchoolStore()
    store.save_batch_marks([Mark("a", "e1", "s1", 10), Mark("b", "e1", "s1", 20)])

    assert [m.obtained_marks for m in store.marks] == [20]


def test_save_timetable_upserts_by_class_and_section():
    store = SchoolStore()
    store.save_timetable(TimeTable("tt1", "9", "B", (_day("Monday", "Art"),)))
    store.save_timetable(TimeTable("tt2", "10", "A", (_day("Monday", "Maths"),)))
    store.save_timetable(TimeTable("tt3", "10", "A", (_day("Monday", "Science"),)))

    assert [t.key for t in store.timetables] == [("9", "B"), ("10", "A")]
    assert store.get_timetable("10", "A").schedule[0].periods[0] == "Science"


def test_apply_leave_forces_pending(store):
    leave = LeaveApplication(
        id="lx",
        user_id="s3",
        user_name="Abdul Basith",
        user_role=Role.STUDENT,
        from_date=date(2026, 2, 3),
        to_date=date(2026, 2, 3),
        reason="Fever",
        status=LeaveStatus.APPROVED,
        applied_on=date(2026, 2, 2),
    )

    store.apply_leave(leave)

    assert store.leaves[0].id == "lx"
    assert store.leaves[0].status == LeaveStatus.PENDING


def test_update_leave_status_is_idempotent(store):
    store.update_leave_status("l1", LeaveStatus.APPROVED)
    once = store.snapshot
    store.update_leave_status("l1", LeaveStatus.APPROVED)

    assert store.snapshot == once
    assert store.get_leave("l1").status == LeaveStatus.APPROVED

    # No transition check at the store level.
    store.update_leave_status("l1", LeaveStatus.REJECTED)
    assert store.get_leave("l1").status == LeaveStatus.REJECTED


def test_update_student_replaces_by_id_and_ignores_unknown(store):
    karthik = store.get_student("s1")
    store.update_student(replace(karthik, section="B"))
    store.update_student(replace(karthik, id="missing", name="Ghost"))

    assert store.get_student("s1").section == "B"
    assert len(store.students) == 3
    assert all(s.name != "Ghost" for s in store.students)


def test_notices_newest_first_and_delete(store):
    notice = Notice("n9", "Sports Day", "Friday", date(2026, 2, 2), NoticeType.SUCCESS, "Headmaster")
    store.add_notice(notice)
    assert store.notices[0].id == "n9"

    store.delete_notice("n1")
    store.delete_notice("does-not-exist")
    assert [n.id for n in store.notices] == ["n9", "n2"]


def test_store_instances_are_isolated():
    first = SchoolStore(SchoolSnapshot())
    second = SchoolStore(SchoolSnapshot())

    first.mark_attendance("s1", AttendanceStatus.PRESENT)

    assert len(first.attendance) == 1
    assert second.attendance == ()
