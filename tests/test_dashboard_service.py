from __future__ import annotations

from school_dashboard.attendance.model import AttendanceEntry
from school_dashboard.core.enums import AttendanceStatus
from school_dashboard.exams.model import Mark
from school_dashboard.reports.service import DashboardService


def test_dashboard_counts_today_and_totals(store, fixed_now):
    data = DashboardService(store).build()

    assert data.totals == {"students": 3, "teachers": 2, "documents": 3, "notices": 2}
    assert data.attendance_today == {"date": fixed_now.date().isoformat(), "present": 1, "absent": 1}
    assert data.gender_split == {"boys": 2, "girls": 1}
    assert data.recent_logs == []


def test_exam_results_use_pass_mark_percentage(store):
    store.save_batch_marks([Mark("x", "e1", "s3", 34)])

    results = DashboardService(store).exam_results()

    assert results["pass"] == 4
    assert results["fail"] == 1
    assert results["pass_percentage"] == "80.0"
    assert results["fail_percentage"] == "20.0"


def test_exam_results_with_no_marks():
    from school_dashboard.store.store import SchoolStore

    assert DashboardService(SchoolStore()).exam_results()["pass_percentage"] == "0"


def test_recent_logs_follow_notifications(store):
    store.mark_batch_attendance([AttendanceEntry("s3", AttendanceStatus.ABSENT)])

    logs = DashboardService(store).build(log_limit=1).recent_logs

    assert len(logs) == 1
    assert logs[0]["student_name"] == "Abdul Basith"
    assert logs[0]["status"] == "Sent"
