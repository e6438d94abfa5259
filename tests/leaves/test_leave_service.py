from __future__ import annotations

from datetime import date

import pytest

from school_dashboard.core.enums import LeaveStatus, Role
from school_dashboard.core.exceptions import AuthorizationError, NotFoundError, ValidationError
from school_dashboard.leaves.service import LeaveService
from school_dashboard.users.model import SessionUser


def test_student_leave_is_pending_with_class_and_section(store, student, fixed_now):
    svc = LeaveService(store)

    leave = svc.apply(user=student, from_date="2026-02-10", reason="Fever")

    assert leave.status == LeaveStatus.PENDING
    assert leave.user_id == "s1"
    assert (leave.class_name, leave.section) == ("10", "A")
    assert leave.to_date == date(2026, 2, 10)
    assert leave.applied_on == fixed_now.date()
    assert store.leaves[0] == leave


def test_teacher_leave_carries_designation(store, teacher):
    leave = LeaveService(store).apply(user=teacher, from_date="2026-02-10", to_date="2026-02-12", reason="Conference")

    assert leave.user_id == "t1"
    assert leave.designation == "PG Assistant"
    assert leave.class_name is None


def test_unresolved_profile_files_partial_record(store):
    stranger = SessionUser(id="u9", name="New Student", email="n@s", role=Role.STUDENT)

    leave = LeaveService(store).apply(user=stranger, from_date="2026-02-10", reason="Travel")

    assert leave.user_id == "u9"
    assert leave.class_name is None and leave.section is None


def test_apply_validates_dates_reason_and_role(store, student, admin):
    svc = LeaveService(store)

    with pytest.raises(ValidationError):
        svc.apply(user=student, from_date="2026-02-10", to_date="2026-02-09", reason="x")
    with pytest.raises(ValidationError):
        svc.apply(user=student, from_date="2026-02-10", reason="   ")
    with pytest.raises(ValidationError):
        svc.apply(user=student, from_date="", reason="Fever")
    with pytest.raises(AuthorizationError):
        svc.apply(user=admin, from_date="2026-02-10", reason="Fever")


def test_teacher_incoming_is_student_requests_of_selected_section(store, teacher):
    svc = LeaveService(store)

    ids = [l.id for l in svc.list_incoming(teacher, class_name="10", section="A", status_filter="All")]
    assert ids == ["l1", "l2"]
    assert svc.list_incoming(teacher, class_name="9", section="B") == []
    assert [l.id for l in svc.list_incoming(teacher, class_name="10", section="A", status_filter="Pending")] == ["l1"]


def test_admin_incoming_is_teacher_requests_only(store, admin):
    svc = LeaveService(store)

    incoming = svc.list_incoming(admin, class_name="10", section="A", status_filter="All")

    assert [l.id for l in incoming] == ["l3"]
    assert all(l.user_role == Role.TEACHER for l in incoming)


def test_students_have_no_incoming_requests(store, student):
    assert LeaveService(store).list_incoming(student) == []


def test_decide_routes_by_role(store, admin, teacher):
    svc = LeaveService(store)

    assert svc.decide(user=teacher, leave_id="l1", status="Approved").status == LeaveStatus.APPROVED
    assert svc.decide(user=admin, leave_id="l3", status="Rejected").status == LeaveStatus.REJECTED

    with pytest.raises(AuthorizationError):
        svc.decide(user=admin, leave_id="l1", status="Approved")
    with pytest.raises(AuthorizationError):
        svc.decide(user=teacher, leave_id="l3", status="Approved")


def test_decide_twice_is_idempotent_and_unchecked(store, teacher):
    svc = LeaveService(store)
    svc.decide(user=teacher, leave_id="l1", status="Approved")
    once = store.snapshot

    svc.decide(user=teacher, leave_id="l1", status="Approved")
    assert store.snapshot == once

    assert svc.decide(user=teacher, leave_id="l1", status="Rejected").status == LeaveStatus.REJECTED


def test_decide_rejects_pending_and_unknown(store, teacher):
    svc = LeaveService(store)

    with pytest.raises(ValidationError):
        svc.decide(user=teacher, leave_id="l1", status="Pending")
    with pytest.raises(NotFoundError):
        svc.decide(user=teacher, leave_id="nope", status="Approved")


def test_list_mine_matches_on_name(store, student):
    assert [l.id for l in LeaveService(store).list_mine(student)] == ["l1"]
