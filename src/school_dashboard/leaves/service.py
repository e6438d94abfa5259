from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from ..common.datetime_utils import parse_iso_date
from ..common.permissions import require_role
from ..common.validators import require_non_empty
from ..core.enums import LeaveStatus, Role
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from ..store.store import SchoolStore
from ..users.model import SessionUser
from .model import LeaveApplication

logger = logging.getLogger(__name__)

# Who decides whose requests: Admin handles staff leave, Teachers handle student leave.
APPROVER_FOR = {
    Role.ADMIN: Role.TEACHER,
    Role.TEACHER: Role.STUDENT,
}


def _as_date(value) -> date:
    return value if isinstance(value, date) else parse_iso_date(value)


class LeaveService:
    def __init__(self, store: SchoolStore):
        self._store = store

    def apply(
        self,
        *,
        user: SessionUser,
        from_date,
        reason: str,
        to_date=None,
    ) -> LeaveApplication:
        """File a leave request for the current user.

        The applicant profile is resolved by name; when it cannot be found the
        request is still filed with the session identity only.
        """
        require_role(user.role, Role.STUDENT, Role.TEACHER)

        if not from_date:
            raise ValidationError("field_required", field="from_date")
        start = _as_date(from_date)
        end = _as_date(to_date) if to_date else start
        if end < start:
            raise ValidationError("end_before_start")
        reason = require_non_empty(reason, "reason")

        user_id = user.id
        class_name = section = designation = None
        if user.role == Role.STUDENT:
            profile = next((s for s in self._store.students if s.name == user.name), None)
            if profile:
                user_id, class_name, section = profile.id, profile.class_name, profile.section
        else:
            staff = next((t for t in self._store.teachers if t.name == user.name), None)
            if staff:
                user_id, designation = staff.id, staff.designation

        if user_id == user.id:
            logger.info("No profile found for %s; filing leave with session identity", user.name)

        leave = LeaveApplication(
            id=self._store.new_id(),
            user_id=user_id,
            user_name=user.name,
            user_role=user.role,
            from_date=start,
            to_date=end,
            reason=reason,
            status=LeaveStatus.PENDING,
            applied_on=self._store.today(),
            class_name=class_name,
            section=section,
            designation=designation,
        )
        self._store.apply_leave(leave)
        return leave

    def list_mine(self, user: SessionUser) -> list[LeaveApplication]:
        return [leave for leave in self._store.leaves if leave.user_name == user.name]

    def list_incoming(
        self,
        user: SessionUser,
        *,
        class_name: Optional[str] = None,
        section: Optional[str] = None,
        status_filter: str = "All",
    ) -> list[LeaveApplication]:
        """Requests the user is expected to decide.

        Teachers see student requests of the selected class/section only.
        Admin sees teacher requests only, never student requests.
        """
        if user.role == Role.TEACHER:
            incoming = [
                leave
                for leave in self._store.leaves
                if leave.user_role == Role.STUDENT and leave.class_name == class_name and leave.section == section
            ]
        elif user.role == Role.ADMIN:
            incoming = [leave for leave in self._store.leaves if leave.user_role == Role.TEACHER]
        else:
            incoming = []

        if not status_filter or status_filter == "All":
            return incoming
        try:
            wanted = LeaveStatus(status_filter)
        except ValueError:
            raise ValidationError("invalid_status")
        return [leave for leave in incoming if leave.status == wanted]

    def decide(self, *, user: SessionUser, leave_id: str, status) -> LeaveApplication:
        try:
            decision = LeaveStatus(status)
        except ValueError:
            raise ValidationError("invalid_status")
        if decision == LeaveStatus.PENDING:
            raise ValidationError("invalid_status")

        leave = self._store.get_leave(leave_id)
        if not leave:
            raise NotFoundError("leave_not_found")

        if APPROVER_FOR.get(user.role) != leave.user_role:
            raise AuthorizationError("forbidden")

        self._store.update_leave_status(leave_id, decision)
        return self._store.get_leave(leave_id)
