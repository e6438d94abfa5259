from __future__ import annotations

from typing import Mapping, Optional

from ..common.datetime_utils import parse_iso_date
from ..common.permissions import require_role
from ..common.validators import optional_text, require_non_empty
from ..core.enums import EmploymentStatus, Gender, Role
from ..core.exceptions import ValidationError
from ..store.store import SchoolStore
from .model import Teacher

OPTIONAL_FIELDS = (
    "secondary_phone",
    "image_url",
    "blood_group",
    "religion",
    "community",
    "marital_status",
    "nationality",
    "aadhar_number",
    "bank_account",
    "ifsc_code",
    "spouse_name",
    "emergency_contact_name",
    "emergency_contact_phone",
    "medical_conditions",
)


def _enum_value(enum_cls, value, default, field_name: str):
    if not value:
        return default
    try:
        return enum_cls(value)
    except ValueError:
        raise ValidationError("field_required", field=field_name)


class TeacherService:
    def __init__(self, store: SchoolStore):
        self._store = store

    def register(self, *, current_role: Role, data: Mapping) -> Teacher:
        require_role(current_role, Role.ADMIN)

        name = require_non_empty(data.get("name"), "name")
        employee_id = require_non_empty(data.get("employee_id"), "employee_id")

        try:
            experience = int(data.get("experience_years") or 0)
        except (TypeError, ValueError):
            raise ValidationError("invalid_number", field="experience_years")

        joining = data.get("joining_date")
        dob = data.get("dob")
        try:
            age = int(data["age"]) if data.get("age") not in (None, "") else None
        except (TypeError, ValueError):
            raise ValidationError("invalid_number", field="age")

        teacher = Teacher(
            id=self._store.new_id(),
            employee_id=employee_id,
            name=name,
            gender=_enum_value(Gender, data.get("gender"), Gender.FEMALE, "gender"),
            dob=parse_iso_date(dob) if dob else None,
            email=str(data.get("email") or "").strip(),
            phone=str(data.get("phone") or "").strip(),
            address=str(data.get("address") or "").strip(),
            designation=str(data.get("designation") or "").strip(),
            subject=str(data.get("subject") or "").strip(),
            qualification=str(data.get("qualification") or "").strip(),
            experience_years=experience,
            joining_date=parse_iso_date(joining) if joining else self._store.today(),
            status=_enum_value(EmploymentStatus, data.get("status"), EmploymentStatus.PERMANENT, "status"),
            age=age,
            **{f: optional_text(data.get(f)) for f in OPTIONAL_FIELDS},
        )
        self._store.add_teacher(teacher)
        return teacher

    def search(self, term: str = "") -> list[Teacher]:
        needle = (term or "").strip().lower()
        if not needle:
            return list(self._store.teachers)
        return [
            t
            for t in self._store.teachers
            if needle in t.name.lower() or needle in t.employee_id.lower() or needle in t.subject.lower()
        ]

    def find_by_name(self, name: str) -> Optional[Teacher]:
        return next((t for t in self._store.teachers if t.name == name), None)
