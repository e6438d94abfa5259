from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Mapping, Optional

from ..common.datetime_utils import parse_iso_date
from ..common.permissions import require_staff
from ..common.validators import optional_text, require_non_empty
from ..core.enums import Gender, Role
from ..core.exceptions import NotFoundError, ValidationError
from ..store.store import SchoolStore
from .model import Student

PROFILE_FIELDS = (
    "emis_number",
    "blood_group",
    "community",
    "religion",
    "mother_tongue",
    "father_name",
    "mother_name",
    "phone",
    "address",
    "aadhar",
)


def _parse_gender(value: Optional[str], default: Gender = Gender.MALE) -> Gender:
    if not value:
        return default
    try:
        return Gender(value)
    except ValueError:
        raise ValidationError("field_required", field="gender")


def _optional_date(value) -> Optional[date]:
    if isinstance(value, date):
        return value
    return parse_iso_date(value) if value else None


class StudentService:
    def __init__(self, store: SchoolStore):
        self._store = store

    def admit(self, *, current_role: Role, data: Mapping) -> Student:
        require_staff(current_role)

        name = require_non_empty(data.get("name"), "name")
        class_name = require_non_empty(data.get("class_name"), "class")

        student = Student(
            id=self._store.new_id(),
            name=name,
            class_name=class_name,
            section=(data.get("section") or "").strip(),
            gender=_parse_gender(data.get("gender")),
            dob=_optional_date(data.get("dob")),
            admission_date=self._store.today(),
            image_url=optional_text(data.get("image_url")),
            **{f: str(data.get(f) or "").strip() for f in PROFILE_FIELDS},
        )
        self._store.add_student(student)
        return student

    def edit(self, *, current_role: Role, student_id: str, data: Mapping) -> Student:
        require_staff(current_role)

        current = self._store.get_student(student_id)
        if not current:
            raise NotFoundError("student_not_found")

        changes: dict = {f: str(data[f]).strip() for f in PROFILE_FIELDS if f in data}
        if "name" in data:
            changes["name"] = require_non_empty(data.get("name"), "name")
        if "class_name" in data:
            changes["class_name"] = require_non_empty(data.get("class_name"), "class")
        if "section" in data:
            changes["section"] = (data.get("section") or "").strip()
        if "gender" in data:
            changes["gender"] = _parse_gender(data.get("gender"), current.gender)
        if "dob" in data:
            changes["dob"] = _optional_date(data.get("dob"))
        if "image_url" in data:
            changes["image_url"] = optional_text(data.get("image_url"))

        # The id always survives an edit.
        updated = replace(current, **changes, id=current.id)
        self._store.update_student(updated)
        return updated

    def search(self, term: str = "") -> list[Student]:
        term = (term or "").strip()
        if not term:
            return list(self._store.students)
        needle = term.lower()
        return [s for s in self._store.students if needle in s.name.lower() or term in s.emis_number]

    def in_section(self, class_name: str, section: str) -> list[Student]:
        return [s for s in self._store.students if s.class_name == class_name and s.section == section]

    def find_by_name(self, name: str) -> Optional[Student]:
        return next((s for s in self._store.students if s.name == name), None)

    def classes(self) -> list[str]:
        return sorted({s.class_name for s in self._store.students})

    def sections(self) -> list[str]:
        return sorted({s.section for s in self._store.students})
