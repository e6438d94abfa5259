from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Mapping, Optional

from ..common.datetime_utils import parse_iso_date
from ..common.permissions import require_staff
from ..common.validators import parse_number_in_range, require_non_empty
from ..core.constants import DEFAULT_TOTAL_MARKS
from ..core.enums import Role
from ..core.exceptions import NotFoundError, ValidationError
from ..store.store import SchoolStore
from .model import Exam, Mark

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MarksEntryResult:
    saved: list[Mark] = field(default_factory=list)
    rejected: dict[str, str] = field(default_factory=dict)


class ExamService:
    def __init__(self, store: SchoolStore):
        self._store = store

    def create_exam(
        self,
        *,
        current_role: Role,
        name: str,
        exam_date: str,
        class_name: str,
        subject: str,
        total_marks: Optional[str | int] = None,
    ) -> Exam:
        require_staff(current_role)

        name = require_non_empty(name, "name")
        day = parse_iso_date(require_non_empty(exam_date, "date"))
        class_name = require_non_empty(class_name, "class")
        subject = require_non_empty(subject, "subject")

        try:
            total = int(total_marks) if total_marks not in (None, "") else DEFAULT_TOTAL_MARKS
        except (TypeError, ValueError):
            raise ValidationError("invalid_number", field="total_marks")
        # A zero or missing total falls back to the default paper.
        total = total or DEFAULT_TOTAL_MARKS
        if total < 0:
            raise ValidationError("invalid_number", field="total_marks")

        exam = Exam(
            id=self._store.new_id(),
            name=name,
            date=day,
            class_name=class_name,
            subject=subject,
            total_marks=total,
        )
        self._store.add_exam(exam)
        return exam

    def list_exams(self, *, class_name: Optional[str] = None) -> list[Exam]:
        return [e for e in self._store.exams if class_name is None or e.class_name == class_name]

    def _require_exam(self, exam_id: str) -> Exam:
        exam = self._store.get_exam(exam_id)
        if not exam:
            raise NotFoundError("exam_not_found")
        return exam

    def mark_sheet(self, *, exam_id: str, section: str) -> list[dict]:
        """Students of the exam's class in ``section`` with their recorded marks."""
        exam = self._require_exam(exam_id)
        recorded = {m.student_id: m.obtained_marks for m in self._store.marks if m.exam_id == exam.id}
        return [
            {
                "student_id": s.id,
                "name": s.name,
                "emis_number": s.emis_number,
                "obtained_marks": recorded.get(s.id),
                "total_marks": exam.total_marks,
            }
            for s in self._store.students
            if s.class_name == exam.class_name and s.section == section
        ]

    def enter_marks(self, *, current_role: Role, exam_id: str, values: Mapping[str, object]) -> MarksEntryResult:
        """Stage and save a batch of raw mark inputs keyed by student id.

        Blank inputs are skipped. Values that are not numbers or fall outside
        ``0..total_marks`` are rejected and never reach the store.
        """
        require_staff(current_role)
        exam = self._require_exam(exam_id)

        staged: list[Mark] = []
        rejected: dict[str, str] = {}
        for student_id, raw in values.items():
            if raw is None or str(raw).strip() == "":
                continue
            try:
                obtained = parse_number_in_range(str(raw), "marks", low=0, high=exam.total_marks)
            except ValidationError as e:
                rejected[student_id] = str(e)
                continue
            staged.append(Mark(id=self._store.new_id(), exam_id=exam.id, student_id=student_id, obtained_marks=obtained))

        if staged:
            self._store.save_batch_marks(staged)
        if rejected:
            logger.warning("Rejected %d mark entries for exam %s", len(rejected), exam.id)
        return MarksEntryResult(saved=staged, rejected=rejected)
