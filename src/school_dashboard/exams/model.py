from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Union

Number = Union[int, float]


@dataclass(frozen=True)
class Exam:
    id: str
    name: str
    date: date
    class_name: str
    subject: str
    total_marks: int


@dataclass(frozen=True)
class Mark:
    """One student's score in one exam; unique per (exam_id, student_id)."""

    id: str
    exam_id: str
    student_id: str
    obtained_marks: Number

    @property
    def key(self) -> tuple[str, str]:
        return (self.exam_id, self.student_id)
