from __future__ import annotations

from typing import Mapping, Sequence

from ..common.permissions import require_staff
from ..common.validators import require_non_empty
from ..core.constants import PERIODS_PER_DAY, SCHOOL_DAYS
from ..core.enums import Role
from ..core.exceptions import ValidationError
from ..store.store import SchoolStore
from .model import TimeTable, TimeTableDay


def blank_schedule() -> tuple[TimeTableDay, ...]:
    return tuple(TimeTableDay(day=day, periods=("",) * PERIODS_PER_DAY) for day in SCHOOL_DAYS)


class TimeTableService:
    def __init__(self, store: SchoolStore):
        self._store = store

    def load(self, class_name: str, section: str) -> TimeTable:
        """Saved timetable for the section, or an unsaved blank template."""
        found = self._store.get_timetable(class_name, section)
        if found:
            return found
        return TimeTable(id="temp", class_name=class_name, section=section, schedule=blank_schedule())

    def save(
        self,
        *,
        current_role: Role,
        class_name: str,
        section: str,
        schedule: Sequence[Mapping],
    ) -> TimeTable:
        require_staff(current_role)

        class_name = require_non_empty(class_name, "class")
        section = require_non_empty(section, "section")

        days = []
        for row in schedule:
            periods = tuple(str(p or "").strip() for p in row.get("periods") or ())
            if len(periods) != PERIODS_PER_DAY:
                raise ValidationError("periods_per_day", count=PERIODS_PER_DAY)
            days.append(TimeTableDay(day=require_non_empty(row.get("day"), "day"), periods=periods))

        existing = self._store.get_timetable(class_name, section)
        timetable = TimeTable(
            id=existing.id if existing else self._store.new_id(),
            class_name=class_name,
            section=section,
            schedule=tuple(days),
        )
        self._store.save_timetable(timetable)
        return timetable
