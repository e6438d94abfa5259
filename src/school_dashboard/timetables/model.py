from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TimeTableDay:
    day: str
    periods: tuple[str, ...]


@dataclass(frozen=True)
class TimeTable:
    """Weekly schedule of one class/section, keyed by (class_name, section)."""

    id: str
    class_name: str
    section: str
    schedule: tuple[TimeTableDay, ...]

    @property
    def key(self) -> tuple[str, str]:
        return (self.class_name, self.section)
