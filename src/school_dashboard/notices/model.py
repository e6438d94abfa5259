from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..core.enums import NoticeType


@dataclass(frozen=True)
class Notice:
    id: str
    title: str
    message: str
    date: date
    type: NoticeType
    posted_by: str
