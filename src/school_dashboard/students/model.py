from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import Gender


@dataclass(frozen=True)
class Student:
    """Domain entity: a student admitted to the school.

    ``class_name`` holds the standard ("10") since ``class`` is reserved.
    """

    id: str
    emis_number: str
    name: str
    gender: Gender
    dob: Optional[date]
    class_name: str
    section: str
    blood_group: str = ""
    community: str = ""
    religion: str = ""
    mother_tongue: str = ""
    father_name: str = ""
    mother_name: str = ""
    phone: str = ""
    address: str = ""
    aadhar: str = ""
    admission_date: Optional[date] = None
    image_url: Optional[str] = None
