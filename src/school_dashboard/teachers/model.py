from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import EmploymentStatus, Gender


@dataclass(frozen=True)
class Teacher:
    """Domain entity: a staff member."""

    id: str
    employee_id: str
    name: str
    gender: Gender
    dob: Optional[date]
    email: str
    phone: str
    address: str
    designation: str
    subject: str
    qualification: str
    experience_years: int
    joining_date: date
    status: EmploymentStatus
    age: Optional[int] = None
    secondary_phone: Optional[str] = None
    image_url: Optional[str] = None
    blood_group: Optional[str] = None
    religion: Optional[str] = None
    community: Optional[str] = None
    marital_status: Optional[str] = None
    nationality: Optional[str] = None
    aadhar_number: Optional[str] = None
    bank_account: Optional[str] = None
    ifsc_code: Optional[str] = None
    spouse_name: Optional[str] = None
    emergency_contact_name: Optional[str] = None
    emergency_contact_phone: Optional[str] = None
    medical_conditions: Optional[str] = None
