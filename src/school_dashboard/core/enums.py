from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User roles used for access control."""

    ADMIN = "ADMIN"
    TEACHER = "TEACHER"
    STUDENT = "STUDENT"


class Language(str, Enum):
    EN = "en"
    TA = "ta"


class AttendanceStatus(str, Enum):
    """Daily attendance status of one student."""

    PRESENT = "Present"
    ABSENT = "Absent"
    LATE = "Late"
    LEAVE = "Leave"


class LeaveStatus(str, Enum):
    """Approval state of a leave application."""

    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"


class NoticeType(str, Enum):
    INFO = "info"
    WARNING = "warning"
    SUCCESS = "success"
    URGENT = "urgent"


class MessageChannel(str, Enum):
    SMS = "SMS"
    VOICE_NOTE = "Voice Note"


class DeliveryStatus(str, Enum):
    SENT = "Sent"
    FAILED = "Failed"


class Gender(str, Enum):
    MALE = "Male"
    FEMALE = "Female"
    OTHER = "Other"


class EmploymentStatus(str, Enum):
    PERMANENT = "Permanent"
    TEMPORARY = "Temporary"
    CONTRACT = "Contract"


class DocumentCategory(str, Enum):
    CIRCULAR = "Circular"
    MATERIAL = "Material"
    FORM = "Form"
    CERTIFICATE = "Certificate"
