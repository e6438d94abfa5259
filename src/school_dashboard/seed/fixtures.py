"""Demo dataset loaded at startup when ``SEED_DEMO_DATA`` is on."""

from __future__ import annotations

from datetime import date

from ..attendance.model import AttendanceRecord
from ..core.enums import (
    AttendanceStatus,
    DocumentCategory,
    EmploymentStatus,
    Gender,
    LeaveStatus,
    NoticeType,
    Role,
)
from ..documents.model import DocumentItem
from ..exams.model import Exam, Mark
from ..leaves.model import LeaveApplication
from ..notices.model import Notice
from ..store.snapshot import SchoolSnapshot
from ..students.model import Student
from ..teachers.model import Teacher
from ..timetables.model import TimeTable, TimeTableDay

D = date.fromisoformat

STUDENTS = [
    Student(
        id="s1",
        emis_number="330201001",
        name="Karthik Raja",
        gender=Gender.MALE,
        dob=D("2010-05-12"),
        class_name="10",
        section="A",
        blood_group="B+",
        community="BC",
        religion="Hindu",
        mother_tongue="Tamil",
        father_name="Raja S",
        mother_name="Lakshmi R",
        phone="9876543210",
        address="12, North Car Street, Madurai",
        aadhar="123412341234",
        admission_date=D("2020-06-01"),
    ),
    Student(
        id="s2",
        emis_number="330201002",
        name="Priya Dharshini",
        gender=Gender.FEMALE,
        dob=D("2010-08-22"),
        class_name="10",
        section="A",
        blood_group="O+",
        community="MBC",
        religion="Hindu",
        mother_tongue="Tamil",
        father_name="Murugan P",
        mother_name="Selvi M",
        phone="9876543211",
        address="45, Anna Nagar, Trichy",
        aadhar="567856785678",
        admission_date=D("2020-06-01"),
    ),
    Student(
        id="s3",
        emis_number="330201003",
        name="Abdul Basith",
        gender=Gender.MALE,
        dob=D("2011-01-15"),
        class_name="9",
        section="B",
        blood_group="A+",
        community="BCM",
        religion="Muslim",
        mother_tongue="Urdu",
        father_name="Rahim A",
        mother_name="Fathima R",
        phone="9876543212",
        address="7, Mosque Street, Chennai",
        aadhar="901290129012",
        admission_date=D("2021-06-01"),
    ),
]

TEACHERS = [
    Teacher(
        id="t1",
        employee_id="EMP001",
        name="Mrs. Kavitha S",
        gender=Gender.FEMALE,
        dob=D("1985-05-15"),
        email="kavitha.math@school.gov.in",
        phone="9988776655",
        address="123, Teacher Colony, Madurai",
        designation="PG Assistant",
        subject="Mathematics",
        qualification="M.Sc, B.Ed",
        experience_years=12,
        joining_date=D("2015-06-01"),
        status=EmploymentStatus.PERMANENT,
        blood_group="O+",
        religion="Hindu",
        aadhar_number="998877665544",
    ),
    Teacher(
        id="t2",
        employee_id="EMP002",
        name="Mr. David Raj",
        gender=Gender.MALE,
        dob=D("1990-08-20"),
        email="david.sci@school.gov.in",
        phone="9988776644",
        address="45, Church Road, Trichy",
        designation="BT Assistant",
        subject="Science",
        qualification="B.Sc, B.Ed",
        experience_years=8,
        joining_date=D("2018-06-01"),
        status=EmploymentStatus.PERMANENT,
        blood_group="B+",
        religion="Christian",
        aadhar_number="112233445566",
    ),
]

DOCUMENTS = [
    DocumentItem("d1", "Annual Exam Schedule 2024", DocumentCategory.CIRCULAR, "Admin", D("2023-10-25"), "250 KB", "pdf"),
    DocumentItem("d2", "10th Std Math Question Bank", DocumentCategory.MATERIAL, "Mrs. Kavitha S", D("2023-10-20"), "1.2 MB", "pdf"),
    DocumentItem("d3", "Scholarship Form (BC/MBC)", DocumentCategory.FORM, "Admin", D("2023-09-15"), "500 KB", "docx"),
]

EXAMS = [
    Exam("e1", "Quarterly Exam", D("2023-09-20"), "10", "Mathematics", 100),
    Exam("e2", "Quarterly Exam", D("2023-09-22"), "10", "Science", 100),
]

MARKS = [
    Mark("m1", "e1", "s1", 85),
    Mark("m2", "e1", "s2", 92),
    Mark("m3", "e2", "s1", 78),
    Mark("m4", "e2", "s2", 88),
]

NOTICES = [
    Notice(
        "n1",
        "Parent-Teacher Meeting",
        "Scheduled for next Friday regarding Quarter-Yearly results.",
        D("2023-10-25"),
        NoticeType.INFO,
        "Headmaster",
    ),
    Notice(
        "n2",
        "Holiday Announcement",
        "School remains closed on Monday due to local festival.",
        D("2023-10-20"),
        NoticeType.WARNING,
        "Admin",
    ),
]

TIMETABLES = [
    TimeTable(
        id="tt1",
        class_name="10",
        section="A",
        schedule=(
            TimeTableDay("Monday", ("Tamil", "English", "Maths", "Science", "Social", "Maths", "PET", "Library")),
            TimeTableDay("Tuesday", ("English", "Tamil", "Science", "Maths", "Social", "Science", "Art", "Maths")),
            TimeTableDay("Wednesday", ("Maths", "Science", "Social", "Tamil", "English", "PET", "Science", "Social")),
            TimeTableDay("Thursday", ("Science", "Maths", "Tamil", "English", "Social", "Maths", "Value Ed", "Library")),
            TimeTableDay("Friday", ("Social", "Social", "Maths", "Science", "English", "Tamil", "PET", "GK")),
        ),
    )
]

LEAVES = [
    LeaveApplication(
        id="l1",
        user_id="s1",
        user_name="Karthik Raja",
        user_role=Role.STUDENT,
        class_name="10",
        section="A",
        from_date=D("2023-10-30"),
        to_date=D("2023-10-31"),
        reason="Fever",
        status=LeaveStatus.PENDING,
        applied_on=D("2023-10-28"),
    ),
    LeaveApplication(
        id="l2",
        user_id="s2",
        user_name="Priya Dharshini",
        user_role=Role.STUDENT,
        class_name="10",
        section="A",
        from_date=D("2023-11-01"),
        to_date=D("2023-11-01"),
        reason="Family Function",
        status=LeaveStatus.APPROVED,
        applied_on=D("2023-10-25"),
    ),
    LeaveApplication(
        id="l3",
        user_id="t1",
        user_name="Mrs. Kavitha S",
        user_role=Role.TEACHER,
        designation="PG Assistant",
        from_date=D("2023-11-05"),
        to_date=D("2023-11-06"),
        reason="Medical Leave",
        status=LeaveStatus.PENDING,
        applied_on=D("2023-11-01"),
    ),
]


def demo_snapshot(today: date) -> SchoolSnapshot:
    """The demo dataset, with two attendance records dated ``today``."""
    attendance = [
        AttendanceRecord("a1", "s1", today, AttendanceStatus.PRESENT),
        AttendanceRecord("a2", "s2", today, AttendanceStatus.ABSENT),
    ]
    return SchoolSnapshot.of(
        students=STUDENTS,
        teachers=TEACHERS,
        documents=DOCUMENTS,
        exams=EXAMS,
        attendance=attendance,
        notices=NOTICES,
        communication_logs=[],
        timetables=TIMETABLES,
        marks=MARKS,
        leaves=LEAVES,
    )
