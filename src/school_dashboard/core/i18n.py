"""Inline English / Tamil string pairs.

There is no translation framework: every user-facing message is a key mapped
to an ``(en, ta)`` pair. Unknown keys fall back to the key itself.
"""

from __future__ import annotations

import logging

from .enums import Language

logger = logging.getLogger(__name__)

MESSAGES: dict[str, tuple[str, str]] = {
    # session
    "login_success": ("Logged in successfully", "வெற்றிகரமாக உள்நுழைந்தீர்கள்"),
    "logout_success": ("Logged out", "வெளியேறினீர்கள்"),
    "login_required": ("Please log in to continue", "தொடர உள்நுழையவும்"),
    "forbidden": ("You do not have permission", "உங்களுக்கு அனுமதி இல்லை"),
    "invalid_role": ("Invalid role", "தவறான பங்கு"),
    "system_error": ("System error, please try again", "கணினி பிழை, மீண்டும் முயற்சிக்கவும்"),
    # validation
    "field_required": ("{field} is required", "{field} தேவை"),
    "invalid_date": ("Invalid date (YYYY-MM-DD)", "தவறான தேதி (YYYY-MM-DD)"),
    "invalid_number": ("{field} must be a number", "{field} எண்ணாக இருக்க வேண்டும்"),
    "out_of_range": ("{field} must be between {low} and {high}", "{field} {low} முதல் {high} வரை இருக்க வேண்டும்"),
    "end_before_start": ("To date must be on or after from date", "முடிவு தேதி தொடக்க தேதிக்குப் பின் இருக்க வேண்டும்"),
    "invalid_status": ("Invalid status", "தவறான நிலை"),
    "file_too_large": ("File too large. Max {limit_mb}MB.", "கோப்பு மிகப் பெரியது. அதிகபட்சம் {limit_mb}MB."),
    "periods_per_day": ("Each day needs exactly {count} periods", "ஒவ்வொரு நாளுக்கும் சரியாக {count} பாடவேளைகள் தேவை"),
    "empty_batch": ("Nothing to save", "சேமிக்க எதுவும் இல்லை"),
    # lookups
    "student_not_found": ("Student not found", "மாணவர் கிடைக்கவில்லை"),
    "exam_not_found": ("Exam not found", "தேர்வு கிடைக்கவில்லை"),
    "leave_not_found": ("Leave application not found", "விடுப்பு விண்ணப்பம் கிடைக்கவில்லை"),
    "notice_not_found": ("Notice not found", "அறிவிப்பு கிடைக்கவில்லை"),
    # attendance
    "attendance_locked": (
        "Attendance already marked for this section today",
        "இந்த பிரிவுக்கு இன்றைய வருகை ஏற்கனவே பதிவு செய்யப்பட்டது",
    ),
    "attendance_saved": ("Attendance saved", "வருகை பதிவு சேமிக்கப்பட்டது"),
    "auto_alerts_sent": (" & {count} Auto-Alerts sent!", " & {count} தானியங்கி எச்சரிக்கைகள் அனுப்பப்பட்டன!"),
    # academics
    "exam_created": ("Exam created", "தேர்வு உருவாக்கப்பட்டது"),
    "marks_saved": ("Marks Saved Successfully", "மதிப்பெண்கள் சேமிக்கப்பட்டன"),
    "timetable_saved": ("Time Table Saved Successfully", "கால அட்டவணை சேமிக்கப்பட்டது"),
    # leaves
    "leave_submitted": ("Application Submitted", "விண்ணப்பம் அனுப்பப்பட்டது"),
    "leave_approved": ("Leave approved", "விடுப்பு அங்கீகரிக்கப்பட்டது"),
    "leave_rejected": ("Leave rejected", "விடுப்பு நிராகரிக்கப்பட்டது"),
    # people
    "student_added": ("Student {name} added successfully.", "மாணவர் {name} சேர்க்கப்பட்டார்."),
    "student_updated": ("Student {name} updated successfully.", "மாணவர் {name} விவரங்கள் புதுப்பிக்கப்பட்டது."),
    "teacher_added": ("Staff member {name} added successfully.", "ஆசிரியர் {name} சேர்க்கப்பட்டார்."),
    # documents / notices
    "document_uploaded": ("Document uploaded", "ஆவணம் பதிவேற்றப்பட்டது"),
    "notice_posted": ("Notice posted", "அறிவிப்பு வெளியிடப்பட்டது"),
    "notice_deleted": ("Notice deleted", "அறிவிப்பு நீக்கப்பட்டது"),
}


def _language_index(language: Language | str) -> int:
    value = language.value if isinstance(language, Language) else str(language or "").lower()
    return 1 if value == Language.TA.value else 0


def translate(key: str, language: Language | str = Language.EN, **params) -> str:
    pair = MESSAGES.get(key)
    if pair is None:
        logger.warning("Missing i18n key %s", key)
        return key

    text = pair[_language_index(language)]
    if params:
        try:
            return text.format(**params)
        except (KeyError, IndexError):
            logger.warning("Bad format params for i18n key %s: %s", key, params)
            return text
    return text
