from __future__ import annotations

import pytest

from school_dashboard.core.enums import Language, Role
from school_dashboard.core.exceptions import AuthorizationError, ValidationError
from school_dashboard.core.i18n import translate
from school_dashboard.users.service import SessionService


def test_login_accepts_any_credentials_with_role_default_names():
    svc = SessionService()

    assert svc.login("", Role.ADMIN).name == "Headmaster"
    assert svc.login("x@y", "teacher").name == "Mrs. Kavitha S"
    user = svc.login("x@y", "STUDENT", name="Meena K")
    assert user.name == "Meena K"
    assert "Meena%20K" in user.avatar


def test_login_rejects_unknown_role():
    with pytest.raises(AuthorizationError):
        SessionService().login("x@y", "janitor")


def test_session_round_trip():
    svc = SessionService()
    user = svc.login("hm@school", Role.ADMIN)

    assert svc.restore(svc.to_session(user)) == user
    assert svc.restore({}) is None
    assert svc.restore({"role": "GHOST"}) is None


def test_toggle_language():
    assert SessionService.toggle_language("en") == Language.TA
    assert SessionService.toggle_language(Language.TA) == Language.EN


def test_translate_pairs_and_fallback():
    assert translate("marks_saved", "en") == "Marks Saved Successfully"
    assert translate("marks_saved", "ta") == "மதிப்பெண்கள் சேமிக்கப்பட்டன"
    assert translate("student_added", "en", name="Meena") == "Student Meena added successfully."
    assert translate("no_such_key", "ta") == "no_such_key"


def test_domain_errors_localize():
    err = ValidationError("field_required", field="reason")

    assert str(err) == "reason is required"
    assert err.localized("ta") == "reason தேவை"
