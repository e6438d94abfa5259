from __future__ import annotations

import logging
from typing import Optional
from urllib.parse import quote

from ..common.ids import new_id
from ..core.enums import Language, Role
from ..core.exceptions import AuthorizationError
from .model import SessionUser

logger = logging.getLogger(__name__)

DEFAULT_NAMES = {
    Role.ADMIN: "Headmaster",
    Role.TEACHER: "Mrs. Kavitha S",
    Role.STUDENT: "Karthik Raja",
}
DEFAULT_EMAIL = "demo@school.gov.in"
AVATAR_URL = "https://ui-avatars.com/api/?name={name}&background=0D8ABC&color=fff"


class SessionService:
    """Stand-in identity provider.

    Credentials are not checked; the chosen role decides what the session can do.
    """

    def login(self, email: str, role: Role | str, name: Optional[str] = None) -> SessionUser:
        try:
            role = role if isinstance(role, Role) else Role(str(role or "").upper())
        except ValueError:
            raise AuthorizationError("invalid_role")

        display_name = (name or "").strip() or DEFAULT_NAMES[role]
        user = SessionUser(
            id=new_id(),
            name=display_name,
            email=(email or "").strip() or DEFAULT_EMAIL,
            role=role,
            avatar=AVATAR_URL.format(name=quote((name or "").strip() or role.value)),
        )
        logger.info("Session opened for %s as %s", user.name, role.value)
        return user

    def restore(self, data: Optional[dict]) -> Optional[SessionUser]:
        """Rebuild the session user from the persisted cookie payload."""
        if not data or not data.get("role"):
            return None
        try:
            role = Role(data["role"])
        except ValueError:
            logger.warning("Discarding session with unknown role %r", data.get("role"))
            return None
        return SessionUser(
            id=str(data.get("id") or new_id()),
            name=str(data.get("name") or DEFAULT_NAMES[role]),
            email=str(data.get("email") or "restored@session.com"),
            role=role,
            avatar=data.get("avatar"),
        )

    @staticmethod
    def to_session(user: SessionUser) -> dict:
        return {
            "id": user.id,
            "name": user.name,
            "email": user.email,
            "role": user.role.value,
            "avatar": user.avatar,
        }

    @staticmethod
    def toggle_language(current: Language | str) -> Language:
        try:
            lang = Language(current)
        except ValueError:
            lang = Language.EN
        return Language.TA if lang == Language.EN else Language.EN
