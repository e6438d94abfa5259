from __future__ import annotations

from ..core.enums import Role
from ..core.exceptions import AuthorizationError

STAFF_ROLES = frozenset({Role.ADMIN, Role.TEACHER})


def require_role(current_role: Role, *allowed: Role) -> Role:
    try:
        role = Role(current_role)
    except ValueError:
        raise AuthorizationError("invalid_role")
    if role not in allowed:
        raise AuthorizationError("forbidden")
    return role


def require_staff(current_role: Role) -> Role:
    return require_role(current_role, *STAFF_ROLES)
