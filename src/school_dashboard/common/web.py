"""Request helpers shared by every controller."""

from __future__ import annotations

import logging
from functools import wraps
from typing import Optional

from flask import current_app, jsonify, request, session

from ..core.enums import Language, Role
from ..core.exceptions import AuthorizationError, DomainError, NotFoundError
from ..core.i18n import translate
from ..users.model import SessionUser
from ..users.service import SessionService

logger = logging.getLogger(__name__)

SESSION_USER_KEY = "user"
SESSION_LANGUAGE_KEY = "language"


def current_language() -> Language:
    default = current_app.config.get("DEFAULT_LANGUAGE", Language.EN.value)
    try:
        return Language(session.get(SESSION_LANGUAGE_KEY, default))
    except ValueError:
        return Language.EN


def current_user() -> Optional[SessionUser]:
    return SessionService().restore(session.get(SESSION_USER_KEY))


def message(key: str, **params) -> str:
    return translate(key, current_language(), **params)


def error_response(exc: DomainError):
    if isinstance(exc, AuthorizationError):
        status = 403
    elif isinstance(exc, NotFoundError):
        status = 404
    else:
        status = 400
    return jsonify({"error": exc.localized(current_language()), "code": exc.message_key}), status


def system_error(action: str):
    logger.exception("Unexpected error while %s (%s %s)", action, request.method, request.path)
    return jsonify({"error": message("system_error")}), 500


def json_body() -> dict:
    return request.get_json(silent=True) or {}


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if current_user() is None:
            return jsonify({"error": message("login_required")}), 401
        return view(*args, **kwargs)

    return wrapper


def roles_required(*roles: Role):
    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            user = current_user()
            if user is None:
                return jsonify({"error": message("login_required")}), 401
            if user.role not in roles:
                return jsonify({"error": message("forbidden")}), 403
            return view(*args, **kwargs)

        return wrapper

    return decorator
