from __future__ import annotations

from flask import Flask, jsonify, session

from ..common.serialization import to_json
from ..common.web import (
    SESSION_LANGUAGE_KEY,
    SESSION_USER_KEY,
    current_language,
    current_user,
    error_response,
    json_body,
    message,
    system_error,
)
from ..container import Container
from ..core.exceptions import DomainError


def register(app: Flask, container: Container) -> None:
    def _open_session(payload: dict):
        user = container.session_service.login(
            payload.get("email", ""),
            payload.get("role", ""),
            payload.get("name"),
        )
        # The role cookie is what restores the session on reload.
        session.permanent = True
        session[SESSION_USER_KEY] = container.session_service.to_session(user)
        return user

    @app.route("/login", methods=["POST"], endpoint="login")
    def login():
        try:
            user = _open_session(json_body())
            return jsonify({"message": message("login_success"), "user": to_json(user)})
        except DomainError as e:
            return error_response(e)
        except Exception:
            return system_error("logging in")

    @app.route("/signup", methods=["POST"], endpoint="signup")
    def signup():
        try:
            user = _open_session(json_body())
            return jsonify({"message": message("login_success"), "user": to_json(user)}), 201
        except DomainError as e:
            return error_response(e)
        except Exception:
            return system_error("signing up")

    @app.route("/logout", methods=["POST"], endpoint="logout")
    def logout():
        session.pop(SESSION_USER_KEY, None)
        return jsonify({"message": message("logout_success")})

    @app.route("/me", methods=["GET"], endpoint="me")
    def me():
        user = current_user()
        return jsonify({"user": to_json(user) if user else None, "language": current_language().value})

    @app.route("/language/toggle", methods=["POST"], endpoint="toggle_language")
    def toggle_language():
        lang = container.session_service.toggle_language(current_language())
        session[SESSION_LANGUAGE_KEY] = lang.value
        return jsonify({"language": lang.value})
