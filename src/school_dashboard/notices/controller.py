from __future__ import annotations

from flask import Flask, jsonify

from ..common.serialization import to_json
from ..common.web import current_user, error_response, json_body, login_required, message, roles_required, system_error
from ..container import Container
from ..core.enums import Role
from ..core.exceptions import DomainError


def register(app: Flask, container: Container) -> None:
    service = container.notice_service

    @app.route("/notices", methods=["GET"], endpoint="list_notices")
    @login_required
    def list_notices():
        return jsonify({"notices": to_json(service.list_all())})

    @app.route("/notices", methods=["POST"], endpoint="post_notice")
    @roles_required(Role.ADMIN, Role.TEACHER)
    def post_notice():
        payload = json_body()
        try:
            notice = service.post(
                user=current_user(),
                title=payload.get("title", ""),
                message=payload.get("message", ""),
                notice_type=payload.get("type"),
            )
            return jsonify({"message": message("notice_posted"), "notice": to_json(notice)}), 201
        except DomainError as e:
            return error_response(e)
        except Exception:
            return system_error("posting notice")

    @app.route("/notices/<notice_id>", methods=["DELETE"], endpoint="delete_notice")
    @roles_required(Role.ADMIN, Role.TEACHER)
    def delete_notice(notice_id: str):
        try:
            service.delete(user=current_user(), notice_id=notice_id)
            return jsonify({"message": message("notice_deleted")})
        except DomainError as e:
            return error_response(e)
