from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.serialization import to_json
from ..common.web import current_user, error_response, json_body, login_required, message, roles_required, system_error
from ..container import Container
from ..core.enums import Role
from ..core.exceptions import DomainError


def register(app: Flask, container: Container) -> None:
    service = container.teacher_service

    @app.route("/teachers", methods=["GET"], endpoint="list_teachers")
    @login_required
    def list_teachers():
        return jsonify({"teachers": to_json(service.search(request.args.get("q", "")))})

    @app.route("/teachers", methods=["POST"], endpoint="register_teacher")
    @roles_required(Role.ADMIN)
    def register_teacher():
        try:
            teacher = service.register(current_role=current_user().role, data=json_body())
            return jsonify({"message": message("teacher_added", name=teacher.name), "teacher": to_json(teacher)}), 201
        except DomainError as e:
            return error_response(e)
        except Exception:
            return system_error("registering teacher")
