from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.serialization import to_json
from ..common.web import current_user, error_response, json_body, login_required, message, roles_required, system_error
from ..container import Container
from ..core.enums import Role
from ..core.exceptions import DomainError


def register(app: Flask, container: Container) -> None:
    service = container.student_service

    @app.route("/students", methods=["GET"], endpoint="list_students")
    @login_required
    def list_students():
        class_name = request.args.get("class_name")
        section = request.args.get("section")
        if class_name and section:
            students = service.in_section(class_name, section)
        else:
            students = service.search(request.args.get("q", ""))
        return jsonify(
            {
                "students": to_json(students),
                "classes": service.classes(),
                "sections": service.sections(),
            }
        )

    @app.route("/students", methods=["POST"], endpoint="admit_student")
    @roles_required(Role.ADMIN, Role.TEACHER)
    def admit_student():
        try:
            student = service.admit(current_role=current_user().role, data=json_body())
            return jsonify({"message": message("student_added", name=student.name), "student": to_json(student)}), 201
        except DomainError as e:
            return error_response(e)
        except Exception:
            return system_error("admitting student")

    @app.route("/students/<student_id>", methods=["PUT"], endpoint="edit_student")
    @roles_required(Role.ADMIN, Role.TEACHER)
    def edit_student(student_id: str):
        try:
            student = service.edit(current_role=current_user().role, student_id=student_id, data=json_body())
            return jsonify({"message": message("student_updated", name=student.name), "student": to_json(student)})
        except DomainError as e:
            return error_response(e)
        except Exception:
            return system_error("updating student")
