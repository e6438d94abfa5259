from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.serialization import to_json
from ..common.web import current_user, error_response, json_body, login_required, message, roles_required, system_error
from ..container import Container
from ..core.enums import Role
from ..core.exceptions import DomainError


def register(app: Flask, container: Container) -> None:
    service = container.exam_service

    @app.route("/exams", methods=["GET"], endpoint="list_exams")
    @login_required
    def list_exams():
        return jsonify({"exams": to_json(service.list_exams(class_name=request.args.get("class_name")))})

    @app.route("/exams", methods=["POST"], endpoint="create_exam")
    @roles_required(Role.ADMIN, Role.TEACHER)
    def create_exam():
        payload = json_body()
        try:
            exam = service.create_exam(
                current_role=current_user().role,
                name=payload.get("name", ""),
                exam_date=payload.get("date", ""),
                class_name=payload.get("class_name", ""),
                subject=payload.get("subject", ""),
                total_marks=payload.get("total_marks"),
            )
            return jsonify({"message": message("exam_created"), "exam": to_json(exam)}), 201
        except DomainError as e:
            return error_response(e)
        except Exception:
            return system_error("creating exam")

    @app.route("/exams/<exam_id>/marks", methods=["GET"], endpoint="mark_sheet")
    @roles_required(Role.ADMIN, Role.TEACHER)
    def mark_sheet(exam_id: str):
        try:
            rows = service.mark_sheet(exam_id=exam_id, section=request.args.get("section", ""))
            return jsonify({"marks": rows})
        except DomainError as e:
            return error_response(e)

    @app.route("/exams/<exam_id>/marks", methods=["POST"], endpoint="enter_marks")
    @roles_required(Role.ADMIN, Role.TEACHER)
    def enter_marks(exam_id: str):
        try:
            result = service.enter_marks(
                current_role=current_user().role,
                exam_id=exam_id,
                values=json_body().get("marks") or {},
            )
        except DomainError as e:
            return error_response(e)
        except Exception:
            return system_error("saving marks")

        return jsonify(
            {
                "message": message("marks_saved") if result.saved else None,
                "saved": to_json(result.saved),
                "rejected": result.rejected,
            }
        )
