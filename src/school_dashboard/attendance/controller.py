from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.serialization import to_json
from ..common.web import current_user, error_response, json_body, login_required, message, roles_required, system_error
from ..container import Container
from ..core.enums import Role
from ..core.exceptions import DomainError


def register(app: Flask, container: Container) -> None:
    service = container.attendance_service

    @app.route("/attendance", methods=["GET"], endpoint="attendance_roster")
    @roles_required(Role.ADMIN, Role.TEACHER)
    def attendance_roster():
        class_name = request.args.get("class_name", "")
        section = request.args.get("section", "")
        return jsonify(
            {
                "date": container.store.today().isoformat(),
                "class_name": class_name,
                "section": section,
                "already_marked": service.is_section_marked(class_name, section),
                "roster": service.roster(class_name, section),
                "summary": service.section_summary(class_name, section),
                "school_present": service.school_present_count(),
            }
        )

    @app.route("/attendance", methods=["POST"], endpoint="submit_attendance")
    @roles_required(Role.ADMIN, Role.TEACHER)
    def submit_attendance():
        payload = json_body()
        try:
            result = service.submit_class(
                current_role=current_user().role,
                class_name=str(payload.get("class_name", "")),
                section=str(payload.get("section", "")),
                statuses=payload.get("statuses") or {},
            )
        except DomainError as e:
            return error_response(e)
        except Exception:
            return system_error("saving attendance")

        text = message("attendance_saved")
        if result.absentees:
            text += message("auto_alerts_sent", count=result.absentees)
        return jsonify({"message": text, "notifications": to_json(result.notifications)})

    @app.route("/attendance/me", methods=["GET"], endpoint="my_attendance")
    @login_required
    def my_attendance():
        record = service.my_today(current_user())
        return jsonify({"record": to_json(record) if record else None})
