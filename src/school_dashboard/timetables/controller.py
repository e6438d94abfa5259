from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.serialization import to_json
from ..common.web import current_user, error_response, json_body, login_required, message, roles_required, system_error
from ..container import Container
from ..core.enums import Role
from ..core.exceptions import DomainError


def register(app: Flask, container: Container) -> None:
    service = container.timetable_service

    @app.route("/timetables", methods=["GET"], endpoint="get_timetable")
    @login_required
    def get_timetable():
        timetable = service.load(request.args.get("class_name", ""), request.args.get("section", ""))
        return jsonify({"timetable": to_json(timetable)})

    @app.route("/timetables", methods=["PUT"], endpoint="save_timetable")
    @roles_required(Role.ADMIN, Role.TEACHER)
    def save_timetable():
        payload = json_body()
        try:
            timetable = service.save(
                current_role=current_user().role,
                class_name=payload.get("class_name", ""),
                section=payload.get("section", ""),
                schedule=payload.get("schedule") or [],
            )
            return jsonify({"message": message("timetable_saved"), "timetable": to_json(timetable)})
        except DomainError as e:
            return error_response(e)
        except Exception:
            return system_error("saving timetable")
