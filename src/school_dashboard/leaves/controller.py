from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.serialization import to_json
from ..common.web import current_user, error_response, json_body, login_required, message, roles_required, system_error
from ..container import Container
from ..core.enums import LeaveStatus, Role
from ..core.exceptions import DomainError


def register(app: Flask, container: Container) -> None:
    service = container.leave_service

    @app.route("/leaves/mine", methods=["GET"], endpoint="my_leaves")
    @login_required
    def my_leaves():
        return jsonify({"leaves": to_json(service.list_mine(current_user()))})

    @app.route("/leaves/incoming", methods=["GET"], endpoint="incoming_leaves")
    @roles_required(Role.ADMIN, Role.TEACHER)
    def incoming_leaves():
        try:
            leaves = service.list_incoming(
                current_user(),
                class_name=request.args.get("class_name"),
                section=request.args.get("section"),
                status_filter=request.args.get("status", LeaveStatus.PENDING.value),
            )
            return jsonify({"leaves": to_json(leaves)})
        except DomainError as e:
            return error_response(e)

    @app.route("/leaves", methods=["POST"], endpoint="apply_leave")
    @roles_required(Role.STUDENT, Role.TEACHER)
    def apply_leave():
        payload = json_body()
        try:
            leave = service.apply(
                user=current_user(),
                from_date=payload.get("from_date"),
                to_date=payload.get("to_date"),
                reason=payload.get("reason", ""),
            )
            return jsonify({"message": message("leave_submitted"), "leave": to_json(leave)}), 201
        except DomainError as e:
            return error_response(e)
        except Exception:
            return system_error("applying for leave")

    def _decide(leave_id: str, status: LeaveStatus, message_key: str):
        try:
            leave = service.decide(user=current_user(), leave_id=leave_id, status=status)
            return jsonify({"message": message(message_key), "leave": to_json(leave)})
        except DomainError as e:
            return error_response(e)
        except Exception:
            return system_error("deciding leave")

    @app.route("/leaves/<leave_id>/approve", methods=["POST"], endpoint="approve_leave")
    @roles_required(Role.ADMIN, Role.TEACHER)
    def approve_leave(leave_id: str):
        return _decide(leave_id, LeaveStatus.APPROVED, "leave_approved")

    @app.route("/leaves/<leave_id>/reject", methods=["POST"], endpoint="reject_leave")
    @roles_required(Role.ADMIN, Role.TEACHER)
    def reject_leave(leave_id: str):
        return _decide(leave_id, LeaveStatus.REJECTED, "leave_rejected")
