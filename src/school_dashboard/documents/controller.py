from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.serialization import to_json
from ..common.web import current_user, error_response, login_required, message, roles_required, system_error
from ..container import Container
from ..core.enums import Role
from ..core.exceptions import DomainError, ValidationError


def register(app: Flask, container: Container) -> None:
    service = container.document_service

    @app.route("/documents", methods=["GET"], endpoint="list_documents")
    @login_required
    def list_documents():
        return jsonify({"documents": to_json(service.search(request.args.get("q", "")))})

    @app.route("/documents", methods=["POST"], endpoint="upload_document")
    @roles_required(Role.ADMIN, Role.TEACHER)
    def upload_document():
        try:
            upload = request.files.get("file")
            if upload is None or not upload.filename:
                raise ValidationError("field_required", field="file")

            document = service.upload(
                user=current_user(),
                filename=upload.filename,
                content=upload.read(),
                category=request.form.get("category"),
            )
            return jsonify({"message": message("document_uploaded"), "document": to_json(document)}), 201
        except DomainError as e:
            return error_response(e)
        except Exception:
            return system_error("uploading document")
