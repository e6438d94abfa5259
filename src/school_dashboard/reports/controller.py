from __future__ import annotations

from dataclasses import asdict

from flask import Flask, jsonify

from ..common.web import login_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/dashboard", methods=["GET"], endpoint="dashboard")
    @login_required
    def dashboard():
        data = container.dashboard_service.build()
        return jsonify(asdict(data))
