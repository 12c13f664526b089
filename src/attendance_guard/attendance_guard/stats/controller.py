from __future__ import annotations

from flask import Flask

from ..common.web import current_user_id, login_required, today_arg
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/dashboard", methods=["GET"], endpoint="dashboard")
    @login_required
    def dashboard():
        report = container.dashboard_service.build(current_user_id(), today=today_arg())
        return report.to_dict()
