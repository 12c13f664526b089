from __future__ import annotations

from flask import Flask

from ..common.datetime_utils import today_local
from ..common.web import current_user_id, login_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/export.csv", methods=["GET"], endpoint="export_csv")
    @login_required
    def export_csv():
        svc = container.export_service
        csv_bytes = svc.attendance_csv(current_user_id()).encode("utf-8-sig")
        return app.response_class(
            csv_bytes,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={svc.filename(today_local())}"},
        )
