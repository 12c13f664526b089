from __future__ import annotations

from flask import Flask

from ..common.datetime_utils import to_iso
from ..common.web import current_user_id, json_body, login_required
from ..container import Container
from .model import SemesterSettings


def _settings_json(settings: SemesterSettings, holidays) -> dict:
    return {
        "courseName": settings.course_name,
        "semesterStart": to_iso(settings.semester_start) if settings.semester_start else None,
        "lastWorkingDate": to_iso(settings.last_working_date) if settings.last_working_date else None,
        "subjects": list(settings.subjects),
        "timetable": {
            day: {str(idx): subject for idx, subject in sorted(slots.items())}
            for day, slots in settings.timetable.items()
        },
        "holidays": list(holidays),
    }


def register(app: Flask, container: Container) -> None:
    svc = container.semester_service

    def _current() -> dict:
        user_id = current_user_id()
        return _settings_json(svc.get_settings(user_id), svc.get_holidays(user_id))

    @app.route("/settings", methods=["GET"], endpoint="settings")
    @login_required
    def settings_view():
        return _current()

    @app.route("/settings", methods=["PUT"], endpoint="settings_update")
    @login_required
    def settings_update():
        data = json_body()
        svc.update_course(
            current_user_id(),
            course_name=data.get("courseName", ""),
            semester_start=data.get("semesterStart"),
            last_working_date=data.get("lastWorkingDate"),
        )
        return _current()

    @app.route("/settings/subjects", methods=["POST"], endpoint="subject_add")
    @login_required
    def subject_add():
        svc.add_subject(current_user_id(), json_body().get("name", ""))
        return _current(), 201

    @app.route("/settings/subjects/<path:name>", methods=["DELETE"], endpoint="subject_remove")
    @login_required
    def subject_remove(name: str):
        svc.remove_subject(current_user_id(), name)
        return _current()

    @app.route("/settings/timetable/<weekday>/<slot>", methods=["PUT"], endpoint="timetable_set")
    @login_required
    def timetable_set(weekday: str, slot: str):
        svc.set_timetable_slot(
            current_user_id(),
            weekday=weekday,
            slot_index=slot,
            subject=json_body().get("subject", ""),
        )
        return _current()

    @app.route("/settings/holidays", methods=["POST"], endpoint="holiday_add")
    @login_required
    def holiday_add():
        svc.add_holiday(current_user_id(), json_body().get("date", ""))
        return _current(), 201

    @app.route("/settings/holidays/<day>", methods=["DELETE"], endpoint="holiday_remove")
    @login_required
    def holiday_remove(day: str):
        svc.remove_holiday(current_user_id(), day)
        return _current()
