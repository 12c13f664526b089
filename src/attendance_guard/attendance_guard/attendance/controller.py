from __future__ import annotations

from flask import Flask

from ..common.datetime_utils import parse_iso_date_or_none, to_iso
from ..common.web import current_user_id, json_body, login_required
from ..container import Container
from ..core.constants import SLOT_TIMES
from ..core.exceptions import ValidationError
from .model import DayView


def _parse_day(value: str):
    day = parse_iso_date_or_none(value, "Date")
    if day is None:
        raise ValidationError("Date must not be empty")
    return day


def _day_json(view: DayView) -> dict:
    return {
        "date": to_iso(view.date),
        "weekday": view.weekday,
        "isSunday": view.is_sunday,
        "isHoliday": view.is_holiday,
        "slots": [
            {"index": idx, "time": SLOT_TIMES[idx], "subject": entry.subject, "status": entry.status}
            for idx, entry in sorted(view.slots.items())
        ],
    }


def register(app: Flask, container: Container) -> None:
    svc = container.calendar_service

    @app.route("/calendar/<day>", methods=["GET"], endpoint="calendar_day")
    @login_required
    def calendar_day(day: str):
        return _day_json(svc.get_day(current_user_id(), _parse_day(day)))

    @app.route("/calendar/<day>", methods=["PUT"], endpoint="calendar_save")
    @login_required
    def calendar_save(day: str):
        d = _parse_day(day)
        slots = json_body().get("slots")
        if not isinstance(slots, dict):
            raise ValidationError("Body must contain a 'slots' object keyed by slot index")
        user_id = current_user_id()
        svc.save_day(user_id, d, slots)
        return _day_json(svc.get_day(user_id, d))

    @app.route("/calendar/<day>/slots/<slot>", methods=["PATCH"], endpoint="calendar_slot")
    @login_required
    def calendar_slot(day: str, slot: str):
        data = json_body()
        view = svc.update_slot(
            current_user_id(),
            _parse_day(day),
            slot,
            subject=data.get("subject"),
            status=data.get("status"),
        )
        return _day_json(view)
