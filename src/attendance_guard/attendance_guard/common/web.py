from __future__ import annotations

from datetime import date
from functools import wraps

from flask import request, session

from ..core.exceptions import AuthorizationError
from .datetime_utils import parse_iso_date_or_none


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            raise AuthorizationError("Please log in to continue")
        return view(*args, **kwargs)

    return wrapper


def current_user_id() -> int:
    return int(session["user_id"])


def json_body() -> dict:
    return request.get_json(silent=True) or {}


def today_arg(field_name: str = "today") -> date | None:
    """Optional ``?today=YYYY-MM-DD`` override (None -> local date)."""
    return parse_iso_date_or_none(request.args.get(field_name), field_name)
