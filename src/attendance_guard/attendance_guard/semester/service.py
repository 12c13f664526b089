from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date
from typing import Optional

from ..common.datetime_utils import parse_iso_date_or_none, to_iso
from ..common.validators import require_non_empty, require_slot_index
from ..core.constants import FREE_MARKER, TIMETABLE_WEEKDAYS
from ..core.exceptions import ValidationError
from ..snapshots.model import UserSnapshot
from ..snapshots.repository import SnapshotRepository
from .model import SemesterSettings

logger = logging.getLogger(__name__)


class SemesterService:
    """Use case: edit course settings, subjects, default timetable and holidays."""

    def __init__(self, snapshots: SnapshotRepository):
        self._snapshots = snapshots

    def get_settings(self, user_id: int) -> SemesterSettings:
        return self._load(user_id).settings

    def get_holidays(self, user_id: int) -> tuple[str, ...]:
        return self._load(user_id).holidays

    def update_course(
        self,
        user_id: int,
        *,
        course_name: str,
        semester_start: Optional[str | date],
        last_working_date: Optional[str | date],
    ) -> SemesterSettings:
        start = parse_iso_date_or_none(semester_start, "Semester start")
        end = parse_iso_date_or_none(last_working_date, "Last working date")
        if start and end and start > end:
            raise ValidationError("Semester start must not be after the last working date")

        snapshot = self._load(user_id)
        settings = replace(
            snapshot.settings,
            course_name=(course_name or "").strip(),
            semester_start=start,
            last_working_date=end,
        )
        self._save_settings(user_id, snapshot, settings)
        return settings

    def add_subject(self, user_id: int, name: str) -> SemesterSettings:
        name = require_non_empty(name, "Subject")
        if name == FREE_MARKER:
            raise ValidationError(f"'{FREE_MARKER}' is reserved and cannot be a subject")

        snapshot = self._load(user_id)
        settings = snapshot.settings
        if name in settings.subjects:
            return settings

        settings = replace(settings, subjects=settings.subjects + (name,))
        self._save_settings(user_id, snapshot, settings)
        return settings

    def remove_subject(self, user_id: int, name: str) -> SemesterSettings:
        snapshot = self._load(user_id)
        settings = snapshot.settings
        if name not in settings.subjects:
            return settings

        settings = replace(settings, subjects=tuple(s for s in settings.subjects if s != name))
        self._save_settings(user_id, snapshot, settings)
        return settings

    def set_timetable_slot(self, user_id: int, *, weekday: str, slot_index, subject: str) -> SemesterSettings:
        if weekday not in TIMETABLE_WEEKDAYS:
            raise ValidationError(f"Weekday must be one of {', '.join(TIMETABLE_WEEKDAYS)}")
        idx = require_slot_index(slot_index)

        snapshot = self._load(user_id)
        settings = snapshot.settings
        subject = (subject or "").strip()
        if subject and subject != FREE_MARKER and subject not in settings.subjects:
            raise ValidationError(f"Unknown subject: {subject}")

        timetable = {day: dict(slots) for day, slots in settings.timetable.items()}
        day_slots = timetable.setdefault(weekday, {})
        if subject:
            day_slots[idx] = subject
        else:
            day_slots.pop(idx, None)

        settings = replace(settings, timetable=timetable)
        self._save_settings(user_id, snapshot, settings)
        return settings

    def add_holiday(self, user_id: int, iso_date: str) -> tuple[str, ...]:
        day = parse_iso_date_or_none(iso_date, "Holiday")
        if day is None:
            raise ValidationError("Holiday must not be empty")
        key = to_iso(day)

        snapshot = self._load(user_id)
        if key in snapshot.holidays:
            return snapshot.holidays

        holidays = tuple(sorted(snapshot.holidays + (key,)))
        self._snapshots.save(user_id, replace(snapshot, holidays=holidays))
        return holidays

    def remove_holiday(self, user_id: int, iso_date: str) -> tuple[str, ...]:
        snapshot = self._load(user_id)
        holidays = tuple(h for h in snapshot.holidays if h != iso_date)
        if holidays != snapshot.holidays:
            self._snapshots.save(user_id, replace(snapshot, holidays=holidays))
        return holidays

    def _load(self, user_id: int) -> UserSnapshot:
        return self._snapshots.get(user_id) or UserSnapshot.empty()

    def _save_settings(self, user_id: int, snapshot: UserSnapshot, settings: SemesterSettings) -> None:
        self._snapshots.save(user_id, replace(snapshot, settings=settings))
        logger.info("Saved settings for user_id=%s", user_id)
