from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date
from typing import Mapping, Optional

from ..common.datetime_utils import is_rest_day, to_iso, weekday_name
from ..common.validators import require_slot_index
from ..core.constants import FREE_MARKER, SLOT_COUNT
from ..core.enums import SlotStatus
from ..core.exceptions import ValidationError
from ..semester.model import SemesterSettings
from ..snapshots.model import UserSnapshot
from ..snapshots.repository import SnapshotRepository
from .model import DayView, SlotEntry

logger = logging.getLogger(__name__)

_STATUSES = {s.value for s in SlotStatus}
_MARKS = {SlotStatus.PRESENT.value, SlotStatus.ABSENT.value}


class CalendarService:
    """Use case: view and edit the per-day slot records."""

    def __init__(self, snapshots: SnapshotRepository):
        self._snapshots = snapshots

    def get_day(self, user_id: int, day: date) -> DayView:
        """Day view for the editor.

        Each slot is the stored entry if any, else (on working days) the
        timetable default subject with an empty status, else empty.
        """

        snapshot = self._load(user_id)
        key = to_iso(day)
        stored = snapshot.attendance.get(key) or {}
        is_sunday = is_rest_day(day)
        is_holiday = key in snapshot.holidays

        defaults: Mapping[int, str] = {}
        if not is_sunday and not is_holiday:
            defaults = snapshot.settings.timetable.get(weekday_name(day)) or {}

        slots = {}
        for idx in range(SLOT_COUNT):
            existing = stored.get(idx)
            slots[idx] = existing if existing is not None else SlotEntry(subject=defaults.get(idx, ""))

        return DayView(
            date=day,
            weekday=weekday_name(day),
            is_sunday=is_sunday,
            is_holiday=is_holiday,
            slots=slots,
        )

    def save_day(self, user_id: int, day: date, slots: Mapping) -> dict[int, SlotEntry]:
        """Validate and store a whole day record as given.

        Entries identical to what the day view already shows (stored or
        pre-filled) are kept as they are, even if their subject has since
        been removed from the settings.
        """

        snapshot = self._load(user_id)
        current = self.get_day(user_id, day).slots
        record = self._validate_record(snapshot.settings, slots, current)

        attendance = dict(snapshot.attendance)
        attendance[to_iso(day)] = record
        self._snapshots.save(user_id, replace(snapshot, attendance=attendance))
        logger.info("Saved %s for user_id=%s (%d slots)", to_iso(day), user_id, len(record))
        return record

    def update_slot(
        self,
        user_id: int,
        day: date,
        slot_index,
        *,
        subject: Optional[str] = None,
        status: Optional[str] = None,
    ) -> DayView:
        """Apply one editor change on top of the current day view and save the day.

        Clearing the subject or switching it to Free resets the status;
        choosing a real subject while the status is empty marks it Present.
        """

        idx = require_slot_index(slot_index)
        view = self.get_day(user_id, day)
        entry = view.slots[idx]

        if subject is not None:
            subject = subject.strip()
            entry = replace(entry, subject=subject)
            if not subject or subject == FREE_MARKER:
                entry = replace(entry, status=SlotStatus.UNMARKED.value)
            elif not entry.status:
                entry = replace(entry, status=SlotStatus.PRESENT.value)

        if status is not None:
            entry = replace(entry, status=status)

        slots = dict(view.slots)
        slots[idx] = entry
        self.save_day(user_id, day, slots)
        return replace(view, slots=slots)

    def _load(self, user_id: int) -> UserSnapshot:
        return self._snapshots.get(user_id) or UserSnapshot.empty()

    @staticmethod
    def _validate_record(
        settings: SemesterSettings,
        slots: Mapping,
        current: Mapping[int, SlotEntry],
    ) -> dict[int, SlotEntry]:
        record: dict[int, SlotEntry] = {}
        for raw_idx, raw_entry in slots.items():
            idx = require_slot_index(raw_idx)
            if isinstance(raw_entry, SlotEntry):
                entry = raw_entry
            elif isinstance(raw_entry, Mapping):
                entry = SlotEntry(
                    subject=str(raw_entry.get("subject") or "").strip(),
                    status=str(raw_entry.get("status") or ""),
                )
            else:
                raise ValidationError(f"Slot {idx} must be an object with subject and status")

            if entry == current.get(idx):
                record[idx] = entry
                continue

            if entry.status not in _STATUSES:
                raise ValidationError(f"Slot {idx}: unknown status {entry.status!r}")
            if entry.subject and entry.subject != FREE_MARKER and entry.subject not in settings.subjects:
                raise ValidationError(f"Slot {idx}: unknown subject {entry.subject!r}")
            if entry.status in _MARKS and (not entry.subject or entry.subject == FREE_MARKER):
                raise ValidationError(f"Slot {idx}: choose a subject before marking {entry.status}")

            record[idx] = entry
        return record
