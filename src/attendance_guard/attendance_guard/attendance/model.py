from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Mapping


@dataclass(frozen=True)
class SlotEntry:
    """One recorded slot of a day.

    ``status`` is kept as the raw stored string; see ``core.enums.SlotStatus``
    for the expected vocabulary.
    """

    subject: str = ""
    status: str = ""


# Day-record: slot index (0..3) -> entry. A missing index means "not recorded".
DayRecord = Mapping[int, SlotEntry]

# ISO date string -> day-record.
AttendanceBook = Mapping[str, DayRecord]


@dataclass(frozen=True)
class DayView:
    """Read-model for the calendar editor (pre-filled from the timetable)."""

    date: date
    weekday: str
    is_sunday: bool
    is_holiday: bool
    slots: dict[int, SlotEntry]
