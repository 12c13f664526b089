from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class SemesterSettings:
    """Per-user course configuration.

    ``subjects`` is the only set of valid accumulation targets for the
    statistics engine. ``timetable`` maps a weekday name to slot index ->
    subject name (or ``"Free"``) and is used for day-view pre-fill only.
    """

    course_name: str = ""
    semester_start: Optional[date] = None
    last_working_date: Optional[date] = None
    subjects: tuple[str, ...] = ()
    timetable: dict[str, dict[int, str]] = field(default_factory=dict)

    def has_timetable(self) -> bool:
        return any(self.timetable.values())
