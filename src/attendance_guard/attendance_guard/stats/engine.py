from __future__ import annotations

import logging
from collections.abc import Collection
from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..attendance.model import AttendanceBook
from ..common.datetime_utils import is_rest_day, iter_days, to_iso
from ..core.constants import SLOT_COUNT
from ..core.enums import SlotStatus
from ..semester.model import SemesterSettings
from .calculator.base import ThresholdCalculator
from .calculator.standard_calculator import StandardThresholdCalculator
from .model import SubjectStats

logger = logging.getLogger(__name__)


@dataclass
class _Counts:
    present: int = 0
    absent: int = 0
    conducted: int = 0
    projected: int = 0


def compute_stats(
    settings: SemesterSettings,
    holidays: Collection[str],
    attendance: AttendanceBook,
    today: date,
    *,
    calculator: Optional[ThresholdCalculator] = None,
) -> dict[str, SubjectStats]:
    """Walk the semester once and derive per-subject attendance statistics.

    Pure: nothing is mutated and ``today`` must be pinned by the caller.
    Sundays and holidays are skipped entirely. Only recorded slots count;
    the timetable is never used to infer a subject here. Missing or
    inverted semester bounds give all-zero stats for every subject.
    """

    calculator = calculator or StandardThresholdCalculator()
    counts = {subject: _Counts() for subject in settings.subjects}
    if not counts:
        return {}

    start, end = settings.semester_start, settings.last_working_date
    if start is None or end is None or start > end:
        return {subject: SubjectStats() for subject in counts}

    holiday_set = set(holidays)
    logger.debug("Computing stats %s..%s for %d subjects (today=%s)", start, end, len(counts), today)

    for day in iter_days(start, end):
        if is_rest_day(day):
            continue
        day_key = to_iso(day)
        if day_key in holiday_set:
            continue

        record = attendance.get(day_key) or {}
        is_past_or_today = day <= today

        for idx in range(SLOT_COUNT):
            entry = record.get(idx)
            if entry is None:
                continue
            if entry.status == SlotStatus.FREE:
                continue
            c = counts.get(entry.subject) if entry.subject else None
            if c is None:
                continue

            c.projected += 1
            if is_past_or_today:
                # Unmarked status still counts as conducted, but neither present nor absent.
                c.conducted += 1
                if entry.status == SlotStatus.PRESENT:
                    c.present += 1
                elif entry.status == SlotStatus.ABSENT:
                    c.absent += 1

    return {subject: _derive(c, calculator) for subject, c in counts.items()}


def _derive(c: _Counts, calculator: ThresholdCalculator) -> SubjectStats:
    return SubjectStats(
        present=c.present,
        absent=c.absent,
        total_conducted=c.conducted,
        total_projected=c.projected,
        percentage=calculator.percentage(present=c.present, conducted=c.conducted),
        safe_leaves=calculator.safe_leaves(present=c.present, conducted=c.conducted),
        classes_to_attend=calculator.classes_to_attend(present=c.present, conducted=c.conducted),
    )
