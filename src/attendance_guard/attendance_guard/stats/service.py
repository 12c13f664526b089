from __future__ import annotations

from datetime import date
from typing import Optional

from ..common.datetime_utils import today_local
from ..core.constants import ATTENDANCE_THRESHOLD_PERCENT
from ..core.enums import Standing
from ..snapshots.repository import SnapshotRepository
from .calculator.base import ThresholdCalculator
from .calculator.standard_calculator import StandardThresholdCalculator
from .engine import compute_stats
from .model import DashboardReport, SubjectReportRow, SubjectStats


class DashboardService:
    def __init__(
        self,
        snapshots: SnapshotRepository,
        *,
        calculator: Optional[ThresholdCalculator] = None,
    ):
        self._snapshots = snapshots
        self._calculator = calculator or StandardThresholdCalculator()

    def build(self, user_id: int, *, today: Optional[date] = None) -> DashboardReport:
        snapshot = self._snapshots.get(user_id)
        if not snapshot:
            return DashboardReport(course_name="", needs_setup=True, missing_timetable=True, rows=[])

        settings = snapshot.settings
        missing_timetable = not settings.has_timetable()
        if not settings.semester_start or not settings.subjects:
            return DashboardReport(
                course_name=settings.course_name,
                needs_setup=True,
                missing_timetable=missing_timetable,
                rows=[],
            )

        # Pin "today" once for the whole computation.
        today = today or today_local()
        stats = compute_stats(settings, snapshot.holidays, snapshot.attendance, today, calculator=self._calculator)

        return DashboardReport(
            course_name=settings.course_name,
            needs_setup=False,
            missing_timetable=missing_timetable,
            rows=[self._to_row(subject, s) for subject, s in stats.items()],
        )

    @staticmethod
    def _to_row(subject: str, s: SubjectStats) -> SubjectReportRow:
        if s.percentage >= ATTENDANCE_THRESHOLD_PERCENT:
            return SubjectReportRow(
                subject=subject,
                stats=s,
                standing=Standing.SAFE,
                advice=f"You can skip {s.safe_leaves} more classes this semester.",
            )
        return SubjectReportRow(
            subject=subject,
            stats=s,
            standing=Standing.AT_RISK,
            advice=f"Attend {s.classes_to_attend} more classes to get back to {ATTENDANCE_THRESHOLD_PERCENT}% current attendance.",
        )
