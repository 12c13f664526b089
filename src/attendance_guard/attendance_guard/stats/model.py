from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Union

from ..core.enums import Standing

Percentage = Union[Decimal, int]


@dataclass(frozen=True)
class SubjectStats:
    """Derived per-subject statistics (never persisted).

    ``percentage`` is a two-place ``Decimal`` when at least one slot was
    conducted, otherwise the literal ``0``.
    """

    present: int = 0
    absent: int = 0
    total_conducted: int = 0
    total_projected: int = 0
    percentage: Percentage = 0
    safe_leaves: int = 0
    classes_to_attend: int = 0

    def to_dict(self) -> dict:
        return {
            "present": self.present,
            "absent": self.absent,
            "totalConducted": self.total_conducted,
            "totalProjected": self.total_projected,
            "percentage": f"{self.percentage:.2f}" if isinstance(self.percentage, Decimal) else 0,
            "safeLeaves": self.safe_leaves,
            "classesToAttend": self.classes_to_attend,
        }


@dataclass(frozen=True)
class SubjectReportRow:
    """Read-model for the dashboard: engine stats plus standing/advice."""

    subject: str
    stats: SubjectStats
    standing: Standing
    advice: str

    def to_dict(self) -> dict:
        return {
            "subject": self.subject,
            **self.stats.to_dict(),
            "standing": self.standing.value,
            "advice": self.advice,
        }


@dataclass(frozen=True)
class DashboardReport:
    course_name: str
    needs_setup: bool
    missing_timetable: bool
    rows: list[SubjectReportRow]

    def to_dict(self) -> dict:
        return {
            "courseName": self.course_name,
            "needsSetup": self.needs_setup,
            "missingTimetable": self.missing_timetable,
            "subjects": [r.to_dict() for r in self.rows],
        }
