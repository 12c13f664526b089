from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Optional

from ..attendance.model import AttendanceBook, SlotEntry
from ..common.datetime_utils import parse_iso_date, parse_iso_date_or_none, to_iso
from ..core.constants import SLOT_COUNT
from ..semester.model import SemesterSettings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UserSnapshot:
    """Everything stored for one user: ``{settings, holidays, attendance}``.

    Serialized as one JSON document per user (dates as ISO strings, slot
    indices as object keys ``"0".."3"``).
    """

    settings: SemesterSettings = field(default_factory=SemesterSettings)
    holidays: tuple[str, ...] = ()
    attendance: AttendanceBook = field(default_factory=dict)

    @classmethod
    def empty(cls) -> "UserSnapshot":
        return cls()

    @classmethod
    def from_document(cls, doc: Optional[dict[str, Any]]) -> "UserSnapshot":
        doc = doc or {}
        raw_settings = doc.get("settings") or {}

        settings = SemesterSettings(
            course_name=str(raw_settings.get("courseName") or ""),
            semester_start=parse_iso_date_or_none(raw_settings.get("semesterStart"), "semesterStart"),
            last_working_date=parse_iso_date_or_none(raw_settings.get("lastWorkingDate"), "lastWorkingDate"),
            subjects=tuple(str(s) for s in raw_settings.get("subjects") or []),
            timetable=_decode_timetable(raw_settings.get("timetable") or {}),
        )

        holidays = tuple(sorted({str(h) for h in doc.get("holidays") or []}))
        attendance = _decode_attendance(doc.get("attendance") or {})
        return cls(settings=settings, holidays=holidays, attendance=attendance)

    def to_document(self) -> dict[str, Any]:
        s = self.settings
        return {
            "settings": {
                "courseName": s.course_name,
                "semesterStart": to_iso(s.semester_start) if s.semester_start else None,
                "lastWorkingDate": to_iso(s.last_working_date) if s.last_working_date else None,
                "subjects": list(s.subjects),
                "timetable": {
                    day: {str(idx): subject for idx, subject in sorted(slots.items())}
                    for day, slots in s.timetable.items()
                },
            },
            "holidays": list(self.holidays),
            "attendance": {
                day: {
                    str(idx): {"subject": entry.subject, "status": entry.status}
                    for idx, entry in sorted(record.items())
                }
                for day, record in sorted(self.attendance.items())
            },
        }


def _slot_key(raw: Any) -> Optional[int]:
    try:
        idx = int(raw)
    except (TypeError, ValueError):
        return None
    return idx if 0 <= idx < SLOT_COUNT else None


def _decode_timetable(raw: dict) -> dict[str, dict[int, str]]:
    out: dict[str, dict[int, str]] = {}
    for day, slots in raw.items():
        decoded: dict[int, str] = {}
        for key, subject in (slots or {}).items():
            idx = _slot_key(key)
            if idx is None:
                logger.warning("Dropping timetable slot %r on %s", key, day)
                continue
            decoded[idx] = str(subject or "")
        out[str(day)] = decoded
    return out


def _decode_attendance(raw: dict) -> dict[str, dict[int, SlotEntry]]:
    out: dict[str, dict[int, SlotEntry]] = {}
    for day, record in raw.items():
        try:
            parse_iso_date(str(day))
        except ValueError:
            logger.warning("Dropping attendance record with malformed date %r", day)
            continue

        decoded: dict[int, SlotEntry] = {}
        for key, entry in (record or {}).items():
            idx = _slot_key(key)
            if idx is None:
                logger.warning("Dropping slot %r on %s", key, day)
                continue
            if not isinstance(entry, dict):
                logger.warning("Dropping non-object slot %d on %s", idx, day)
                continue
            decoded[idx] = SlotEntry(
                subject=str(entry.get("subject") or ""),
                status=str(entry.get("status") or ""),
            )
        out[str(day)] = decoded
    return out
