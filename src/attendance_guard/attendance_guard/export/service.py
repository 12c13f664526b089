from __future__ import annotations

import csv
import io
from datetime import date

from ..common.datetime_utils import parse_iso_date, to_iso, weekday_name
from ..core.constants import EXPORT_FILENAME_PREFIX, SLOT_COUNT, SLOT_EXPORT_LABELS
from ..snapshots.repository import SnapshotRepository


class ExportService:
    """CSV export of the raw attendance record (one row per recorded day)."""

    def __init__(self, snapshots: SnapshotRepository):
        self._snapshots = snapshots

    def attendance_csv(self, user_id: int) -> str:
        out = io.StringIO()
        writer = csv.writer(out, lineterminator="\n")
        writer.writerow(["Date", "Day", *SLOT_EXPORT_LABELS])

        snapshot = self._snapshots.get(user_id)
        attendance = snapshot.attendance if snapshot else {}

        for key in sorted(attendance):
            record = attendance[key]
            row = [key, weekday_name(parse_iso_date(key))]
            for idx in range(SLOT_COUNT):
                entry = record.get(idx)
                if entry and entry.subject:
                    row.append(f"{entry.subject} ({entry.status or '-'})")
                else:
                    row.append("-")
            writer.writerow(row)

        return out.getvalue()

    @staticmethod
    def filename(today: date) -> str:
        return f"{EXPORT_FILENAME_PREFIX}{to_iso(today)}.csv"
