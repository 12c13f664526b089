from datetime import date

from src.attendance_guard.attendance_guard.attendance.service import CalendarService
from src.attendance_guard.attendance_guard.export.service import ExportService
from src.attendance_guard.attendance_guard.semester.service import SemesterService


def test_csv_has_one_row_per_recorded_day(snapshots):
    SemesterService(snapshots).add_subject(1, "Math")
    calendar = CalendarService(snapshots)
    calendar.save_day(1, date(2024, 1, 3), {1: {"subject": "Math", "status": ""}})
    calendar.save_day(1, date(2024, 1, 1), {0: {"subject": "Math", "status": "Present"}, 2: {"subject": "Free"}})

    lines = ExportService(snapshots).attendance_csv(1).splitlines()

    assert lines == [
        "Date,Day,8:00-10:00,10:00-12:00,1:00-3:00,3:00-5:00",
        "2024-01-01,Monday,Math (Present),-,Free (-),-",
        "2024-01-03,Wednesday,-,Math (-),-,-",
    ]


def test_csv_for_unknown_user_is_header_only(snapshots):
    assert ExportService(snapshots).attendance_csv(99) == "Date,Day,8:00-10:00,10:00-12:00,1:00-3:00,3:00-5:00\n"


def test_export_filename():
    assert ExportService.filename(date(2024, 2, 1)) == "attendance_guard_export_2024-02-01.csv"
