from datetime import date

import pytest

from src.attendance_guard.attendance_guard.attendance.model import SlotEntry
from src.attendance_guard.attendance_guard.core.exceptions import ValidationError
from src.attendance_guard.attendance_guard.snapshots.model import UserSnapshot


def _doc():
    return {
        "settings": {
            "courseName": "B.Tech CSE",
            "semesterStart": "2024-01-01",
            "lastWorkingDate": "2024-04-30",
            "subjects": ["Math", "Physics"],
            "timetable": {"Monday": {"0": "Math", "3": "Free"}},
        },
        "holidays": ["2024-01-26", "2024-01-15", "2024-01-26"],
        "attendance": {
            "2024-01-01": {"0": {"subject": "Math", "status": "Present"}, "1": {"subject": "Physics", "status": ""}},
        },
    }


def test_from_document_decodes_dates_and_slot_indices():
    snap = UserSnapshot.from_document(_doc())

    assert snap.settings.semester_start == date(2024, 1, 1)
    assert snap.settings.last_working_date == date(2024, 4, 30)
    assert snap.settings.subjects == ("Math", "Physics")
    assert snap.settings.timetable == {"Monday": {0: "Math", 3: "Free"}}
    assert snap.holidays == ("2024-01-15", "2024-01-26")
    assert snap.attendance["2024-01-01"] == {0: SlotEntry("Math", "Present"), 1: SlotEntry("Physics", "")}


def test_to_document_uses_string_slot_keys():
    doc = UserSnapshot.from_document(_doc()).to_document()

    assert doc["settings"]["semesterStart"] == "2024-01-01"
    assert doc["settings"]["timetable"] == {"Monday": {"0": "Math", "3": "Free"}}
    assert doc["attendance"]["2024-01-01"]["0"] == {"subject": "Math", "status": "Present"}
    assert doc["holidays"] == ["2024-01-15", "2024-01-26"]


def test_empty_document_is_empty_snapshot():
    snap = UserSnapshot.from_document(None)

    assert snap == UserSnapshot.empty()
    assert snap.to_document()["settings"] == {
        "courseName": "",
        "semesterStart": None,
        "lastWorkingDate": None,
        "subjects": [],
        "timetable": {},
    }


def test_malformed_semester_date_is_rejected():
    doc = _doc()
    doc["settings"]["semesterStart"] = "01/01/2024"

    with pytest.raises(ValidationError):
        UserSnapshot.from_document(doc)


def test_bad_day_keys_and_slot_keys_are_dropped():
    doc = _doc()
    doc["attendance"]["not-a-date"] = {"0": {"subject": "Math", "status": "Present"}}
    doc["attendance"]["2024-01-02"] = {
        "7": {"subject": "Math", "status": "Present"},
        "x": {"subject": "Math", "status": "Present"},
        "2": "Math",
        "3": {"subject": "Math", "status": "Absent"},
    }

    snap = UserSnapshot.from_document(doc)

    assert "not-a-date" not in snap.attendance
    assert snap.attendance["2024-01-02"] == {3: SlotEntry("Math", "Absent")}
