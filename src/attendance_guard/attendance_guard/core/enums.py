from __future__ import annotations

from enum import Enum


class SlotStatus(str, Enum):
    """Status vocabulary of one slot entry in a day record."""

    UNMARKED = ""
    PRESENT = "Present"
    ABSENT = "Absent"
    FREE = "Free"


class Standing(str, Enum):
    """Subject standing against the attendance threshold."""

    SAFE = "SAFE"
    AT_RISK = "AT_RISK"
