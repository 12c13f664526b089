from __future__ import annotations

from ..core.constants import SLOT_COUNT
from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} must not be empty")
    return value.strip()


def require_slot_index(value, field_name: str = "Slot") -> int:
    try:
        index = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be an integer 0..{SLOT_COUNT - 1}") from None
    if not 0 <= index < SLOT_COUNT:
        raise ValidationError(f"{field_name} must be an integer 0..{SLOT_COUNT - 1}")
    return index
