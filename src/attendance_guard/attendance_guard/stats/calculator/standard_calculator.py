from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal
from fractions import Fraction

from ...core.constants import ATTENDANCE_THRESHOLD
from ..model import Percentage
from .base import ThresholdCalculator

_TWO_PLACES = Decimal("0.01")


class StandardThresholdCalculator(ThresholdCalculator):
    """Standard rule: a subject must stay at or above 75% of conducted slots.

    safe leaves:        largest x with present / (conducted + x) >= t
    classes to attend:  smallest x with (present + x) / (conducted + x) >= t

    Both are solved in exact rational arithmetic and clamped at 0.
    """

    def __init__(self, threshold: Fraction = ATTENDANCE_THRESHOLD):
        threshold = Fraction(threshold)
        if not 0 < threshold < 1:
            raise ValueError(f"Threshold must be strictly between 0 and 1, got {threshold}")
        self._threshold = threshold

    def percentage(self, *, present: int, conducted: int) -> Percentage:
        if conducted <= 0:
            return 0
        return (Decimal(100 * present) / Decimal(conducted)).quantize(_TWO_PLACES, rounding=ROUND_HALF_UP)

    def safe_leaves(self, *, present: int, conducted: int) -> int:
        x = math.floor(Fraction(present) / self._threshold - conducted)
        return max(x, 0)

    def classes_to_attend(self, *, present: int, conducted: int) -> int:
        t = self._threshold
        x = math.ceil((t * conducted - present) / (1 - t))
        return max(x, 0)
