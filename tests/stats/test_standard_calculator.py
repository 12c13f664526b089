from decimal import Decimal
from fractions import Fraction

import pytest

from src.attendance_guard.attendance_guard.stats.calculator.standard_calculator import StandardThresholdCalculator


def test_percentage_is_zero_literal_when_nothing_conducted():
    calc = StandardThresholdCalculator()
    pct = calc.percentage(present=0, conducted=0)

    assert pct == 0
    assert not isinstance(pct, Decimal)


def test_percentage_rounds_half_up_to_two_places():
    calc = StandardThresholdCalculator()

    assert calc.percentage(present=2, conducted=3) == Decimal("66.67")
    assert calc.percentage(present=1, conducted=800) == Decimal("0.13")
    assert str(calc.percentage(present=1, conducted=1)) == "100.00"


def test_exactly_at_threshold_has_no_slack_either_way():
    calc = StandardThresholdCalculator()

    assert calc.safe_leaves(present=30, conducted=40) == 0
    assert calc.classes_to_attend(present=30, conducted=40) == 0


def test_safe_leaves_above_threshold():
    calc = StandardThresholdCalculator()

    # 10/13 >= 0.75 but 10/14 < 0.75
    assert calc.safe_leaves(present=10, conducted=10) == 3
    assert calc.classes_to_attend(present=10, conducted=10) == 0


def test_classes_to_attend_below_threshold():
    calc = StandardThresholdCalculator()

    # (5 + 10) / (10 + 10) == 0.75
    assert calc.classes_to_attend(present=5, conducted=10) == 10
    assert calc.safe_leaves(present=5, conducted=10) == 0


@pytest.mark.parametrize("conducted", range(0, 25))
def test_metrics_are_floored_at_zero_and_mutually_exclusive(conducted):
    calc = StandardThresholdCalculator()
    for present in range(0, conducted + 1):
        safe = calc.safe_leaves(present=present, conducted=conducted)
        need = calc.classes_to_attend(present=present, conducted=conducted)

        assert safe >= 0 and need >= 0
        if conducted and Fraction(present, conducted) >= Fraction(3, 4):
            assert need == 0
        elif conducted:
            assert safe == 0
            assert Fraction(present + need, conducted + need) >= Fraction(3, 4)
            assert Fraction(present + need - 1, conducted + need - 1) < Fraction(3, 4)


def test_custom_threshold():
    calc = StandardThresholdCalculator(Fraction(1, 2))

    assert calc.classes_to_attend(present=1, conducted=4) == 2
    assert calc.safe_leaves(present=3, conducted=4) == 2


@pytest.mark.parametrize("threshold", [Fraction(1), Fraction(0), Fraction(3, 2), Fraction(-1, 4)])
def test_threshold_outside_open_unit_interval_is_rejected(threshold):
    with pytest.raises(ValueError):
        StandardThresholdCalculator(threshold)
