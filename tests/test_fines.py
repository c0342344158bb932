from datetime import date, datetime
from decimal import Decimal

import pytest

from modaflex.utils.fines import compute_fine, days_late, effective_status, is_overdue


def test_returned_on_expected_date_is_not_late():
    result = compute_fine(date(2024, 1, 10), date(2024, 1, 10))
    assert result.days_late == 0
    assert result.amount == Decimal("0.00")
    assert not result.is_late


def test_three_days_late():
    result = compute_fine(date(2024, 1, 10), date(2024, 1, 13))
    assert result.days_late == 3
    assert result.amount == Decimal("60.00")


@pytest.mark.parametrize("actual", [date(2024, 1, 1), date(2024, 1, 9), date(2024, 1, 10)])
def test_early_or_on_time_is_zero(actual):
    result = compute_fine(date(2024, 1, 10), actual)
    assert (result.days_late, result.amount) == (0, Decimal("0.00"))


@pytest.mark.parametrize("n", [1, 5, 31, 400])
def test_n_days_late_costs_n_times_rate(n):
    expected = date(2024, 1, 10)
    actual = date.fromordinal(expected.toordinal() + n)
    result = compute_fine(expected, actual)
    assert result.days_late == n
    assert result.amount == Decimal(20 * n).quantize(Decimal("0.01"))


def test_custom_daily_rate():
    result = compute_fine(date(2024, 1, 10), date(2024, 1, 12), daily_rate=Decimal("7.50"))
    assert result.amount == Decimal("15.00")


def test_partial_day_rounds_up_when_times_are_given():
    expected = datetime(2024, 1, 10, 0, 0)
    assert days_late(expected, datetime(2024, 1, 10, 6, 0)) == 1
    assert days_late(expected, datetime(2024, 1, 11, 0, 0)) == 1
    assert days_late(expected, datetime(2024, 1, 11, 0, 1)) == 2


def test_missing_dates_are_not_late():
    assert days_late(None, date(2024, 1, 10)) == 0
    assert days_late(date(2024, 1, 10), None) == 0


def test_overdue_only_for_open_rentals_strictly_after_expected():
    expected = date(2024, 1, 10)
    assert not is_overdue("active", expected, date(2024, 1, 10))
    assert is_overdue("active", expected, date(2024, 1, 11))
    assert not is_overdue("returned", expected, date(2024, 2, 1))
    assert not is_overdue("cancelled", expected, date(2024, 2, 1))


def test_effective_status():
    expected = date(2024, 1, 10)
    assert effective_status("active", expected, date(2024, 1, 9)) == "active"
    assert effective_status("active", expected, date(2024, 1, 11)) == "overdue"
    assert effective_status("returned", expected, date(2024, 1, 11)) == "returned"
