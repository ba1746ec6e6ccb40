"""Unit tests for calculator construction and month range checks"""

import pytest
from datetime import date
from loan_calculator.domain.amortization import (
    AnnuityCalculator,
    DifferentiatedCalculator,
    get_calculator,
)
from loan_calculator.domain.exceptions import InvalidParameterError, MonthOutOfRangeError
from loan_calculator.domain.models import RepaymentKind


def test_get_calculator_by_kind():
    start = date(2023, 1, 1)

    assert isinstance(get_calculator("annuity", 12, start, 1000, 5.0), AnnuityCalculator)
    assert isinstance(get_calculator(RepaymentKind.DIFFERENTIATED, 12, start, 1000, 5.0), DifferentiatedCalculator)


def test_get_calculator_unknown_kind():
    with pytest.raises(InvalidParameterError):
        get_calculator("balloon", 12, date(2023, 1, 1), 1000, 5.0)


def test_get_calculator_validates_parameters():
    with pytest.raises(InvalidParameterError):
        get_calculator("annuity", 0, date(2023, 1, 1), 1000, 5.0)


def test_parameter_properties(annuity: AnnuityCalculator):
    assert annuity.term_months == 12
    assert annuity.start_date == date(2023, 1, 1)
    assert annuity.principal == 120000
    assert annuity.annual_rate == 12.0
    assert annuity.parameters.principal == 120000


def test_due_date(differentiated: DifferentiatedCalculator):
    assert differentiated.due_date(1) == date(2023, 1, 1)
    assert differentiated.due_date(12) == date(2023, 12, 1)


@pytest.mark.parametrize("month", [0, 13, -1])
def test_payment_months_out_of_range(annuity: AnnuityCalculator, month: int):
    with pytest.raises(MonthOutOfRangeError):
        annuity.monthly_payment(month)
    with pytest.raises(MonthOutOfRangeError):
        annuity.interest_debt_payment(month)
    with pytest.raises(MonthOutOfRangeError):
        annuity.monthly_rate(month)


def test_balance_month_range(differentiated: DifferentiatedCalculator):
    """Balance accepts month 0, payments do not"""
    assert differentiated.monthly_loan_amount(0) == 120000.0

    with pytest.raises(MonthOutOfRangeError) as exc_info:
        differentiated.monthly_loan_amount(13)

    assert exc_info.value.month == 13
    assert exc_info.value.first_month == 0
    assert exc_info.value.last_month == 12


def test_schedule_constant_quantity_still_checks_month(differentiated: DifferentiatedCalculator):
    with pytest.raises(MonthOutOfRangeError):
        differentiated.principal_debt_payment(13)


def test_month_required_for_monthly_quantities(annuity: AnnuityCalculator):
    with pytest.raises(TypeError):
        annuity.interest_debt_payment()


def test_month_must_be_integer(annuity: AnnuityCalculator):
    with pytest.raises(TypeError):
        annuity.monthly_rate(1.5)
