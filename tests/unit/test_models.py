"""Unit tests for loan parameter validation"""

import dataclasses
import pytest
from datetime import date
from loan_calculator.domain.models import LoanParameters
from loan_calculator.domain.exceptions import InvalidParameterError


def test_loan_parameters_normalizes_rate_to_float():
    params = LoanParameters(term_months=12, start_date=date(2023, 1, 1), principal=1000, annual_rate=12)

    assert params.annual_rate == 12.0
    assert isinstance(params.annual_rate, float)


def test_loan_parameters_accepts_zero_rate():
    params = LoanParameters(term_months=12, start_date=date(2023, 1, 1), principal=1000, annual_rate=0)
    assert params.annual_rate == 0.0


@pytest.mark.parametrize(
    "changes",
    [
        {"term_months": 0},
        {"term_months": -3},
        {"term_months": 1.5},
        {"term_months": True},
        {"principal": 0},
        {"principal": -100},
        {"principal": 100.5},
        {"annual_rate": -0.1},
        {"annual_rate": "12"},
        {"annual_rate": float("nan")},
        {"annual_rate": float("inf")},
        {"start_date": "2023-01-01"},
    ],
)
def test_loan_parameters_rejects_invalid_values(changes):
    """Invalid parameters fail at construction, not at query time"""
    values = {"term_months": 12, "start_date": date(2023, 1, 1), "principal": 1000, "annual_rate": 12.0}
    values.update(changes)

    with pytest.raises(InvalidParameterError):
        LoanParameters(**values)


def test_loan_parameters_are_immutable(loan_parameters: LoanParameters):
    with pytest.raises(dataclasses.FrozenInstanceError):
        loan_parameters.principal = 1
