"""Unit tests for full schedule generation"""

import pytest
from datetime import date
from loan_calculator.domain.amortization import AnnuityCalculator, DifferentiatedCalculator
from loan_calculator.domain.schedule import build_schedule, summarize_schedule


def test_build_schedule_differentiated(differentiated: DifferentiatedCalculator):
    entries = build_schedule(differentiated)

    assert len(entries) == 12
    assert [e.month for e in entries] == list(range(1, 13))
    assert all(e.principal_debt_payment == 10000.0 for e in entries)
    assert entries[0].monthly_loan_amount == 110000.0
    assert entries[-1].monthly_loan_amount == pytest.approx(0.0, abs=1e-6)


def test_build_schedule_due_dates(annuity: AnnuityCalculator):
    entries = build_schedule(annuity)

    assert entries[0].due_date == date(2023, 1, 1)
    assert entries[1].due_date == date(2023, 2, 1)
    assert entries[-1].due_date == date(2023, 12, 1)


def test_build_schedule_matches_calculator(annuity: AnnuityCalculator):
    entries = build_schedule(annuity)

    for entry in entries:
        assert entry.monthly_payment == annuity.monthly_payment(entry.month)
        assert entry.interest_debt_payment == annuity.interest_debt_payment(entry.month)
        assert entry.monthly_loan_amount == annuity.monthly_loan_amount(entry.month)
        assert entry.monthly_rate == annuity.monthly_rate(entry.month)


def test_summarize_schedule(differentiated: DifferentiatedCalculator):
    entries = build_schedule(differentiated)
    summary = summarize_schedule(entries)

    assert summary.payments_count == 12
    assert summary.total_principal == pytest.approx(120000.0)
    assert summary.total_interest == pytest.approx(sum(e.interest_debt_payment for e in entries))
    assert summary.total_paid == pytest.approx(summary.total_principal + summary.total_interest)
    assert summary.final_balance == pytest.approx(0.0, abs=1e-6)


def test_annuity_costs_more_interest_than_differentiated(
    annuity: AnnuityCalculator, differentiated: DifferentiatedCalculator
):
    """Differentiated repays principal faster, so less interest accrues"""
    annuity_summary = summarize_schedule(build_schedule(annuity))
    differentiated_summary = summarize_schedule(build_schedule(differentiated))

    assert annuity_summary.total_interest > differentiated_summary.total_interest


def test_summarize_empty_schedule():
    summary = summarize_schedule([])

    assert summary.payments_count == 0
    assert summary.total_paid == 0
    assert summary.final_balance == 0.0
