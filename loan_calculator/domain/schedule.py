"""Full repayment schedule generation"""

from typing import List

from loan_calculator.domain.amortization import LoanCalculator
from loan_calculator.domain.models import ScheduleEntry, ScheduleSummary


def build_schedule(calculator: LoanCalculator) -> List[ScheduleEntry]:
    """
    Compute every month of a loan in one forward pass.

    Months are requested in ascending order, so each balance is derived from
    the already cached one before it. Values are not rounded.

    Returns:
        One ScheduleEntry per payment, months 1..term_months

    Example:
        120000 over 12 months, differentiated:
        month 1 → principal 10000, balance 110000
        month 12 → principal 10000, balance 0
    """
    entries = []
    for month in range(1, calculator.term_months + 1):
        entries.append(
            ScheduleEntry(
                month=month,
                due_date=calculator.due_date(month),
                monthly_rate=calculator.monthly_rate(month),
                monthly_payment=calculator.monthly_payment(month),
                principal_debt_payment=calculator.principal_debt_payment(month),
                interest_debt_payment=calculator.interest_debt_payment(month),
                monthly_loan_amount=calculator.monthly_loan_amount(month),
            )
        )

    return entries


def summarize_schedule(entries: List[ScheduleEntry]) -> ScheduleSummary:
    """Totals of a schedule; an empty schedule sums to zero"""
    return ScheduleSummary(
        payments_count=len(entries),
        total_paid=sum(e.monthly_payment for e in entries),
        total_principal=sum(e.principal_debt_payment for e in entries),
        total_interest=sum(e.interest_debt_payment for e in entries),
        final_balance=entries[-1].monthly_loan_amount if entries else 0.0,
    )
