"""Domain models - pure Python dataclasses representing loan entities"""

import math
from dataclasses import dataclass
from datetime import date
from enum import Enum

from loan_calculator.domain.exceptions import InvalidParameterError


class RepaymentKind(str, Enum):
    """Amortization policy of a loan"""

    ANNUITY = "annuity"  # fixed total payment
    DIFFERENTIATED = "differentiated"  # fixed principal share


class Quantity(Enum):
    """Derived values a calculator memoizes"""

    MONTHLY_RATE = "monthly_rate"
    MONTHLY_RATE_AVERAGE = "monthly_rate_average"
    MONTHLY_LOAN_AMOUNT = "monthly_loan_amount"
    MONTHLY_PAYMENT = "monthly_payment"
    PRINCIPAL_DEBT_PAYMENT = "principal_debt_payment"
    INTEREST_DEBT_PAYMENT = "interest_debt_payment"


@dataclass(frozen=True)
class LoanParameters:
    """
    Inputs of a repayment schedule.

    - term_months: number of monthly payments
    - start_date: date falling in the month of the first payment
    - principal: amount borrowed
    - annual_rate: yearly interest in percent (12.0 means 12%)
    """

    term_months: int
    start_date: date
    principal: int
    annual_rate: float

    def __post_init__(self) -> None:
        if not _is_int(self.term_months) or self.term_months <= 0:
            raise InvalidParameterError(f"term_months must be a positive integer, got {self.term_months!r}")
        if not isinstance(self.start_date, date):
            raise InvalidParameterError(f"start_date must be a date, got {self.start_date!r}")
        if not _is_int(self.principal) or self.principal <= 0:
            raise InvalidParameterError(f"principal must be a positive integer, got {self.principal!r}")
        if isinstance(self.annual_rate, bool) or not isinstance(self.annual_rate, (int, float)):
            raise InvalidParameterError(f"annual_rate must be a number, got {self.annual_rate!r}")
        if not math.isfinite(self.annual_rate):
            raise InvalidParameterError(f"annual_rate must be finite, got {self.annual_rate!r}")
        if self.annual_rate < 0:
            raise InvalidParameterError(f"annual_rate must not be negative, got {self.annual_rate!r}")

        # Frozen dataclass: bypass __setattr__ to normalize the rate
        object.__setattr__(self, "annual_rate", float(self.annual_rate))


@dataclass
class ScheduleEntry:
    """Single month of a repayment schedule"""

    month: int
    due_date: date
    monthly_rate: float  # percent, weighted by days in the month
    monthly_payment: float
    principal_debt_payment: float
    interest_debt_payment: float
    monthly_loan_amount: float  # balance left after this payment


@dataclass
class ScheduleSummary:
    """Totals over a repayment schedule"""

    payments_count: int
    total_paid: float
    total_principal: float
    total_interest: float
    final_balance: float


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)
