"""Annuity and differentiated loan calculators - core repayment math"""

import logging
from abc import ABC, abstractmethod
from dataclasses import replace
from datetime import date
from typing import Dict, Type

from loan_calculator.domain.cache import QuantityCache, memoized
from loan_calculator.domain.exceptions import InvalidParameterError, MonthOutOfRangeError
from loan_calculator.domain.models import LoanParameters, Quantity, RepaymentKind
from loan_calculator.domain.rates import InterestRates

logger = logging.getLogger(__name__)


class LoanCalculator(ABC):
    """
    Monthly repayment quantities of one loan.

    Every derived value is memoized per instance. The four loan parameters
    can be reassigned on a live calculator; doing so drops every cached
    value. Prefer with_parameters() to derive a new calculator instead.

    Month numbering: payments, rates and interest use 1..term_months,
    balances use 0..term_months where 0 is the principal before any payment.
    Instances are not thread-safe.
    """

    kind: RepaymentKind

    def __init__(self, parameters: LoanParameters):
        self.cache = QuantityCache()
        self._set_parameters(parameters)

    @classmethod
    def from_values(
        cls,
        term_months: int,
        start_date: date,
        principal: int,
        annual_rate: float,
    ) -> "LoanCalculator":
        return cls(LoanParameters(term_months, start_date, principal, annual_rate))

    # Parameters

    @property
    def parameters(self) -> LoanParameters:
        return self._parameters

    @property
    def term_months(self) -> int:
        return self._parameters.term_months

    @term_months.setter
    def term_months(self, value: int) -> None:
        self._update(term_months=value)

    @property
    def start_date(self) -> date:
        return self._parameters.start_date

    @start_date.setter
    def start_date(self, value: date) -> None:
        self._update(start_date=value)

    @property
    def principal(self) -> int:
        return self._parameters.principal

    @principal.setter
    def principal(self, value: int) -> None:
        self._update(principal=value)

    @property
    def annual_rate(self) -> float:
        return self._parameters.annual_rate

    @annual_rate.setter
    def annual_rate(self, value: float) -> None:
        self._update(annual_rate=value)

    def with_parameters(self, **changes) -> "LoanCalculator":
        """New calculator of the same kind with some parameters replaced"""
        return type(self)(replace(self._parameters, **changes))

    def _update(self, **changes) -> None:
        # replace() re-runs LoanParameters validation
        self._set_parameters(replace(self._parameters, **changes))

    def _set_parameters(self, parameters: LoanParameters) -> None:
        self._parameters = parameters
        self._rates = InterestRates(parameters)
        if len(self.cache):
            logger.debug(
                "Loan parameters changed, dropping cached values",
                extra={"kind": self.kind.value, "cached_values": len(self.cache)},
            )
        self.cache.clear()

    def check_month(self, month: int, first_month: int = 1) -> None:
        """Raise MonthOutOfRangeError unless first_month <= month <= term_months"""
        if isinstance(month, bool) or not isinstance(month, int):
            raise TypeError(f"month must be an integer, got {month!r}")
        if month < first_month or month > self.term_months:
            raise MonthOutOfRangeError(month, first_month, self.term_months)

    # Shared quantities

    def due_date(self, month: int) -> date:
        """Date in the calendar month of the given payment"""
        self.check_month(month)
        return self._rates.payment_date(month)

    @memoized(Quantity.MONTHLY_RATE)
    def monthly_rate(self, month: int) -> float:
        """Interest rate for one month in percent, weighted by days in that month"""
        return self._rates.monthly_rate(month)

    @memoized(Quantity.MONTHLY_RATE_AVERAGE, schedule_constant=True)
    def monthly_rate_average(self) -> float:
        """Annual rate divided evenly over twelve months"""
        return self._rates.monthly_rate_average()

    @memoized(Quantity.INTEREST_DEBT_PAYMENT)
    def interest_debt_payment(self, month: int) -> float:
        """Interest accrued in a month on the balance left after the previous one"""
        return self._rates.interest_on(self.monthly_loan_amount(month - 1), self.monthly_rate(month))

    # Policy-specific quantities

    @abstractmethod
    def monthly_loan_amount(self, month: int) -> float:
        """Unpaid balance after the given month's payment"""

    @abstractmethod
    def monthly_payment(self, month: int) -> float:
        """Total amount due in the given month"""

    @abstractmethod
    def principal_debt_payment(self, month: int) -> float:
        """Part of the month's payment that reduces the balance"""

    def __repr__(self) -> str:
        p = self._parameters
        return (
            f"{type(self).__name__}(term_months={p.term_months}, start_date={p.start_date}, "
            f"principal={p.principal}, annual_rate={p.annual_rate})"
        )


class AnnuityCalculator(LoanCalculator):
    """
    Equal total payments.

    The payment is solved once from the flat monthly_rate_average, while
    interest accrues on calendar days, so the principal share drifts from
    month to month and the final balance lands close to, not exactly on, zero.
    """

    kind = RepaymentKind.ANNUITY

    @memoized(Quantity.MONTHLY_PAYMENT, schedule_constant=True)
    def monthly_payment(self) -> float:
        """
        Fixed payment: principal * r / (1 - (1+r)^-n).

        Same coefficient as r(1+r)^n / ((1+r)^n - 1), but the discount
        factor underflows toward 0 for large r * n instead of overflowing,
        leaving a coefficient of r.

        With a zero rate the coefficient degenerates to 0/0; its limit is
        1/n, so the loan is repaid in equal principal-only installments.
        """
        rate = self.monthly_rate_average() / 100
        discount = (1 + rate) ** -self.term_months
        if rate == 0 or discount == 1:
            return self.principal / self.term_months

        coefficient = rate / (1 - discount)
        return coefficient * self.principal

    @memoized(Quantity.PRINCIPAL_DEBT_PAYMENT)
    def principal_debt_payment(self, month: int) -> float:
        return self.monthly_payment() - self.interest_debt_payment(month)

    @memoized(Quantity.MONTHLY_LOAN_AMOUNT, first_month=0)
    def monthly_loan_amount(self, month: int) -> float:
        if month == 0:
            return float(self.principal)

        self._fill_balances(month - 1)
        return self.monthly_loan_amount(month - 1) - self.principal_debt_payment(month)

    def _fill_balances(self, month: int) -> None:
        """Compute uncached balances up to month in ascending order"""
        # Each balance needs the one before it; going forward keeps the call
        # stack flat instead of one frame chain per month.
        start = month
        while start > 0 and not self.cache.has(Quantity.MONTHLY_LOAN_AMOUNT, start):
            start -= 1
        for m in range(start + 1, month + 1):
            self.monthly_loan_amount(m)


class DifferentiatedCalculator(LoanCalculator):
    """Equal principal shares; the total payment shrinks with the balance"""

    kind = RepaymentKind.DIFFERENTIATED

    @memoized(Quantity.PRINCIPAL_DEBT_PAYMENT, schedule_constant=True)
    def principal_debt_payment(self) -> float:
        return self.principal / self.term_months

    @memoized(Quantity.MONTHLY_LOAN_AMOUNT, first_month=0)
    def monthly_loan_amount(self, month: int) -> float:
        if month == 0:
            return float(self.principal)
        return self.principal - self.principal_debt_payment() * month

    @memoized(Quantity.MONTHLY_PAYMENT)
    def monthly_payment(self, month: int) -> float:
        return self.interest_debt_payment(month) + self.principal_debt_payment()


CALCULATORS: Dict[RepaymentKind, Type[LoanCalculator]] = {
    RepaymentKind.ANNUITY: AnnuityCalculator,
    RepaymentKind.DIFFERENTIATED: DifferentiatedCalculator,
}


def get_calculator(
    kind: RepaymentKind | str,
    term_months: int,
    start_date: date,
    principal: int,
    annual_rate: float,
) -> LoanCalculator:
    """
    Main entry point: build a calculator for the given repayment policy.

    Raises InvalidParameterError for an unknown kind or invalid parameters.
    """
    try:
        calculator_cls = CALCULATORS[RepaymentKind(kind)]
    except ValueError:
        raise InvalidParameterError(f"Unknown repayment kind: {kind!r}")

    return calculator_cls.from_values(term_months, start_date, principal, annual_rate)
