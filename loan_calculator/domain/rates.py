"""Interest rate derivation shared by every repayment policy"""

from datetime import date

from loan_calculator.domain.models import LoanParameters
from loan_calculator.utils.date_utils import add_months, days_in_month, days_in_year


class InterestRates:
    """
    Converts the annual rate of a loan into per-month accrual rates.

    Rates are in percent, like the annual rate they come from. Month 1 is the
    month of the start date.
    """

    def __init__(self, parameters: LoanParameters):
        self.parameters = parameters

    def payment_date(self, month: int) -> date:
        """Date falling in the given payment month"""
        return add_months(self.parameters.start_date, month - 1)

    def monthly_rate(self, month: int) -> float:
        """
        Rate accrued during one payment month, weighted by its calendar days.

        annual_rate * days_in_month / days_in_year, so a 31-day month accrues
        more than a 30-day one and February less than both.
        """
        day = self.payment_date(month)
        return self.parameters.annual_rate * days_in_month(day.year, day.month) / days_in_year(day.year)

    def monthly_rate_average(self) -> float:
        """Flat twelfth of the annual rate"""
        return self.parameters.annual_rate / 12

    @staticmethod
    def interest_on(balance: float, rate: float) -> float:
        """Interest due on a balance at a percent rate"""
        return balance * rate / 100
