"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidParameterError(DomainException):
    """Loan parameters are missing, of the wrong type, or out of range"""

    pass


class MonthOutOfRangeError(DomainException):
    """Requested month lies outside the repayment schedule"""

    def __init__(self, month: int, first_month: int, last_month: int):
        self.month = month
        self.first_month = first_month
        self.last_month = last_month
        super().__init__(
            f"Month {month} is outside the schedule range {first_month}..{last_month}"
        )
