"""Calendar arithmetic used by interest accrual"""

import calendar
from datetime import date
from dateutil.relativedelta import relativedelta


def add_months(from_date: date, months: int) -> date:
    """Advance a date by whole calendar months, clamping the day to the target month"""
    return from_date + relativedelta(months=months)


def is_leap_year(year: int) -> bool:
    """Gregorian leap year check"""
    return calendar.isleap(year)


def days_in_month(year: int, month: int) -> int:
    """Number of days in the given month of the Gregorian calendar"""
    return calendar.monthrange(year, month)[1]


def days_in_year(year: int) -> int:
    """365, or 366 for leap years"""
    return 365 + int(is_leap_year(year))
