"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, Field
from datetime import date
from typing import List, Optional

from loan_calculator.domain.models import RepaymentKind


class ScheduleRequest(BaseModel):
    """Request body for POST /v1/schedule"""

    kind: Optional[RepaymentKind] = Field(None, description="Repayment policy, defaults to the configured one")
    term_months: int = Field(..., gt=0, description="Number of monthly payments")
    start_date: date = Field(..., description="Any day in the month of the first payment")
    principal: int = Field(..., gt=0, description="Amount borrowed")
    annual_rate: float = Field(..., ge=0, description="Annual interest rate in percent")


class ScheduleEntrySchema(BaseModel):
    """Single month of a repayment schedule"""

    month: int
    due_date: date
    monthly_rate: float
    monthly_payment: float
    principal_debt_payment: float
    interest_debt_payment: float
    monthly_loan_amount: float


class ScheduleSummarySchema(BaseModel):
    payments_count: int
    total_paid: float
    total_principal: float
    total_interest: float
    final_balance: float


class ScheduleResponse(BaseModel):
    """Response for POST /v1/schedule"""

    kind: RepaymentKind
    term_months: int
    start_date: date
    principal: int
    annual_rate: float
    monthly_rate_average: float
    entries: List[ScheduleEntrySchema]
    summary: ScheduleSummarySchema


class MonthResponse(BaseModel):
    """Response for POST /v1/schedule/{month}"""

    kind: RepaymentKind
    month: int
    due_date: date
    monthly_rate: float
    monthly_payment: float
    principal_debt_payment: float
    interest_debt_payment: float
    monthly_loan_amount: float
