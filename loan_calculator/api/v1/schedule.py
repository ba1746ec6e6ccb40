"""POST /v1/schedule - Repayment schedule endpoints"""

import time
from dataclasses import asdict
from fastapi import APIRouter, Depends, Request

from loan_calculator.api.v1.schemas import (
    MonthResponse,
    ScheduleEntrySchema,
    ScheduleRequest,
    ScheduleResponse,
    ScheduleSummarySchema,
)
from loan_calculator.api.dependencies import get_request_id, get_settings
from loan_calculator.config import Settings
from loan_calculator.domain.amortization import LoanCalculator, get_calculator
from loan_calculator.domain.schedule import build_schedule, summarize_schedule
from loan_calculator.domain.exceptions import InvalidParameterError
from loan_calculator.infrastructure.observability.metrics import record_schedule
from loan_calculator.infrastructure.observability.logging import log_schedule

router = APIRouter()


def _calculator_for(request_body: ScheduleRequest, config: Settings) -> LoanCalculator:
    """Build the calculator a request asks for, applying configured limits"""
    if request_body.term_months > config.max_term_months:
        raise InvalidParameterError(
            f"term_months must not exceed {config.max_term_months}, got {request_body.term_months}"
        )
    if request_body.annual_rate > config.max_annual_rate:
        raise InvalidParameterError(
            f"annual_rate must not exceed {config.max_annual_rate}, got {request_body.annual_rate}"
        )

    kind = request_body.kind or config.default_repayment_kind
    return get_calculator(
        kind,
        term_months=request_body.term_months,
        start_date=request_body.start_date,
        principal=request_body.principal,
        annual_rate=request_body.annual_rate,
    )


@router.post("/schedule", response_model=ScheduleResponse)
def create_schedule(
    request_body: ScheduleRequest,
    request: Request,
    config: Settings = Depends(get_settings),
):
    """
    Compute a full repayment schedule.

    Flow:
    1. Build annuity or differentiated calculator
    2. Compute every month in one forward pass
    3. Total the schedule
    4. Record metrics and logs

    Domain errors surface as 422 through the app's exception handlers.
    """
    start_time = time.time()

    calculator = _calculator_for(request_body, config)
    entries = build_schedule(calculator)
    summary = summarize_schedule(entries)

    duration_ms = (time.time() - start_time) * 1000
    record_schedule(calculator.kind.value, calculator.term_months)
    log_schedule(
        get_request_id(request),
        calculator.kind.value,
        calculator.term_months,
        calculator.principal,
        duration_ms,
    )

    return ScheduleResponse(
        kind=calculator.kind,
        term_months=calculator.term_months,
        start_date=calculator.start_date,
        principal=calculator.principal,
        annual_rate=calculator.annual_rate,
        monthly_rate_average=calculator.monthly_rate_average(),
        entries=[ScheduleEntrySchema(**asdict(entry)) for entry in entries],
        summary=ScheduleSummarySchema(**asdict(summary)),
    )


@router.post("/schedule/{month}", response_model=MonthResponse)
def get_schedule_month(
    month: int,
    request_body: ScheduleRequest,
    config: Settings = Depends(get_settings),
):
    """
    Compute the quantities of a single payment month.

    Returns:
        Rate, payment split and remaining balance for months 1..term_months
    """
    calculator = _calculator_for(request_body, config)

    return MonthResponse(
        kind=calculator.kind,
        month=month,
        due_date=calculator.due_date(month),
        monthly_rate=calculator.monthly_rate(month),
        monthly_payment=calculator.monthly_payment(month),
        principal_debt_payment=calculator.principal_debt_payment(month),
        interest_debt_payment=calculator.interest_debt_payment(month),
        monthly_loan_amount=calculator.monthly_loan_amount(month),
    )
