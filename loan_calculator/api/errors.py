"""Exception handlers mapping domain errors to HTTP responses"""

import logging
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from loan_calculator.api.dependencies import get_request_id
from loan_calculator.domain.exceptions import DomainException
from loan_calculator.infrastructure.observability.logging import log_rejection
from loan_calculator.infrastructure.observability.metrics import record_domain_error


async def domain_error_handler(request: Request, exc: DomainException) -> JSONResponse:
    """Invalid parameters and out-of-range months are client errors"""
    record_domain_error(exc)
    log_rejection(get_request_id(request), request.url.path, exc)
    return JSONResponse(status_code=422, content={"detail": str(exc)})


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logging.error(f"Unexpected error: {exc}", extra={"request_id": get_request_id(request)})
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainException, domain_error_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)
