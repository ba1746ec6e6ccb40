"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from loan_calculator.api.errors import register_error_handlers
from loan_calculator.api.middleware import RequestIDMiddleware, MetricsMiddleware
from loan_calculator.api.v1 import schedule
from loan_calculator.infrastructure.observability.logging import setup_logging
from loan_calculator.config import settings

setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Schedule API with request tracing, latency metrics and domain error mapping"""
    app = FastAPI(
        title="Loan Calculator",
        description="Annuity and differentiated loan repayment schedules",
        version="0.1.0",
    )

    # Last added runs first: request ID is set before metrics are timed
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)
    register_error_handlers(app)

    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    app.include_router(schedule.router, prefix="/v1", tags=["schedules"])

    return app


app = create_app()
