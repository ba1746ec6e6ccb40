"""Structured JSON logging for schedule requests"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict
from pythonjsonlogger import jsonlogger

from loan_calculator.config import settings


class ServiceJsonFormatter(jsonlogger.JsonFormatter):
    """JSON records stamped with UTC time, level and the configured service name"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str = "INFO") -> None:
    """Route every logger to one JSON stdout handler"""
    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(ServiceJsonFormatter("%(timestamp)s %(level)s %(name)s %(message)s"))
    root.addHandler(handler)


def log_schedule(
    request_id: str,
    kind: str,
    term_months: int,
    principal: int,
    duration_ms: float,
) -> None:
    """One record per computed schedule"""
    logging.info(
        "Schedule computed",
        extra={
            "request_id": request_id,
            "step": "schedule_complete",
            "repayment_kind": kind,
            "term_months": term_months,
            "principal": principal,
            "duration_ms": duration_ms,
        },
    )


def log_rejection(request_id: str, path: str, error: Exception) -> None:
    """Warn about a request refused for invalid loan parameters or months"""
    logging.warning(
        "Schedule request rejected",
        extra={
            "request_id": request_id,
            "step": "schedule_rejected",
            "path": path,
            "error": type(error).__name__,
            "reason": str(error),
        },
    )
