"""Pytest fixtures for testing"""

import pytest
from datetime import date
from fastapi.testclient import TestClient
from loan_calculator.api.main import create_app
from loan_calculator.domain.amortization import AnnuityCalculator, DifferentiatedCalculator
from loan_calculator.domain.models import LoanParameters


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client"""
    app = create_app()
    return TestClient(app)


@pytest.fixture
def loan_parameters() -> LoanParameters:
    """120000 over one year at 12%, starting in a non-leap January"""
    return LoanParameters(
        term_months=12,
        start_date=date(2023, 1, 1),
        principal=120000,
        annual_rate=12.0,
    )


@pytest.fixture
def annuity(loan_parameters: LoanParameters) -> AnnuityCalculator:
    return AnnuityCalculator(loan_parameters)


@pytest.fixture
def differentiated(loan_parameters: LoanParameters) -> DifferentiatedCalculator:
    return DifferentiatedCalculator(loan_parameters)


@pytest.fixture
def schedule_request() -> dict:
    """Request body for the schedule endpoints"""
    return {
        "kind": "differentiated",
        "term_months": 12,
        "start_date": "2023-01-01",
        "principal": 120000,
        "annual_rate": 12.0,
    }
