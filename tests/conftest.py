"""
Pytest configuration and shared fixtures for the Satang tests.
"""

import os
from datetime import datetime
from unittest.mock import patch

import pytest

from satang import create_app
from satang.config import reset_global_settings
from satang.models.cash_flow import CashFlowSnapshot
from satang.models.retirement import RetirementPlan

FIXED_TIMESTAMP = datetime(2025, 1, 15, 9, 30, 0)


@pytest.fixture
def make_snapshot():
    """Factory for cash-flow snapshots with sensible defaults."""

    def _make(**overrides):
        data = {
            "id": "cf-test-1",
            "monthly_income": 5000.0,
            "expenses": 2000.0,
            "debt": 500.0,
            "investments": 1000.0,
            "created_at": FIXED_TIMESTAMP,
            "updated_at": FIXED_TIMESTAMP,
        }
        data.update(overrides)
        return CashFlowSnapshot(**data)

    return _make


@pytest.fixture
def make_plan():
    """Factory for retirement plans with sensible defaults."""

    def _make(**overrides):
        data = {
            "id": "rp-test-1",
            "user_id": "default",
            "current_age": 30,
            "retirement_age": 60,
            "life_expectancy": 85,
            "monthly_savings": 10000.0,
            "expected_return_rate": 0.0,
            "inflation_adjusted": False,
            "monthly_expenses": 30000.0,
            "stocks": 5000.0,
            "funds": 3000.0,
            "cash": 2000.0,
            "created_at": FIXED_TIMESTAMP,
            "updated_at": FIXED_TIMESTAMP,
        }
        data.update(overrides)
        return RetirementPlan(**data)

    return _make


@pytest.fixture
def app():
    """Create a Flask application configured for testing."""
    reset_global_settings()
    with patch.dict(
        os.environ,
        {"SECRET_KEY": "test-secret-key-123", "APP_ENV": "testing"},
        clear=True,
    ):
        application = create_app()
    yield application
    reset_global_settings()


@pytest.fixture
def client(app):
    """Flask test client."""
    return app.test_client()
