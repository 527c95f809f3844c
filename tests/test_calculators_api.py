"""
Tests for the calculator API blueprint.
"""

import json
import math
from unittest.mock import patch

import pytest

from satang.calculators import RetirementValidationError

CASH_FLOW_URL = "/api/cash-flow/metrics"
RETIREMENT_URL = "/api/retirement/projection"


def _retirement_body(**overrides):
    body = {
        "id": "rp-api-1",
        "current_age": 30,
        "retirement_age": 60,
        "life_expectancy": 85,
        "monthly_savings": 10000,
        "expected_return_rate": 0,
        "monthly_expenses": 30000,
        "stocks": 5000,
        "funds": 3000,
        "cash": 2000,
    }
    body.update(overrides)
    return body


class TestCashFlowEndpoint:
    """Test POST /api/cash-flow/metrics."""

    def test_metrics(self, client):
        response = client.post(
            CASH_FLOW_URL,
            json={
                "id": "cf-api-1",
                "monthly_income": 5000,
                "expenses": 2000,
                "debt": 500,
                "investments": 1000,
            },
        )

        assert response.status_code == 200
        data = response.get_json()
        assert data["id"] == "cf-api-1"
        assert data["remaining_cash"] == 1500
        assert data["debt_to_equity_ratio"] == 0.11
        assert data["saving_ratio"] == 0.2
        assert data["financial_health_score"] == 73
        assert data["health_category"] == "Good"
        assert "created_at" in data and "updated_at" in data

    def test_infinite_debt_to_equity_serialized(self, client):
        response = client.post(
            CASH_FLOW_URL,
            json={"monthly_income": 1000, "expenses": 0, "debt": 1000, "investments": 0},
        )

        assert response.status_code == 200
        assert math.isinf(response.get_json()["debt_to_equity_ratio"])

    def test_over_allocation_rejected(self, client):
        response = client.post(
            CASH_FLOW_URL,
            json={"monthly_income": 1000, "expenses": 900, "debt": 200, "investments": 0},
        )

        assert response.status_code == 400
        data = response.get_json()
        assert data["error"] == "Invalid input"
        assert "Total allocations exceed income" in data["details"][0]["message"]

    def test_missing_body(self, client):
        response = client.post(CASH_FLOW_URL)

        assert response.status_code == 400
        fields = {detail["field"] for detail in response.get_json()["details"]}
        assert "monthly_income" in fields

    def test_unexpected_error(self, client):
        with patch(
            "satang.blueprints.calculators.calculate_metrics",
            side_effect=RuntimeError("boom"),
        ):
            response = client.post(
                CASH_FLOW_URL,
                json={"monthly_income": 1000, "expenses": 0, "debt": 0, "investments": 0},
            )

        assert response.status_code == 500
        assert response.get_json() == {"error": "Internal server error"}

    @pytest.mark.parametrize("token", ["Infinity", "-Infinity", "NaN"])
    def test_non_finite_amount_rejected(self, client, token):
        body = '{"monthly_income": 5000, "expenses": 0, "debt": %s, "investments": 0}'

        response = client.post(
            CASH_FLOW_URL, data=body % token, content_type="application/json"
        )

        assert response.status_code == 400
        fields = {detail["field"] for detail in response.get_json()["details"]}
        assert fields == {"debt"}


class TestRetirementEndpoint:
    """Test POST /api/retirement/projection."""

    def test_projection(self, client):
        response = client.post(f"{RETIREMENT_URL}?current_year=2025", json=_retirement_body())

        assert response.status_code == 200
        data = response.get_json()
        assert data["id"] == "rp-api-1"
        assert data["user_id"] == "default"
        assert data["total_invested"] == 3_600_000
        assert data["projected_wealth"] == 3_600_000
        assert data["target_wealth"] == 9_000_000
        assert data["gap"] == -5_400_000
        assert data["gap_status"] == "shortfall"

        timeline = data["wealth_timeline"]
        assert len(timeline) == 56
        assert timeline[0] == {
            "age": 30,
            "year": 2025,
            "wealth": 0,
            "phase": "accumulation",
        }
        assert timeline[31]["phase"] == "withdrawal"

    def test_age_ordering_rejected_by_schema(self, client):
        response = client.post(
            RETIREMENT_URL, json=_retirement_body(current_age=60, retirement_age=55)
        )

        assert response.status_code == 400
        assert "Retirement age must be greater than current age" in (
            response.get_json()["details"][0]["message"]
        )

    def test_calculator_validation_error(self, client):
        with patch(
            "satang.blueprints.calculators.calculate_projection",
            side_effect=RetirementValidationError(
                "Life expectancy must be greater than retirement age",
                field="life_expectancy",
            ),
        ):
            response = client.post(RETIREMENT_URL, json=_retirement_body())

        assert response.status_code == 422
        assert response.get_json() == {
            "error": "Life expectancy must be greater than retirement age",
            "field": "life_expectancy",
        }

    def test_unexpected_error(self, client):
        with patch(
            "satang.blueprints.calculators.calculate_projection",
            side_effect=RuntimeError("boom"),
        ):
            response = client.post(RETIREMENT_URL, json=_retirement_body())

        assert response.status_code == 500

    @pytest.mark.parametrize("token", ["Infinity", "NaN"])
    def test_non_finite_allocation_rejected(self, client, token):
        body = json.dumps(_retirement_body()).replace('"stocks": 5000', f'"stocks": {token}')

        response = client.post(RETIREMENT_URL, data=body, content_type="application/json")

        assert response.status_code == 400
        fields = {detail["field"] for detail in response.get_json()["details"]}
        assert fields == {"stocks"}
