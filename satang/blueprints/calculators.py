"""
Calculator blueprint for the dashboard's cash-flow and retirement views.

Each endpoint validates the posted form against its input schema, runs the
matching calculator and returns the derived record as JSON.
"""

from typing import Any

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from satang.calculators import (
    RetirementValidationError,
    calculate_metrics,
    calculate_projection,
)
from satang.models.forms import CashFlowInput, RetirementInput

calculators_bp = Blueprint("calculators", __name__, url_prefix="/api")


def _validation_error_response(error: ValidationError) -> Any:
    details = [
        {
            "field": ".".join(str(part) for part in err["loc"]),
            "message": err["msg"],
        }
        for err in error.errors(include_url=False)
    ]
    return jsonify({"error": "Invalid input", "details": details}), 400


@calculators_bp.route("/cash-flow/metrics", methods=["POST"])
def cash_flow_metrics() -> Any:
    """Calculate cash-flow health metrics for a posted snapshot.

    Returns:
        JSON response with the snapshot fields and derived metrics
    """
    try:
        form = CashFlowInput.model_validate(request.get_json(silent=True) or {})
    except ValidationError as e:
        return _validation_error_response(e)

    try:
        metrics = calculate_metrics(form.to_snapshot())
        return jsonify(metrics.model_dump(mode="json")), 200

    except Exception as e:
        current_app.logger.error(f"Error calculating cash flow metrics: {str(e)}")
        return jsonify({"error": "Internal server error"}), 500


@calculators_bp.route("/retirement/projection", methods=["POST"])
def retirement_projection() -> Any:
    """Calculate the retirement projection for a posted plan.

    Query parameters:
        current_year: Optional calendar year to anchor the wealth timeline

    Returns:
        JSON response with the plan fields, projection and wealth timeline
    """
    try:
        form = RetirementInput.model_validate(request.get_json(silent=True) or {})
    except ValidationError as e:
        return _validation_error_response(e)

    current_year = request.args.get("current_year", type=int)

    try:
        projection = calculate_projection(form.to_plan(), current_year=current_year)
        return jsonify(projection.model_dump(mode="json")), 200

    except RetirementValidationError as e:
        return jsonify({"error": e.message, "field": e.field}), 422

    except Exception as e:
        current_app.logger.error(f"Error calculating retirement projection: {str(e)}")
        return jsonify({"error": "Internal server error"}), 500
