"""
Calculation engine: cash-flow health scoring and retirement projection.
"""

from .cash_flow import calculate_metrics, categorize_health
from .errors import CalculationError, RetirementValidationError
from .retirement import calculate_projection
from .timeline import INFLATION_RATE, generate_timeline

__all__ = [
    "calculate_metrics",
    "categorize_health",
    "calculate_projection",
    "generate_timeline",
    "INFLATION_RATE",
    "CalculationError",
    "RetirementValidationError",
]
