"""
Exceptions raised by the calculation engine.
"""

from typing import Optional


class CalculationError(Exception):
    """Base exception for calculation errors."""


class RetirementValidationError(CalculationError, ValueError):
    """Raised when a retirement plan violates the age-ordering precondition.

    Attributes:
        field: Name of the plan field the error is attributed to
    """

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.field = field
