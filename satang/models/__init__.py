"""Data records for cash-flow and retirement calculations."""

from .cash_flow import CashFlowMetrics, CashFlowSnapshot, HealthCategory
from .forms import CashFlowInput, RetirementInput
from .retirement import (
    GapStatus,
    Phase,
    RetirementPlan,
    RetirementProjection,
    WealthDataPoint,
)

__all__ = [
    "CashFlowSnapshot",
    "CashFlowMetrics",
    "HealthCategory",
    "CashFlowInput",
    "RetirementInput",
    "RetirementPlan",
    "RetirementProjection",
    "WealthDataPoint",
    "GapStatus",
    "Phase",
]
