"""
Pydantic records for monthly cash-flow snapshots and their derived metrics.

The snapshot is the trusted engine input. Only the allocation buckets are
bounded (non-negative); a snapshot with zero income or over-allocated buckets
is still representable and the calculator degrades gracefully on it.
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class HealthCategory(str, Enum):
    """Four-tier financial health judgment."""

    EXCELLENT = "Excellent"
    GOOD = "Good"
    FAIR = "Fair"
    POOR = "Poor"


class CashFlowSnapshot(BaseModel):
    """One point-in-time monthly cash-flow entry."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Record identifier")
    monthly_income: float = Field(..., description="Monthly income (THB)")
    expenses: float = Field(..., ge=0, description="Monthly living expenses (THB)")
    debt: float = Field(..., ge=0, description="Monthly debt payments (THB)")
    investments: float = Field(
        ..., ge=0, description="Monthly investments/savings (THB)"
    )
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: datetime = Field(..., description="Last update timestamp")

    @property
    def total_allocations(self) -> float:
        """Sum of the three allocation buckets."""
        return self.expenses + self.debt + self.investments


class CashFlowMetrics(CashFlowSnapshot):
    """Snapshot fields plus derived cash-flow health metrics."""

    model_config = ConfigDict(frozen=True, ser_json_inf_nan="constants")

    remaining_cash: float = Field(
        ..., description="Income left after all allocations (may be negative)"
    )
    financial_health_score: int = Field(
        ..., ge=0, le=100, description="Weighted health score (0-100)"
    )
    debt_to_equity_ratio: float = Field(
        ..., ge=0, description="Debt / (income - debt); inf when equity is exhausted"
    )
    saving_ratio: float = Field(..., description="Investments / income")
    health_category: HealthCategory = Field(..., description="Health tier")
