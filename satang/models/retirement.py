"""
Pydantic records for retirement plans, projections and wealth timelines.
"""

from datetime import datetime
from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class GapStatus(str, Enum):
    """Whether projected wealth covers the retirement target."""

    SURPLUS = "surplus"
    SHORTFALL = "shortfall"


class Phase(str, Enum):
    """Lifecycle phase of a wealth timeline point."""

    ACCUMULATION = "accumulation"
    WITHDRAWAL = "withdrawal"


class WealthDataPoint(BaseModel):
    """Projected wealth at one integer age."""

    model_config = ConfigDict(frozen=True)

    age: int = Field(..., description="Age in years")
    year: int = Field(..., description="Calendar year at this age")
    wealth: int = Field(..., ge=0, description="Wealth, rounded to whole THB")
    phase: Phase = Field(..., description="Accumulation or withdrawal")


class RetirementPlan(BaseModel):
    """User-entered retirement planning parameters.

    Age ordering (current < retirement < life expectancy) is a precondition
    checked by the calculator, not by this record.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Record identifier")
    user_id: str = Field(default="default", description="Owner identifier")
    current_age: int = Field(..., description="Current age in years")
    retirement_age: int = Field(..., description="Planned retirement age")
    life_expectancy: int = Field(..., description="Expected age at death")
    monthly_savings: float = Field(..., description="Monthly contribution (THB)")
    expected_return_rate: float = Field(
        ..., description="Expected annual return in percent (7 means 7%)"
    )
    inflation_adjusted: bool = Field(
        default=False, description="Grow retirement expenses with inflation"
    )
    monthly_expenses: float = Field(
        ..., description="Monthly expenses during retirement (THB)"
    )
    stocks: float = Field(..., description="Amount allocated to stocks")
    funds: float = Field(..., description="Amount allocated to mutual funds")
    cash: float = Field(..., description="Amount allocated to cash")
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: datetime = Field(..., description="Last update timestamp")


class RetirementProjection(RetirementPlan):
    """Plan fields plus the derived retirement projection."""

    years_to_retirement: int = Field(..., description="Years until retirement")
    retirement_years: int = Field(..., description="Years spent in retirement")
    total_invested: float = Field(..., description="Sum of contributions, no growth")
    projected_wealth: float = Field(
        ..., description="Future value of contributions at retirement"
    )
    target_wealth: float = Field(..., description="Nest egg required at retirement")
    gap: float = Field(..., description="projected_wealth - target_wealth")
    gap_status: GapStatus = Field(..., description="Surplus or shortfall")
    stock_percentage: float = Field(..., description="Stocks share of allocation (%)")
    fund_percentage: float = Field(..., description="Funds share of allocation (%)")
    cash_percentage: float = Field(..., description="Cash share of allocation (%)")
    wealth_timeline: List[WealthDataPoint] = Field(
        ..., description="One point per age from current age to life expectancy"
    )

    @property
    def accumulation_points(self) -> List[WealthDataPoint]:
        """Timeline points up to and including retirement age."""
        return [p for p in self.wealth_timeline if p.phase == Phase.ACCUMULATION]

    @property
    def withdrawal_points(self) -> List[WealthDataPoint]:
        """Timeline points after retirement age."""
        return [p for p in self.wealth_timeline if p.phase == Phase.WITHDRAWAL]
