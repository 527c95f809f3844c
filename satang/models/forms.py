"""
Form-level input schemas for cash-flow and retirement entries.

These are the validation rules applied before a record is stored and handed
to the calculators. The calculators trust their inputs, so non-finite numbers
(``Infinity``, ``NaN``) are rejected here along with out-of-range entries.
"""

import uuid
from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .cash_flow import CashFlowSnapshot
from .retirement import RetirementPlan

MAX_MONTHLY_INCOME = 10_000_000
MAX_MONTHLY_AMOUNT = 1_000_000
DEFAULT_MONTHLY_EXPENSES = 80_000


def _new_id() -> str:
    return str(uuid.uuid4())


class CashFlowInput(BaseModel):
    """Validated cash-flow form entry."""

    model_config = ConfigDict(allow_inf_nan=False)

    id: str = Field(default_factory=_new_id, description="Record identifier")
    monthly_income: float = Field(
        ..., gt=0, le=MAX_MONTHLY_INCOME, description="Monthly income (THB)"
    )
    expenses: float = Field(..., ge=0, description="Monthly living expenses (THB)")
    debt: float = Field(..., ge=0, description="Monthly debt payments (THB)")
    investments: float = Field(..., ge=0, description="Monthly investments (THB)")
    created_at: Optional[datetime] = Field(default=None, description="Created at")
    updated_at: Optional[datetime] = Field(default=None, description="Updated at")

    @model_validator(mode="after")
    def validate_total_allocations(self):
        total = self.expenses + self.debt + self.investments
        if total > self.monthly_income:
            raise ValueError(
                f"Total allocations exceed income ({total} > {self.monthly_income})"
            )
        return self

    def to_snapshot(self, now: Optional[datetime] = None) -> CashFlowSnapshot:
        """Build the engine snapshot, stamping missing timestamps with ``now``."""
        now = now or datetime.now(timezone.utc)
        return CashFlowSnapshot(
            id=self.id,
            monthly_income=self.monthly_income,
            expenses=self.expenses,
            debt=self.debt,
            investments=self.investments,
            created_at=self.created_at or now,
            updated_at=self.updated_at or now,
        )


class RetirementInput(BaseModel):
    """Validated retirement planning form entry."""

    model_config = ConfigDict(allow_inf_nan=False)

    id: str = Field(default_factory=_new_id, description="Record identifier")
    user_id: str = Field(default="default", description="Owner identifier")
    current_age: int = Field(..., ge=18, le=100, description="Current age")
    retirement_age: int = Field(..., le=100, description="Planned retirement age")
    life_expectancy: int = Field(..., le=120, description="Expected age at death")
    monthly_savings: float = Field(
        ..., ge=0, le=MAX_MONTHLY_AMOUNT, description="Monthly contribution (THB)"
    )
    expected_return_rate: float = Field(
        ..., ge=-10, le=20, description="Expected annual return (%)"
    )
    inflation_adjusted: bool = Field(default=False, description="Inflate expenses")
    monthly_expenses: float = Field(
        default=DEFAULT_MONTHLY_EXPENSES,
        ge=0,
        le=MAX_MONTHLY_AMOUNT,
        description="Monthly expenses in retirement (THB)",
    )
    stocks: float = Field(..., ge=0, description="Stocks allocation")
    funds: float = Field(..., ge=0, description="Funds allocation")
    cash: float = Field(..., ge=0, description="Cash allocation")
    created_at: Optional[datetime] = Field(default=None, description="Created at")
    updated_at: Optional[datetime] = Field(default=None, description="Updated at")

    @model_validator(mode="after")
    def validate_age_ordering(self):
        if self.retirement_age <= self.current_age:
            raise ValueError("Retirement age must be greater than current age")
        if self.life_expectancy <= self.retirement_age:
            raise ValueError("Life expectancy must be greater than retirement age")
        return self

    def to_plan(self, now: Optional[datetime] = None) -> RetirementPlan:
        """Build the engine plan, stamping missing timestamps with ``now``."""
        now = now or datetime.now(timezone.utc)
        data = self.model_dump()
        data["created_at"] = self.created_at or now
        data["updated_at"] = self.updated_at or now
        return RetirementPlan(**data)
