"""
Wealth timeline generator for retirement projections.

Produces one point per integer age: an accumulation phase that tracks the
annuity-due future value of monthly contributions, followed by a withdrawal
phase that compounds the remaining wealth yearly and draws down expenses,
floored at zero.
"""

from datetime import datetime
from typing import List, Optional

from satang.models.retirement import Phase, WealthDataPoint

from .numeric import future_value_annuity_due, round_to_int

# Annual inflation applied to retirement expenses (Thailand average)
INFLATION_RATE = 0.04


def get_current_year() -> int:
    """Get the current calendar year."""
    return datetime.now().year


def yearly_expenses_at(
    annual_expenses: float, years_into_retirement: int, inflation_adjusted: bool
) -> float:
    """Expenses drawn in a given retirement year."""
    if not inflation_adjusted:
        return annual_expenses
    return annual_expenses * (1 + INFLATION_RATE) ** years_into_retirement


def generate_timeline(
    current_age: int,
    retirement_age: int,
    life_expectancy: int,
    monthly_savings: float,
    monthly_rate: float,
    monthly_expenses: float,
    inflation_adjusted: bool,
    current_year: Optional[int] = None,
) -> List[WealthDataPoint]:
    """
    Generate the year-by-year wealth timeline.

    Args:
        current_age: Age at the first point
        retirement_age: Age at the last accumulation point
        life_expectancy: Age at the last withdrawal point
        monthly_savings: Contribution per month until retirement
        monthly_rate: Monthly return as a fraction
        monthly_expenses: Monthly spending during retirement
        inflation_adjusted: Grow expenses at INFLATION_RATE per year
        current_year: Calendar year of ``current_age`` (defaults to now)

    Returns:
        Points in ascending age order, ``life_expectancy - current_age + 1`` long
    """
    if current_year is None:
        current_year = get_current_year()

    timeline: List[WealthDataPoint] = []
    wealth = 0.0

    for age in range(current_age, retirement_age + 1):
        years_elapsed = age - current_age
        wealth = future_value_annuity_due(
            monthly_savings, monthly_rate, years_elapsed * 12
        )
        timeline.append(
            WealthDataPoint(
                age=age,
                year=current_year + years_elapsed,
                wealth=round_to_int(wealth),
                phase=Phase.ACCUMULATION,
            )
        )

    # Drawdown continues from the unrounded wealth at retirement
    annual_expenses = monthly_expenses * 12
    annual_rate = monthly_rate * 12

    for age in range(retirement_age + 1, life_expectancy + 1):
        expenses = yearly_expenses_at(
            annual_expenses, age - retirement_age, inflation_adjusted
        )
        wealth = max(0.0, wealth * (1 + annual_rate) - expenses)
        timeline.append(
            WealthDataPoint(
                age=age,
                year=current_year + (age - current_age),
                wealth=round_to_int(wealth),
                phase=Phase.WITHDRAWAL,
            )
        )

    return timeline
