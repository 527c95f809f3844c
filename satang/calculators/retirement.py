"""
Retirement projection calculator.

Projects the future value of monthly savings to retirement, compares it with
the nest egg needed to cover retirement expenses, splits the portfolio into
percentages and attaches the wealth timeline.
"""

import logging
from typing import Optional, Tuple

from satang.models.retirement import GapStatus, RetirementPlan, RetirementProjection

from .errors import RetirementValidationError
from .numeric import future_value_annuity_due
from .timeline import INFLATION_RATE, generate_timeline

logger = logging.getLogger(__name__)


def validate_plan(plan: RetirementPlan) -> None:
    """
    Check the age-ordering precondition.

    Raises:
        RetirementValidationError: If current age >= retirement age or
            retirement age >= life expectancy
    """
    if plan.current_age >= plan.retirement_age:
        raise RetirementValidationError(
            "Retirement age must be greater than current age", field="retirement_age"
        )
    if plan.retirement_age >= plan.life_expectancy:
        raise RetirementValidationError(
            "Life expectancy must be greater than retirement age",
            field="life_expectancy",
        )


def calculate_target_wealth(
    monthly_expenses: float, retirement_years: int, inflation_adjusted: bool
) -> float:
    """
    Nest egg required to fund retirement expenses.

    Without inflation this is annual expenses times retirement years. With
    inflation it is the sum of a growing annuity at INFLATION_RATE:
    annual * ((1 + i)^n - 1) / i.
    """
    annual_expenses = monthly_expenses * 12
    if not inflation_adjusted:
        return annual_expenses * retirement_years
    inflation_factor = ((1 + INFLATION_RATE) ** retirement_years - 1) / INFLATION_RATE
    return annual_expenses * inflation_factor


def calculate_allocation_percentages(
    stocks: float, funds: float, cash: float
) -> Tuple[float, float, float]:
    """Percentages of stocks, funds and cash; all zero for an empty portfolio."""
    total = stocks + funds + cash
    if total <= 0:
        return 0.0, 0.0, 0.0
    return stocks / total * 100, funds / total * 100, cash / total * 100


def calculate_projection(
    plan: RetirementPlan, current_year: Optional[int] = None
) -> RetirementProjection:
    """
    Calculate the retirement projection for a plan.

    Args:
        plan: Retirement planning parameters
        current_year: Calendar year for the timeline (defaults to now)

    Returns:
        RetirementProjection with every plan field plus the derived figures

    Raises:
        RetirementValidationError: If the ages are not strictly increasing
    """
    try:
        validate_plan(plan)
    except RetirementValidationError as e:
        logger.warning("Rejected retirement plan %s: %s", plan.id, e.message)
        raise

    years_to_retirement = plan.retirement_age - plan.current_age
    retirement_years = plan.life_expectancy - plan.retirement_age
    months_to_retirement = years_to_retirement * 12

    total_invested = plan.monthly_savings * months_to_retirement

    monthly_rate = plan.expected_return_rate / 100 / 12
    if monthly_rate == 0:
        projected_wealth = total_invested
    else:
        projected_wealth = future_value_annuity_due(
            plan.monthly_savings, monthly_rate, months_to_retirement
        )

    target_wealth = calculate_target_wealth(
        plan.monthly_expenses, retirement_years, plan.inflation_adjusted
    )
    gap = projected_wealth - target_wealth
    gap_status = GapStatus.SURPLUS if gap >= 0 else GapStatus.SHORTFALL

    stock_pct, fund_pct, cash_pct = calculate_allocation_percentages(
        plan.stocks, plan.funds, plan.cash
    )

    wealth_timeline = generate_timeline(
        plan.current_age,
        plan.retirement_age,
        plan.life_expectancy,
        plan.monthly_savings,
        monthly_rate,
        plan.monthly_expenses,
        plan.inflation_adjusted,
        current_year=current_year,
    )

    logger.debug(
        "Retirement plan %s: projected=%.2f target=%.2f gap=%.2f (%s)",
        plan.id,
        projected_wealth,
        target_wealth,
        gap,
        gap_status.value,
    )

    return RetirementProjection(
        **plan.model_dump(),
        years_to_retirement=years_to_retirement,
        retirement_years=retirement_years,
        total_invested=total_invested,
        projected_wealth=projected_wealth,
        target_wealth=target_wealth,
        gap=gap,
        gap_status=gap_status,
        stock_percentage=stock_pct,
        fund_percentage=fund_pct,
        cash_percentage=cash_pct,
        wealth_timeline=wealth_timeline,
    )
