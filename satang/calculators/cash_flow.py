"""
Cash-flow health calculator.

Scores a monthly budget out of 100 from three weighted factors:

- Saving ratio: 40 points, full marks at a 20% saving rate
- Remaining cash ratio: 35 points, negative when over-allocated
- Debt to equity: 25 points, decaying as leverage grows
"""

import logging
import math

from satang.models.cash_flow import CashFlowMetrics, CashFlowSnapshot, HealthCategory

from .numeric import clamp, round_half_up, round_to_int

logger = logging.getLogger(__name__)

TARGET_SAVING_RATIO = 0.2
SAVING_WEIGHT = 40.0
CASH_WEIGHT = 35.0
DEBT_WEIGHT = 25.0

# Lower bound of each category, checked in order
HEALTH_THRESHOLDS = (
    (80, HealthCategory.EXCELLENT),
    (60, HealthCategory.GOOD),
    (40, HealthCategory.FAIR),
)


def categorize_health(score: float) -> HealthCategory:
    """Map a health score to its category."""
    for threshold, category in HEALTH_THRESHOLDS:
        if score >= threshold:
            return category
    return HealthCategory.POOR


def calculate_debt_to_equity(monthly_income: float, debt: float) -> float:
    """
    Debt to equity, with equity taken as income left after debt payments.

    Returns ``math.inf`` when debt exists but equity is exhausted, and 0 when
    there is neither debt nor equity.
    """
    equity = monthly_income - debt
    if equity > 0:
        return debt / equity
    if debt > 0:
        return math.inf
    return 0.0


def calculate_health_score(
    saving_ratio: float, remaining_cash_ratio: float, debt_to_equity_ratio: float
) -> float:
    """Unrounded weighted health score, clamped to [0, 100]."""
    saving_score = min(
        (saving_ratio / TARGET_SAVING_RATIO) * SAVING_WEIGHT, SAVING_WEIGHT
    )
    cash_score = clamp(remaining_cash_ratio * 100 * 0.35, -CASH_WEIGHT, CASH_WEIGHT)
    # 1/(1+inf) is 0.0, so unbounded leverage scores nothing here
    de_ratio = 1 / (1 + debt_to_equity_ratio) if debt_to_equity_ratio > 0 else 1.0
    de_score = min(de_ratio * DEBT_WEIGHT, DEBT_WEIGHT)
    return clamp(saving_score + cash_score + de_score, 0.0, 100.0)


def calculate_metrics(snapshot: CashFlowSnapshot) -> CashFlowMetrics:
    """
    Derive cash-flow health metrics from one snapshot.

    Never raises: a snapshot with non-positive income yields a zero score and
    a Poor category instead of dividing by zero.

    Args:
        snapshot: Monthly cash-flow entry

    Returns:
        CashFlowMetrics with every snapshot field plus the derived metrics
    """
    income = snapshot.monthly_income
    base = snapshot.model_dump()

    if income <= 0:
        logger.warning(
            "Cash flow %s has non-positive income %s; scoring as Poor",
            snapshot.id,
            income,
        )
        return CashFlowMetrics(
            **base,
            remaining_cash=-snapshot.total_allocations,
            financial_health_score=0,
            debt_to_equity_ratio=0.0,
            saving_ratio=0.0,
            health_category=HealthCategory.POOR,
        )

    remaining_cash = income - snapshot.total_allocations
    debt_to_equity_ratio = calculate_debt_to_equity(income, snapshot.debt)
    saving_ratio = snapshot.investments / income

    remaining_cash_ratio = remaining_cash / income
    score = round_to_int(
        calculate_health_score(saving_ratio, remaining_cash_ratio, debt_to_equity_ratio)
    )
    category = categorize_health(score)

    logger.debug(
        "Cash flow %s: remaining=%.2f score=%d category=%s",
        snapshot.id,
        remaining_cash,
        score,
        category.value,
    )

    return CashFlowMetrics(
        **base,
        remaining_cash=remaining_cash,
        financial_health_score=score,
        debt_to_equity_ratio=round_half_up(debt_to_equity_ratio, 2),
        saving_ratio=round_half_up(saving_ratio, 2),
        health_category=category,
    )
