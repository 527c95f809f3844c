"""
Numeric helpers shared by the calculators.
"""

import math


def clamp(value: float, lower: float, upper: float) -> float:
    """Clamp ``value`` into ``[lower, upper]``."""
    return max(lower, min(value, upper))


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round to ``ndigits`` decimals with halves going up.

    Python's ``round`` uses banker's rounding (``round(0.125, 2) == 0.12``);
    scores and ratios here round ``.5`` up instead. Non-finite values are
    returned unchanged.
    """
    if not math.isfinite(value):
        return value
    factor = 10**ndigits
    return math.floor(value * factor + 0.5) / factor


def round_to_int(value: float) -> int:
    """Round half up to the nearest integer."""
    return int(math.floor(value + 0.5))


def future_value_annuity_due(
    monthly_payment: float, monthly_rate: float, months: int
) -> float:
    """
    Future value of a monthly contribution made at the start of each month.

    FV = PMT * [((1 + r)^n - 1) / r] * (1 + r)

    Args:
        monthly_payment: Contribution per month
        monthly_rate: Periodic (monthly) rate as a fraction, may be negative
        months: Number of contributions

    Returns:
        Accumulated value after ``months`` months; the plain sum of
        contributions when the rate is zero
    """
    if months <= 0:
        return 0.0
    if monthly_rate == 0:
        return monthly_payment * months
    compound_factor = (1 + monthly_rate) ** months
    return monthly_payment * ((compound_factor - 1) / monthly_rate) * (1 + monthly_rate)
