"""Monthly withholding and net pay calculations.

Withholding tax is progressive over the monthly gross: each bracket taxes
only the slice of salary inside its range, so brackets below the salary
always contribute their full amount. A flat credit per dependent comes off
the bracket total, and the result never goes below zero.

tax_regime and meal_allowance_mode are carried into the result but do not
change any amount.
"""

import math
from datetime import datetime
from typing import Optional

from ..schemas import SimulationResult, ValidInput
from ..validation import MESSAGES, ValidationError


# Monthly brackets. Format: (upper_bound, rate)
WITHHOLDING_BRACKETS = [
    (1000, 0.11),
    (2000, 0.15),
    (float("inf"), 0.28),
]

DEPENDENT_CREDIT = 20
WORKING_DAYS_PER_MONTH = 22
# Twelve months plus holiday and Christmas subsidies
PAYMENTS_PER_YEAR = 14


def calc_bracket_tax(gross: float) -> float:
    """Tax on a monthly gross before dependent credits.

    Example:
        calc_bracket_tax(1500)  # 1000*0.11 + 500*0.15 = 185.0
    """
    tax = 0.0
    lower = 0.0
    for upper, rate in WITHHOLDING_BRACKETS:
        if gross <= lower:
            break
        tax += (min(gross, upper) - lower) * rate
        lower = upper
    return tax


def calc_income_tax(gross: float, dependents: int = 0) -> float:
    """Withholding tax for the month, after dependent credits, floored at 0."""
    tax = calc_bracket_tax(gross)
    credit = dependents * DEPENDENT_CREDIT
    if credit >= tax:
        return 0.0
    return tax - credit


def calc_social_security(gross: float, rate_percent: float) -> float:
    """Social security contribution; rate is a percentage (11 means 11%)."""
    return gross * rate_percent / 100


def calc_meal_allowance(daily: float) -> float:
    """Monthly meal allowance from the per-working-day amount."""
    return daily * WORKING_DAYS_PER_MONTH


def compute(valid: ValidInput, now: Optional[datetime] = None) -> SimulationResult:
    """Compute the full salary breakdown for a validated input.

    Args:
        valid: Output of validation.validate()
        now: Creation time for the timestamp label (default: current time)

    Returns:
        SimulationResult with all input fields plus computed amounts

    Raises:
        ValidationError: If the inputs are so large an amount overflows
    """
    if now is None:
        now = datetime.now()

    gross = valid.gross_salary
    social_security = calc_social_security(gross, valid.social_security_rate)
    income_tax = calc_income_tax(gross, valid.dependents)
    other = valid.other_deductions or 0.0
    meal = calc_meal_allowance(valid.meal_allowance_daily)

    net_monthly = gross - social_security - income_tax - other + meal
    net_annual = net_monthly * PAYMENTS_PER_YEAR

    amounts = (social_security, income_tax, meal, net_monthly, net_annual)
    if not all(math.isfinite(a) for a in amounts):
        raise ValidationError("amounts", MESSAGES["amounts"])

    return SimulationResult(
        **valid.model_dump(),
        social_security_amount=social_security,
        income_tax_amount=income_tax,
        other_deductions_amount=other,
        meal_allowance_amount=meal,
        net_monthly=net_monthly,
        net_annual_projected=net_annual,
        timestamp=now.strftime("%c"),
    )
