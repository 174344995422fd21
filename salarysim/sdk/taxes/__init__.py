"""taxes - Withholding tax and net pay calculations.

Scope:
- Progressive monthly withholding brackets with dependent credits
- Social security, meal allowance, net monthly and annual projection

Constraints:
- Pure calculation - no config, no history access
- Receives a ValidInput, returns a SimulationResult

Usage:
    from salarysim.sdk.taxes import compute, calc_income_tax

    result = compute(valid_input)
    tax = calc_income_tax(gross=1500, dependents=1)  # 165.0
"""

from .withholding import (
    WITHHOLDING_BRACKETS,
    DEPENDENT_CREDIT,
    WORKING_DAYS_PER_MONTH,
    PAYMENTS_PER_YEAR,
    calc_bracket_tax,
    calc_income_tax,
    calc_social_security,
    calc_meal_allowance,
    compute,
)

__all__ = [
    "WITHHOLDING_BRACKETS",
    "DEPENDENT_CREDIT",
    "WORKING_DAYS_PER_MONTH",
    "PAYMENTS_PER_YEAR",
    "calc_bracket_tax",
    "calc_income_tax",
    "calc_social_security",
    "calc_meal_allowance",
    "compute",
]
